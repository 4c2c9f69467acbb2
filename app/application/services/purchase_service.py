"""Purchase service — records stock-in and keeps the Store table in step."""

from datetime import date
from typing import Any, Dict, List

import structlog
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.application.services import stock_ledger
from app.application.services.stock_ledger import Dimensions
from app.core.exceptions import EntityNotFoundException, ValidationException
from app.domain.models.purchase import Purchase
from app.domain.repositories.purchase_repository import PurchaseRepository
from app.domain.repositories.store_repository import StoreRepository
from app.domain.schemas.purchase import PurchaseCreate, PurchaseUpdate
from app.infrastructure.database import atomic

logger = structlog.get_logger(__name__)


def create_purchase(
    db: Session,
    purchases: PurchaseRepository,
    stores: StoreRepository,
    body: PurchaseCreate,
) -> Purchase:
    """Insert a purchase and add its feet to the store, as one unit."""
    with atomic(db):
        purchase = purchases.add(Purchase(**body.model_dump()))
        feet = purchase.feet
        stock_ledger.upsert_on_purchase(
            stores, purchase.product_code, purchase.company, Dimensions.of(purchase), feet
        )

    logger.info("Purchase recorded", purchase_id=purchase.id, product_code=purchase.product_code, feet=round(feet, 4))
    return purchase


def update_purchase(
    db: Session,
    purchases: PurchaseRepository,
    stores: StoreRepository,
    purchase_id: int,
    body: PurchaseUpdate,
) -> Purchase:
    """Apply a partial update and move the stock difference.

    If the product code changes, the original feet come off the old store row
    and the recomputed feet go onto the (possibly new) row for the new code.
    """
    with atomic(db):
        purchase = purchases.get_by_id(purchase_id, for_update=True)
        if not purchase:
            raise EntityNotFoundException("Purchase not found", {"id": purchase_id})

        changes = body.model_dump(exclude_unset=True, exclude_none=True)
        merged = _merge(purchase, changes)

        old_code = purchase.product_code
        old_feet = purchase.feet

        for field, value in changes.items():
            setattr(purchase, field, value)
        new_feet = purchase.feet

        stock_ledger.reverse(stores, old_code, -old_feet)
        stock_ledger.upsert_on_purchase(
            stores, merged.product_code, merged.company, Dimensions.of(merged), new_feet
        )

    logger.info(
        "Purchase updated",
        purchase_id=purchase.id,
        old_product_code=old_code,
        product_code=purchase.product_code,
        old_feet=round(old_feet, 4),
        new_feet=round(new_feet, 4),
    )
    return purchase


def delete_purchase(
    db: Session,
    purchases: PurchaseRepository,
    stores: StoreRepository,
    purchase_id: int,
) -> None:
    """Delete a purchase and take its feet back out of the store (clamped at zero)."""
    with atomic(db):
        purchase = purchases.get_by_id(purchase_id, for_update=True)
        if not purchase:
            raise EntityNotFoundException("Purchase not found", {"id": purchase_id})

        product_code = purchase.product_code
        feet = purchase.feet
        stock_ledger.reverse(stores, product_code, -feet)
        purchases.delete(purchase)

    logger.info("Purchase deleted", purchase_id=purchase_id, product_code=product_code, feet=round(feet, 4))


def get_purchase(purchases: PurchaseRepository, purchase_id: int) -> Purchase:
    purchase = purchases.get_by_id(purchase_id)
    if not purchase:
        raise EntityNotFoundException("Purchase not found", {"id": purchase_id})
    return purchase


def list_purchases(purchases: PurchaseRepository) -> List[Purchase]:
    return purchases.list_all()


def get_purchase_history(purchases: PurchaseRepository, page: int, limit: int) -> Dict[str, Any]:
    """Newest purchases first, paginated."""
    return purchases.paginate(page, limit, order_by=(Purchase.created_at.desc(), Purchase.id.desc()))


def get_purchase_totals_for_date(purchases: PurchaseRepository, day: date) -> List[Dict[str, Any]]:
    return purchases.totals_for_date(day)


def _merge(purchase: Purchase, changes: Dict[str, Any]) -> PurchaseCreate:
    """Validate the record as it will look after the update."""
    current = {
        "product_code": purchase.product_code,
        "company": purchase.company,
        "caton": purchase.caton,
        "pcs": purchase.pcs,
        "height": purchase.height,
        "width": purchase.width,
        "per_caton_to_pcs": purchase.per_caton_to_pcs,
        "date": purchase.date,
    }
    try:
        return PurchaseCreate(**{**current, **changes})
    except ValidationError as e:
        messages = [err["msg"].removeprefix("Value error, ") for err in e.errors()]
        raise ValidationException(", ".join(messages)) from e
