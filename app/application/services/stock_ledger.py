"""Stock ledger — the update rules for the Store table.

All functions run inside the caller's atomic unit and lock the rows they touch,
so two concurrent sales against the same product serialize on the store row.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Optional

import structlog

from app.core.exceptions import EntityNotFoundException, InsufficientStockException
from app.domain.models.store import Store
from app.domain.repositories.store_repository import StoreRepository

logger = structlog.get_logger(__name__)

# Slack for measurement/rounding when checking a sale against available stock
SALE_TOLERANCE_FEET = 0.3

# Reversals that found no store row, per product code. Reported by the audit.
skipped_reversals: Counter = Counter()


@dataclass(frozen=True)
class Dimensions:
    height: float
    width: float
    per_caton_to_pcs: float

    @classmethod
    def of(cls, obj) -> "Dimensions":
        return cls(obj.height, obj.width, obj.per_caton_to_pcs)


def upsert_on_purchase(
    repo: StoreRepository,
    product_code: str,
    company: str,
    dims: Dimensions,
    delta_feet: float,
) -> Store:
    """Add purchased feet to a product's stock row, opening the row if needed."""
    store = repo.get_by_code(product_code, for_update=True)
    if store:
        store.feet = max(0.0, store.feet + delta_feet)
        return store

    store = Store(
        product_code=product_code,
        company=company,
        feet=max(0.0, delta_feet),
        height=dims.height,
        width=dims.width,
        per_caton_to_pcs=dims.per_caton_to_pcs,
    )
    logger.info("Store row opened", product_code=product_code, feet=store.feet)
    return repo.add(store)


def apply_sale_or_fail(
    repo: StoreRepository,
    product_code: str,
    sell_feet: float,
    tolerance: float = SALE_TOLERANCE_FEET,
) -> Store:
    """Take `sell_feet` out of stock or raise without touching the row.

    Raises:
        EntityNotFoundException: no stock row exists for the product.
        InsufficientStockException: `feet + tolerance < sell_feet`.
    """
    store = repo.get_by_code(product_code, for_update=True)
    if store is None:
        raise EntityNotFoundException(
            f"Product {product_code} not found in store",
            {"product_code": product_code},
        )

    if store.feet + tolerance < sell_feet:
        raise InsufficientStockException(product_code, store.feet, sell_feet)

    store.feet = max(0.0, store.feet - sell_feet)
    return store


def reverse(repo: StoreRepository, product_code: str, delta_feet: float) -> Optional[Store]:
    """Undo an earlier contribution: `feet = max(0, feet + delta_feet)`.

    Never fails. A missing row is logged and counted, then skipped, so a
    correction to a purchase or sale is never blocked by an absent stock row.
    """
    store = repo.get_by_code(product_code, for_update=True)
    if store is None:
        skipped_reversals[product_code] += 1
        logger.warning(
            "Stock reversal skipped, store row missing",
            product_code=product_code,
            delta_feet=round(delta_feet, 4),
            skipped_total=skipped_reversals[product_code],
        )
        return None

    new_feet = store.feet + delta_feet
    if new_feet < 0:
        logger.warning(
            "Stock reversal clamped at zero",
            product_code=product_code,
            feet=round(store.feet, 4),
            delta_feet=round(delta_feet, 4),
        )
    store.feet = max(0.0, new_feet)
    return store
