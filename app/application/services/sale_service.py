"""Sale service — records stock-out against the Store table.

A sale is all-or-nothing: every line is checked and taken out of stock, the
sale row is written and the invoice counter advances inside one transaction.
The first line that cannot be covered aborts the whole unit.
"""

from datetime import date
from typing import Any, Dict, List

import structlog
from sqlalchemy.orm import Session

from app.application.services import invoice_service, stock_ledger
from app.core.exceptions import EntityNotFoundException, InsufficientStockException
from app.domain.models.sale import Sale, SaleItem
from app.domain.quantity import calculate_feet
from app.domain.repositories.sale_repository import SaleRepository
from app.domain.repositories.store_repository import StoreRepository
from app.domain.schemas.sale import SaleCreate, SaleItemCreate, SaleUpdate
from app.infrastructure.database import atomic

logger = structlog.get_logger(__name__)

SORT_FIELDS = {
    "invoice_number": (Sale.invoice_number.desc(),),
    "created_at": (Sale.created_at.desc(), Sale.id.desc()),
}


def create_sale(
    db: Session,
    sales: SaleRepository,
    stores: StoreRepository,
    body: SaleCreate,
) -> Sale:
    """Check and take every line out of stock, then write the sale under the next invoice number."""
    try:
        with atomic(db):
            items = _apply_lines(stores, body.products)
            invoice_number = invoice_service.take_next_invoice(sales)

            sale = Sale(
                invoice_number=invoice_number,
                customer_name=body.customer.name,
                customer_address=body.customer.address,
                customer_mobile=body.customer.mobile,
                date=body.date,
                products=items,
            )
            sales.add(sale)
    except InsufficientStockException as e:
        logger.info("Sale rejected", reason="insufficient_stock", **e.details)
        raise

    if body.invoice_number is not None and body.invoice_number != invoice_number:
        logger.warning(
            "Client invoice number ignored",
            submitted=body.invoice_number,
            assigned=invoice_number,
        )

    logger.info(
        "Sale recorded",
        sale_id=sale.id,
        invoice_number=invoice_number,
        lines=len(items),
        feet=round(sum(i.sell_feet for i in items), 4),
    )
    return sale


def update_sale(
    db: Session,
    sales: SaleRepository,
    stores: StoreRepository,
    sale_id: int,
    body: SaleUpdate,
) -> Sale:
    """Put the old lines back into stock, then apply the new ones as a fresh sale would.

    The invoice number is kept.
    """
    with atomic(db):
        sale = sales.get_by_id(sale_id, for_update=True)
        if not sale:
            raise EntityNotFoundException("Sale not found", {"id": sale_id})

        _reverse_lines(stores, sale.products)
        items = _apply_lines(stores, body.products)

        sale.customer_name = body.customer.name
        sale.customer_address = body.customer.address
        sale.customer_mobile = body.customer.mobile
        sale.date = body.date
        sale.products = items
        db.flush()

    logger.info("Sale updated", sale_id=sale.id, invoice_number=sale.invoice_number, lines=len(items))
    return sale


def delete_sale(
    db: Session,
    sales: SaleRepository,
    stores: StoreRepository,
    sale_id: int,
) -> None:
    """Delete a sale and return its feet to stock. The invoice counter is not rewound."""
    with atomic(db):
        sale = sales.get_by_id(sale_id, for_update=True)
        if not sale:
            raise EntityNotFoundException("Sale not found", {"id": sale_id})

        invoice_number = sale.invoice_number
        _reverse_lines(stores, sale.products)
        sales.delete(sale)

    logger.info("Sale deleted", sale_id=sale_id, invoice_number=invoice_number)


def get_sale(sales: SaleRepository, sale_id: int) -> Sale:
    sale = sales.get_by_id(sale_id)
    if not sale:
        raise EntityNotFoundException("Sale not found", {"id": sale_id})
    return sale


def list_sales(sales: SaleRepository, page: int, limit: int, sort: str = "created_at") -> Dict[str, Any]:
    return sales.paginate(page, limit, order_by=SORT_FIELDS[sort])


def get_sale_totals_for_date(sales: SaleRepository, day: date) -> List[Dict[str, Any]]:
    return sales.totals_for_date(day)


def _apply_lines(stores: StoreRepository, lines: List[SaleItemCreate]) -> List[SaleItem]:
    """Take each line out of stock in order; raises on the first line that cannot be covered.

    Lines repeating a product code are checked against what the earlier lines left.
    """
    items = []
    for position, line in enumerate(lines):
        # Lock on first read so the row is loaded fresh for this transaction
        store = stores.get_by_code(line.product_code, for_update=True)
        if store is None:
            raise EntityNotFoundException(
                f"Product {line.product_code} not found in store",
                {"product_code": line.product_code},
            )

        height = line.height or store.height
        width = line.width or store.width
        per_caton_to_pcs = line.per_caton_to_pcs or store.per_caton_to_pcs
        sell_feet = calculate_feet(height, width, per_caton_to_pcs, line.sell_caton, line.sell_pcs)

        stock_ledger.apply_sale_or_fail(stores, line.product_code, sell_feet)

        items.append(
            SaleItem(
                position=position,
                product_code=line.product_code,
                sell_caton=line.sell_caton,
                sell_pcs=line.sell_pcs,
                sell_feet=sell_feet,
                height=height,
                width=width,
                per_caton_to_pcs=per_caton_to_pcs,
            )
        )
    return items


def _reverse_lines(stores: StoreRepository, items: List[SaleItem]) -> None:
    for item in items:
        stock_ledger.reverse(stores, item.product_code, item.sell_feet)
