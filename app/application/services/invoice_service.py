"""Invoice counter — the single sequence sales draw their invoice numbers from."""

import structlog

from app.config import get_settings
from app.domain.models.invoice import InvoiceCounter
from app.domain.repositories.sale_repository import SaleRepository

settings = get_settings()
logger = structlog.get_logger(__name__)


def ensure_counter(sales: SaleRepository) -> InvoiceCounter:
    """Return the counter row, seeding it with INVOICE_START when absent. Caller commits."""
    counter = sales.get_counter()
    if counter is None:
        counter = sales.create_counter(settings.INVOICE_START)
        logger.info("Invoice counter seeded", invoice_number=counter.invoice_number)
    return counter


def peek_next_invoice(sales: SaleRepository) -> int:
    """Advisory read of the next invoice number; nothing is reserved."""
    counter = sales.get_counter()
    return counter.invoice_number if counter else settings.INVOICE_START


def take_next_invoice(sales: SaleRepository) -> int:
    """Lock the counter, hand out its current value and advance it by one.

    Must run inside the atomic unit that inserts the sale.
    """
    counter = sales.get_counter(for_update=True)
    if counter is None:
        counter = sales.create_counter(settings.INVOICE_START)

    number = counter.invoice_number
    counter.invoice_number = number + 1
    return number
