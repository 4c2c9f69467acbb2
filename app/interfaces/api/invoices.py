"""Invoice API routes."""

from fastapi import APIRouter, Depends

from app.application.services import invoice_service
from app.domain.repositories.sale_repository import SaleRepository
from app.interfaces.deps import get_sale_repository

router = APIRouter(prefix="/api/invoice", tags=["Invoices"])


@router.get("/next-invoice")
def next_invoice(sales: SaleRepository = Depends(get_sale_repository)):
    """Number the next sale will most likely get. Advisory: nothing is reserved."""
    return {
        "success": True,
        "message": "Invoice number retrieved successfully",
        "invoice_number": invoice_service.peek_next_invoice(sales),
    }
