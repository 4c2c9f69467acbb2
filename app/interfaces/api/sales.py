"""Sale API routes — stock-out with invoice numbering, listing and daily totals."""

from datetime import date
from typing import Literal

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.services import sale_service
from app.domain.repositories.sale_repository import SaleRepository
from app.domain.repositories.store_repository import StoreRepository
from app.domain.schemas.sale import SaleCreate, SaleDayTotal, SaleRead, SaleUpdate
from app.infrastructure.database import get_db
from app.interfaces.deps import Pagination, get_sale_repository, get_store_repository

router = APIRouter(prefix="/api/sale", tags=["Sales"])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_sale(
    body: SaleCreate,
    db: Session = Depends(get_db),
    sales: SaleRepository = Depends(get_sale_repository),
    stores: StoreRepository = Depends(get_store_repository),
):
    sale = sale_service.create_sale(db, sales, stores, body)
    return {
        "success": True,
        "message": "Sale saved",
        "invoice_number": sale.invoice_number,
        "data": SaleRead.model_validate(sale),
    }


@router.put("/update/{sale_id}")
def update_sale(
    sale_id: int,
    body: SaleUpdate,
    db: Session = Depends(get_db),
    sales: SaleRepository = Depends(get_sale_repository),
    stores: StoreRepository = Depends(get_store_repository),
):
    sale = sale_service.update_sale(db, sales, stores, sale_id, body)
    return {
        "success": True,
        "message": "Sale updated",
        "data": SaleRead.model_validate(sale),
    }


@router.get("")
def list_sales(
    pagination: Pagination = Depends(),
    sort: Literal["created_at", "invoice_number"] = "created_at",
    sales: SaleRepository = Depends(get_sale_repository),
):
    """Newest first by `created_at` (default) or highest `invoice_number` first."""
    result = sale_service.list_sales(sales, pagination.page, pagination.limit, sort)
    result["data"] = [SaleRead.model_validate(s) for s in result.pop("items")]
    return {"success": True, **result}


@router.get("/group/custom-date")
def sale_totals_for_date(
    day: date = Query(..., alias="date"),
    sales: SaleRepository = Depends(get_sale_repository),
):
    """Per-product sell_caton/sell_pcs/sell_feet totals for sales dated `?date=YYYY-MM-DD`."""
    totals = sale_service.get_sale_totals_for_date(sales, day)
    return {
        "success": True,
        "date": day.isoformat(),
        "data": [SaleDayTotal(**t) for t in totals],
    }


@router.get("/{sale_id}")
def get_sale(sale_id: int, sales: SaleRepository = Depends(get_sale_repository)):
    sale = sale_service.get_sale(sales, sale_id)
    return {"success": True, "data": SaleRead.model_validate(sale)}


@router.delete("/{sale_id}")
def delete_sale(
    sale_id: int,
    db: Session = Depends(get_db),
    sales: SaleRepository = Depends(get_sale_repository),
    stores: StoreRepository = Depends(get_store_repository),
):
    sale_service.delete_sale(db, sales, stores, sale_id)
    return {"success": True, "message": "Sale deleted"}
