"""Purchase API routes — stock-in create/update/delete, history and daily totals."""

from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.services import purchase_service
from app.domain.repositories.purchase_repository import PurchaseRepository
from app.domain.repositories.store_repository import StoreRepository
from app.domain.schemas.purchase import PurchaseCreate, PurchaseDayTotal, PurchaseRead, PurchaseUpdate
from app.infrastructure.database import get_db
from app.interfaces.deps import Pagination, get_purchase_repository, get_store_repository

router = APIRouter(prefix="/api/purchase", tags=["Purchases"])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_purchase(
    body: PurchaseCreate,
    db: Session = Depends(get_db),
    purchases: PurchaseRepository = Depends(get_purchase_repository),
    stores: StoreRepository = Depends(get_store_repository),
):
    purchase = purchase_service.create_purchase(db, purchases, stores, body)
    return {
        "success": True,
        "message": "Purchase added successfully!",
        "data": PurchaseRead.model_validate(purchase),
    }


@router.patch("/update/{purchase_id}")
def update_purchase(
    purchase_id: int,
    body: PurchaseUpdate,
    db: Session = Depends(get_db),
    purchases: PurchaseRepository = Depends(get_purchase_repository),
    stores: StoreRepository = Depends(get_store_repository),
):
    purchase = purchase_service.update_purchase(db, purchases, stores, purchase_id, body)
    return {
        "success": True,
        "message": "Purchase updated successfully!",
        "data": PurchaseRead.model_validate(purchase),
    }


@router.get("/all")
def list_purchases(purchases: PurchaseRepository = Depends(get_purchase_repository)):
    items = purchase_service.list_purchases(purchases)
    return {
        "success": True,
        "message": "Purchases fetched successfully!",
        "data": [PurchaseRead.model_validate(p) for p in items],
    }


@router.get("/history")
def purchase_history(
    pagination: Pagination = Depends(),
    purchases: PurchaseRepository = Depends(get_purchase_repository),
):
    """Newest first, `?page=&limit=`."""
    result = purchase_service.get_purchase_history(purchases, pagination.page, pagination.limit)
    result["data"] = [PurchaseRead.model_validate(p) for p in result.pop("items")]
    return {"success": True, **result}


@router.get("/group/custom-date")
def purchase_totals_for_date(
    day: date = Query(..., alias="date"),
    purchases: PurchaseRepository = Depends(get_purchase_repository),
):
    """Per-product caton/pcs/feet totals for purchases dated `?date=YYYY-MM-DD`."""
    totals = purchase_service.get_purchase_totals_for_date(purchases, day)
    return {
        "success": True,
        "date": day.isoformat(),
        "data": [PurchaseDayTotal(**t) for t in totals],
    }


@router.get("/{purchase_id}")
def get_purchase(purchase_id: int, purchases: PurchaseRepository = Depends(get_purchase_repository)):
    purchase = purchase_service.get_purchase(purchases, purchase_id)
    return {"success": True, "data": PurchaseRead.model_validate(purchase)}


@router.delete("/{purchase_id}")
def delete_purchase(
    purchase_id: int,
    db: Session = Depends(get_db),
    purchases: PurchaseRepository = Depends(get_purchase_repository),
    stores: StoreRepository = Depends(get_store_repository),
):
    purchase_service.delete_purchase(db, purchases, stores, purchase_id)
    return {"success": True, "message": "Purchase deleted successfully!"}
