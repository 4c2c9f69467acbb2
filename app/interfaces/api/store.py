"""Store API routes — current stock per product and the reconciliation audit."""

from fastapi import APIRouter, Depends

from app.application.services import audit_service, catalog_service
from app.domain.repositories.purchase_repository import PurchaseRepository
from app.domain.repositories.sale_repository import SaleRepository
from app.domain.repositories.store_repository import StoreRepository
from app.domain.schemas.store import StockAuditReport, StoreRead
from app.interfaces.deps import get_purchase_repository, get_sale_repository, get_store_repository

router = APIRouter(prefix="/api/store", tags=["Store"])


@router.get("/all")
def list_store(stores: StoreRepository = Depends(get_store_repository)):
    rows = catalog_service.list_store(stores)
    return {"success": True, "total": len(rows), "data": [StoreRead.model_validate(s) for s in rows]}


@router.get("/in-stock/all")
def list_in_stock(stores: StoreRepository = Depends(get_store_repository)):
    rows = catalog_service.list_store(stores, in_stock_only=True)
    return {"success": True, "total": len(rows), "data": [StoreRead.model_validate(s) for s in rows]}


@router.get("/get-by-code/{code}")
def get_by_code(code: str, stores: StoreRepository = Depends(get_store_repository)):
    store = catalog_service.get_store_by_code(stores, code)
    return {"success": True, "data": StoreRead.model_validate(store)}


@router.get("/audit")
def stock_audit(
    purchases: PurchaseRepository = Depends(get_purchase_repository),
    sales: SaleRepository = Depends(get_sale_repository),
    stores: StoreRepository = Depends(get_store_repository),
):
    """Drift between Store.feet and (purchased - sold) feet per product."""
    report: StockAuditReport = audit_service.reconcile(purchases, sales, stores)
    return {"success": True, "data": report}
