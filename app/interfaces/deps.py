"""
API Dependencies.

All repositories of one request share the request's session, so a service can
write to several tables in a single transaction.
"""

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.models.purchase import Purchase
from app.domain.models.sale import Sale
from app.domain.models.store import Store
from app.domain.repositories.purchase_repository import PurchaseRepository
from app.domain.repositories.sale_repository import SaleRepository
from app.domain.repositories.store_repository import StoreRepository
from app.infrastructure.database import get_db
from app.infrastructure.repositories.purchase_repository import SQLAlchemyPurchaseRepository
from app.infrastructure.repositories.sale_repository import SQLAlchemySaleRepository
from app.infrastructure.repositories.store_repository import SQLAlchemyStoreRepository

settings = get_settings()


def get_store_repository(db: Session = Depends(get_db)) -> StoreRepository:
    """Get store repository instance."""
    return SQLAlchemyStoreRepository(db, Store)


def get_purchase_repository(db: Session = Depends(get_db)) -> PurchaseRepository:
    """Get purchase repository instance."""
    return SQLAlchemyPurchaseRepository(db, Purchase)


def get_sale_repository(db: Session = Depends(get_db)) -> SaleRepository:
    """Get sale repository instance."""
    return SQLAlchemySaleRepository(db, Sale)


class Pagination:
    """`?page=&limit=` query parameters, both positive integers."""

    def __init__(
        self,
        page: int = Query(1, ge=1),
        limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    ):
        self.page = page
        self.limit = limit
