"""
SQLAlchemy Implementation of Store Repository.
"""

from typing import List, Optional

from app.domain.models.store import Store
from app.domain.repositories.store_repository import StoreRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyStoreRepository(SQLAlchemyRepository[Store], StoreRepository):
    """Store repository implementation using SQLAlchemy."""

    def get_by_code(self, product_code: str, for_update: bool = False) -> Optional[Store]:
        query = self.db.query(Store).filter(Store.product_code == product_code)
        if for_update:
            # Pending changes go to the database first, then the locked row is
            # reloaded so this transaction sees what concurrent writers committed
            self.db.flush()
            query = query.with_for_update().populate_existing()
        return query.first()

    def list_all(self, in_stock_only: bool = False) -> List[Store]:
        query = self.db.query(Store)
        if in_stock_only:
            query = query.filter(Store.feet > 0)
        return query.order_by(Store.product_code.asc()).all()
