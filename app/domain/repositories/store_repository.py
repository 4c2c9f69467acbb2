"""
Store Repository Interface.
Data access for the per-product stock aggregate.
"""

from typing import List, Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.store import Store


class StoreRepository(BaseRepository[Store]):
    """Interface for Store-specific operations."""

    def get_by_code(self, product_code: str, for_update: bool = False) -> Optional[Store]:
        """Get the stock row for a product code, optionally locking it for the current transaction."""
        ...

    def list_all(self, in_stock_only: bool = False) -> List[Store]:
        """All stock rows ordered by product code."""
        ...
