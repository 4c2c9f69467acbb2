"""
Purchase Repository Interface.
"""

from datetime import date
from typing import Any, Dict, List

from app.domain.repositories.base import BaseRepository
from app.domain.models.purchase import Purchase


class PurchaseRepository(BaseRepository[Purchase]):
    """Interface for Purchase-specific operations."""

    def list_all(self) -> List[Purchase]:
        """Every purchase, newest first."""
        ...

    def totals_for_date(self, day: date) -> List[Dict[str, Any]]:
        """Caton/pcs/feet sums per product for purchases dated `day`."""
        ...

    def feet_by_product(self) -> Dict[str, float]:
        """Total purchased feet per product code."""
        ...
