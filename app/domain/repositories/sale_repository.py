"""
Sale Repository Interface.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.invoice import InvoiceCounter
from app.domain.models.sale import Sale


class SaleRepository(BaseRepository[Sale]):
    """Interface for Sale-specific operations, including the invoice counter."""

    def totals_for_date(self, day: date) -> List[Dict[str, Any]]:
        """sell_caton/sell_pcs/sell_feet sums per product for sales dated `day`."""
        ...

    def feet_by_product(self) -> Dict[str, float]:
        """Total sold feet per product code."""
        ...

    def get_counter(self, for_update: bool = False) -> Optional[InvoiceCounter]:
        """The sale invoice counter row, optionally locked."""
        ...

    def create_counter(self, start: int) -> InvoiceCounter:
        """Seed the invoice counter."""
        ...
