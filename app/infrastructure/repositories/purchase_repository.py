"""
SQLAlchemy Implementation of Purchase Repository.
"""

from collections import defaultdict
from datetime import date
from typing import Any, Dict, List

from app.domain.models.purchase import Purchase
from app.domain.repositories.purchase_repository import PurchaseRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyPurchaseRepository(SQLAlchemyRepository[Purchase], PurchaseRepository):
    """Purchase repository implementation using SQLAlchemy."""

    def list_all(self) -> List[Purchase]:
        return self.db.query(Purchase).order_by(Purchase.created_at.desc(), Purchase.id.desc()).all()

    def totals_for_date(self, day: date) -> List[Dict[str, Any]]:
        # feet depends on per-row dimensions, so sum in Python with the shared formula
        purchases = (
            self.db.query(Purchase)
            .filter(Purchase.date == day)
            .order_by(Purchase.product_code.asc(), Purchase.id.asc())
            .all()
        )

        totals: Dict[str, Dict[str, Any]] = {}
        for p in purchases:
            row = totals.setdefault(
                p.product_code,
                {
                    "product_code": p.product_code,
                    "company": p.company,
                    "total_caton": 0.0,
                    "total_pcs": 0.0,
                    "total_feet": 0.0,
                    "purchases": 0,
                },
            )
            row["total_caton"] += p.caton
            row["total_pcs"] += p.pcs
            row["total_feet"] += p.feet
            row["purchases"] += 1
        return list(totals.values())

    def feet_by_product(self) -> Dict[str, float]:
        result: Dict[str, float] = defaultdict(float)
        for p in self.db.query(Purchase).yield_per(500):
            result[p.product_code] += p.feet
        return dict(result)
