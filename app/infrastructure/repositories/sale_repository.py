"""
SQLAlchemy Implementation of Sale Repository.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import func

from app.domain.models.invoice import InvoiceCounter, SALE_COUNTER_KEY
from app.domain.models.sale import Sale, SaleItem
from app.domain.repositories.sale_repository import SaleRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemySaleRepository(SQLAlchemyRepository[Sale], SaleRepository):
    """Sale repository implementation using SQLAlchemy."""

    def totals_for_date(self, day: date) -> List[Dict[str, Any]]:
        results = (
            self.db.query(
                SaleItem.product_code,
                func.coalesce(func.sum(SaleItem.sell_caton), 0).label("total_sell_caton"),
                func.coalesce(func.sum(SaleItem.sell_pcs), 0).label("total_sell_pcs"),
                func.coalesce(func.sum(SaleItem.sell_feet), 0).label("total_sell_feet"),
            )
            .join(Sale, Sale.id == SaleItem.sale_id)
            .filter(Sale.date == day)
            .group_by(SaleItem.product_code)
            .order_by(SaleItem.product_code.asc())
            .all()
        )
        return [
            {
                "product_code": r.product_code,
                "total_sell_caton": float(r.total_sell_caton),
                "total_sell_pcs": float(r.total_sell_pcs),
                "total_sell_feet": float(r.total_sell_feet),
            }
            for r in results
        ]

    def feet_by_product(self) -> Dict[str, float]:
        results = (
            self.db.query(SaleItem.product_code, func.sum(SaleItem.sell_feet).label("feet"))
            .group_by(SaleItem.product_code)
            .all()
        )
        return {r.product_code: float(r.feet or 0) for r in results}

    def get_counter(self, for_update: bool = False) -> Optional[InvoiceCounter]:
        query = self.db.query(InvoiceCounter).filter(InvoiceCounter.key == SALE_COUNTER_KEY)
        if for_update:
            self.db.flush()
            query = query.with_for_update().populate_existing()
        return query.first()

    def create_counter(self, start: int) -> InvoiceCounter:
        counter = InvoiceCounter(key=SALE_COUNTER_KEY, invoice_number=start)
        self.db.add(counter)
        self.db.flush()
        return counter
