"""Purchase domain model — stock-in ledger, one row per received lot."""

from sqlalchemy import Column, Integer, String, Float, Date, DateTime
from sqlalchemy.sql import func

from app.domain.quantity import calculate_feet
from app.infrastructure.database import Base


class Purchase(Base):
    __tablename__ = "purchases"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_code = Column(String(100), nullable=False, index=True)
    company = Column(String(200), nullable=False)
    caton = Column(Float, nullable=False, default=0)
    pcs = Column(Float, nullable=False, default=0)
    height = Column(Float, nullable=False)
    width = Column(Float, nullable=False)
    per_caton_to_pcs = Column(Float, nullable=False)
    date = Column(Date, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    @property
    def feet(self) -> float:
        """Square feet this purchase contributes to the store."""
        return calculate_feet(self.height, self.width, self.per_caton_to_pcs, self.caton, self.pcs)

    def __repr__(self):
        return f"<Purchase {self.id} - {self.product_code}>"
