"""Store domain model — the per-product stock aggregate, in square feet."""

from sqlalchemy import Column, Integer, String, Float, DateTime, CheckConstraint
from sqlalchemy.sql import func

from app.infrastructure.database import Base


class Store(Base):
    __tablename__ = "store"
    __table_args__ = (CheckConstraint("feet >= 0", name="ck_store_feet_non_negative"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_code = Column(String(100), unique=True, nullable=False, index=True)
    company = Column(String(200), nullable=False)
    feet = Column(Float, nullable=False, default=0)

    # Dimensions captured from the purchase that opened the row
    height = Column(Float, nullable=False)
    width = Column(Float, nullable=False)
    per_caton_to_pcs = Column(Float, nullable=False)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Store {self.product_code} - {self.feet:.2f} ft>"
