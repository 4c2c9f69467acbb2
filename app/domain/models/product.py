"""Product domain model — maps to the 'products' table (the tile catalog)."""

from sqlalchemy import Column, Integer, String, Float, DateTime
from sqlalchemy.sql import func

from app.infrastructure.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company = Column(String(200), nullable=False, index=True)
    product_code = Column(String(100), unique=True, nullable=False, index=True)

    # Tile size in inches and pieces per carton
    height = Column(Float, nullable=False)
    width = Column(Float, nullable=False)
    per_caton_to_pcs = Column(Float, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<Product {self.product_code} - {self.company}>"
