"""Sale domain model — stock-out ledger with ordered line items."""

from sqlalchemy import Column, Integer, String, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.infrastructure.database import Base


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, autoincrement=True)
    invoice_number = Column(Integer, unique=True, nullable=False, index=True)

    customer_name = Column(String(200), nullable=False)
    customer_address = Column(String(500), nullable=False)
    customer_mobile = Column(String(30), nullable=False)

    date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    products = relationship(
        "SaleItem",
        back_populates="sale",
        order_by="SaleItem.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def customer(self) -> dict:
        return {
            "name": self.customer_name,
            "address": self.customer_address,
            "mobile": self.customer_mobile,
        }

    def __repr__(self):
        return f"<Sale #{self.invoice_number}>"


class SaleItem(Base):
    """One line of a sale. Dimensions are a snapshot taken when the sale was made."""

    __tablename__ = "sale_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sale_id = Column(Integer, ForeignKey("sales.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    product_code = Column(String(100), nullable=False, index=True)
    sell_caton = Column(Float, nullable=False, default=0)
    sell_pcs = Column(Float, nullable=False, default=0)
    sell_feet = Column(Float, nullable=False)
    height = Column(Float, nullable=False)
    width = Column(Float, nullable=False)
    per_caton_to_pcs = Column(Float, nullable=False)

    sale = relationship("Sale", back_populates="products")

    def __repr__(self):
        return f"<SaleItem {self.product_code} - {self.sell_feet:.2f} ft>"
