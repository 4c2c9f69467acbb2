"""Invoice counter — a single row holding the next invoice number to issue."""

from sqlalchemy import Column, Integer, String

from app.infrastructure.database import Base

SALE_COUNTER_KEY = "sale"


class InvoiceCounter(Base):
    __tablename__ = "invoices"

    key = Column(String(50), primary_key=True, default=SALE_COUNTER_KEY)
    invoice_number = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<InvoiceCounter {self.key} next={self.invoice_number}>"
