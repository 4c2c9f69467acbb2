"""Pydantic schemas for the Store (stock) table and its reconciliation audit."""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class StoreRead(BaseModel):
    id: int
    product_code: str
    company: str
    feet: float
    height: float
    width: float
    per_caton_to_pcs: float
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class StockDrift(BaseModel):
    product_code: str
    purchased_feet: float
    sold_feet: float
    expected_feet: float
    store_feet: Optional[float] = None
    drift: float
    skipped_reversals: int = 0
    flagged: bool = False


class StockAuditReport(BaseModel):
    generated_at: datetime
    products: list[StockDrift]
    flagged_count: int
