"""Pydantic schemas for Purchase (stock-in)."""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from app.domain.schemas.common import NormalizedKey


class PurchaseCreate(BaseModel):
    product_code: NormalizedKey
    company: NormalizedKey
    caton: float = Field(0, ge=0)
    pcs: float = Field(0, ge=0)
    height: float = Field(..., gt=0)
    width: float = Field(..., gt=0)
    per_caton_to_pcs: float = Field(..., gt=0)
    date: dt.date

    @model_validator(mode="after")
    def check_quantity(self):
        if self.caton <= 0 and self.pcs <= 0:
            raise ValueError("Either caton or pcs must be greater than 0")
        return self


class PurchaseUpdate(BaseModel):
    """Partial update — only the fields sent are applied."""

    product_code: Optional[NormalizedKey] = None
    company: Optional[NormalizedKey] = None
    caton: Optional[float] = Field(None, ge=0)
    pcs: Optional[float] = Field(None, ge=0)
    height: Optional[float] = Field(None, gt=0)
    width: Optional[float] = Field(None, gt=0)
    per_caton_to_pcs: Optional[float] = Field(None, gt=0)
    date: Optional[dt.date] = None


class PurchaseRead(BaseModel):
    id: int
    product_code: str
    company: str
    caton: float
    pcs: float
    height: float
    width: float
    per_caton_to_pcs: float
    feet: float
    date: dt.date
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = {"from_attributes": True}


class PurchaseDayTotal(BaseModel):
    product_code: str
    company: str
    total_caton: float
    total_pcs: float
    total_feet: float
    purchases: int
