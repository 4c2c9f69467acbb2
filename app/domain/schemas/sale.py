"""Pydantic schemas for Sale (stock-out)."""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from app.domain.schemas.common import NonEmptyStr, NormalizedKey


class CustomerInfo(BaseModel):
    name: NonEmptyStr
    address: NonEmptyStr
    mobile: NonEmptyStr


class SaleItemCreate(BaseModel):
    product_code: NormalizedKey
    sell_caton: float = Field(0, ge=0)
    sell_pcs: float = Field(0, ge=0)
    # Optional snapshot; the store row's dimensions are used when omitted
    height: Optional[float] = Field(None, gt=0)
    width: Optional[float] = Field(None, gt=0)
    per_caton_to_pcs: Optional[float] = Field(None, gt=0)

    @model_validator(mode="after")
    def check_quantity(self):
        if self.sell_caton <= 0 and self.sell_pcs <= 0:
            raise ValueError("Either sell_caton or sell_pcs must be greater than 0")
        return self


class SaleCreate(BaseModel):
    customer: CustomerInfo
    date: dt.date
    products: list[SaleItemCreate] = Field(..., min_length=1)
    # Read back only; the server assigns the real number
    invoice_number: Optional[int] = None


class SaleUpdate(SaleCreate):
    pass


class SaleItemRead(BaseModel):
    product_code: str
    sell_caton: float
    sell_pcs: float
    sell_feet: float
    height: float
    width: float
    per_caton_to_pcs: float

    model_config = {"from_attributes": True}


class SaleRead(BaseModel):
    id: int
    invoice_number: int
    customer: CustomerInfo
    date: dt.date
    products: list[SaleItemRead]
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = {"from_attributes": True}


class SaleDayTotal(BaseModel):
    product_code: str
    total_sell_caton: float
    total_sell_pcs: float
    total_sell_feet: float
