"""Pydantic schemas for the Product catalog."""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from app.domain.schemas.common import NormalizedKey


class ProductBase(BaseModel):
    company: NormalizedKey
    product_code: NormalizedKey
    height: float = Field(..., gt=0, description="Tile height in inches")
    width: float = Field(..., gt=0, description="Tile width in inches")
    per_caton_to_pcs: float = Field(..., gt=0, description="Pieces per carton")


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    pass


class ProductRead(ProductBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
