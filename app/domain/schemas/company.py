"""Pydantic schemas for Company."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.domain.schemas.common import NormalizedKey


class CompanyCreate(BaseModel):
    company: NormalizedKey = Field(..., description="Company name")


class CompanyRead(BaseModel):
    id: int
    name: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
