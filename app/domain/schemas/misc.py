"""Pydantic schemas for users and guide videos."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.domain.schemas.common import NonEmptyStr


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    role: str
    is_verified: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class GuideCreate(BaseModel):
    video_link: NonEmptyStr


class GuideRead(BaseModel):
    id: int
    video_link: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}