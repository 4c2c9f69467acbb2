"""Guide — onboarding video links; the newest one is served to the frontend."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from app.infrastructure.database import Base


class Guide(Base):
    __tablename__ = "guides"

    id = Column(Integer, primary_key=True, autoincrement=True)
    video_link = Column(String(1000), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
