"""Guide API routes — the onboarding video link."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.services import catalog_service
from app.domain.schemas.misc import GuideCreate, GuideRead
from app.infrastructure.database import get_db

router = APIRouter(prefix="/api/guide", tags=["Guide"])


@router.get("/video-link")
def latest_video_link(db: Session = Depends(get_db)):
    guide = catalog_service.get_latest_guide(db)
    return {"success": True, "video_link": guide.video_link}


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_video_link(body: GuideCreate, db: Session = Depends(get_db)):
    guide = catalog_service.create_guide(db, body.video_link)
    return {"success": True, "data": GuideRead.model_validate(guide)}
