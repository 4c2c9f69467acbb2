"""User API routes — lookup only, no access control."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.services import catalog_service
from app.domain.schemas.misc import UserRead
from app.infrastructure.database import get_db

router = APIRouter(prefix="/api/user", tags=["Users"])


@router.get("/email/{email}")
def get_user_by_email(email: str, db: Session = Depends(get_db)):
    user = catalog_service.get_user_by_email(db, email)
    return {
        "success": True,
        "message": "User retrieved successfully",
        "role": user.role,
        "user": UserRead.model_validate(user),
    }
