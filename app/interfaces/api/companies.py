"""Company API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.services import catalog_service
from app.domain.schemas.company import CompanyCreate, CompanyRead
from app.infrastructure.database import get_db

router = APIRouter(prefix="/api/company", tags=["Companies"])


@router.get("/all")
def list_companies(db: Session = Depends(get_db)):
    companies = catalog_service.list_companies(db)
    return {
        "success": True,
        "message": "All companies retrieved successfully",
        "companies": [CompanyRead.model_validate(c) for c in companies],
    }


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_company(body: CompanyCreate, db: Session = Depends(get_db)):
    company = catalog_service.create_company(db, body.company)
    return {
        "success": True,
        "message": "Company created successfully",
        "company": CompanyRead.model_validate(company),
    }


@router.get("/company/{name}")
def get_company(name: str, db: Session = Depends(get_db)):
    company = catalog_service.get_company(db, name)
    return {
        "success": True,
        "message": "Company retrieved successfully",
        "company": CompanyRead.model_validate(company),
    }


@router.delete("/delete/{name}")
def delete_company(name: str, db: Session = Depends(get_db)):
    deleted = catalog_service.delete_company(db, name)
    return {
        "success": True,
        "message": "Company deleted successfully",
        "company": deleted,
    }
