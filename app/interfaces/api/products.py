"""Product catalog API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.services import catalog_service
from app.domain.schemas.product import ProductCreate, ProductRead, ProductUpdate
from app.infrastructure.database import get_db

router = APIRouter(prefix="/api/product", tags=["Products"])


@router.get("/all")
def list_products(db: Session = Depends(get_db)):
    products = catalog_service.list_products(db)
    return {
        "success": True,
        "message": "All products retrieved successfully",
        "products": [ProductRead.model_validate(p) for p in products],
    }


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_product(body: ProductCreate, db: Session = Depends(get_db)):
    product = catalog_service.create_product(db, body)
    return {
        "success": True,
        "message": "Product created successfully",
        "product": ProductRead.model_validate(product),
    }


@router.put("/update/{product_id}")
def update_product(product_id: int, body: ProductUpdate, db: Session = Depends(get_db)):
    product = catalog_service.update_product(db, product_id, body)
    return {
        "success": True,
        "message": "Product updated successfully",
        "product": ProductRead.model_validate(product),
    }


@router.get("/{product_id}")
def get_product(product_id: int, db: Session = Depends(get_db)):
    product = catalog_service.get_product(db, product_id)
    return {"success": True, "product": ProductRead.model_validate(product)}


@router.delete("/{product_id}")
def delete_product(product_id: int, db: Session = Depends(get_db)):
    deleted = catalog_service.delete_product(db, product_id)
    return {"success": True, "message": "Product deleted successfully", "product": deleted}
