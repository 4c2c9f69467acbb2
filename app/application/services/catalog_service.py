"""Catalog service — companies, products, store lookups and other reference data."""

from typing import List

import structlog
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictException, EntityNotFoundException
from app.domain.models.company import Company
from app.domain.models.guide import Guide
from app.domain.models.product import Product
from app.domain.models.store import Store
from app.domain.models.user import User
from app.domain.repositories.store_repository import StoreRepository
from app.domain.schemas.company import CompanyRead
from app.domain.schemas.product import ProductCreate, ProductRead, ProductUpdate
from app.infrastructure.database import atomic

logger = structlog.get_logger(__name__)


# --- Companies ---

def list_companies(db: Session) -> List[Company]:
    return db.query(Company).order_by(Company.created_at.desc(), Company.id.desc()).all()


def get_company(db: Session, name: str) -> Company:
    company = db.query(Company).filter(Company.name == name.strip().lower()).first()
    if not company:
        raise EntityNotFoundException("Company not found", {"company": name})
    return company


def create_company(db: Session, name: str) -> Company:
    if db.query(Company).filter(Company.name == name).first():
        raise ConflictException("Company already exists", {"company": name})

    with atomic(db):
        company = Company(name=name)
        db.add(company)

    db.refresh(company)
    logger.info("Company created", company=name)
    return company


def delete_company(db: Session, name: str) -> CompanyRead:
    company = get_company(db, name)
    deleted = CompanyRead.model_validate(company)
    with atomic(db):
        db.delete(company)
    logger.info("Company deleted", company=deleted.name)
    return deleted


# --- Products ---

def list_products(db: Session) -> List[Product]:
    return db.query(Product).order_by(Product.created_at.desc(), Product.id.desc()).all()


def get_product(db: Session, product_id: int) -> Product:
    product = db.get(Product, product_id)
    if not product:
        raise EntityNotFoundException("Product not found", {"id": product_id})
    return product


def create_product(db: Session, body: ProductCreate) -> Product:
    if db.query(Product).filter(Product.product_code == body.product_code).first():
        raise ConflictException("Product already exists", {"product_code": body.product_code})

    with atomic(db):
        product = Product(**body.model_dump())
        db.add(product)

    db.refresh(product)
    logger.info("Product created", product_code=product.product_code)
    return product


def update_product(db: Session, product_id: int, body: ProductUpdate) -> Product:
    """Replace a catalog entry. Past sales keep the dimensions they were made with."""
    product = get_product(db, product_id)

    clash = (
        db.query(Product)
        .filter(Product.product_code == body.product_code, Product.id != product_id)
        .first()
    )
    if clash:
        raise ConflictException("Duplicate product entry", {"product_code": body.product_code})

    with atomic(db):
        for field, value in body.model_dump().items():
            setattr(product, field, value)

    db.refresh(product)
    logger.info("Product updated", product_id=product_id, product_code=product.product_code)
    return product


def delete_product(db: Session, product_id: int) -> ProductRead:
    product = get_product(db, product_id)
    deleted = ProductRead.model_validate(product)
    with atomic(db):
        db.delete(product)
    logger.info("Product deleted", product_id=product_id, product_code=deleted.product_code)
    return deleted


# --- Store (read side) ---

def list_store(stores: StoreRepository, in_stock_only: bool = False) -> List[Store]:
    return stores.list_all(in_stock_only=in_stock_only)


def get_store_by_code(stores: StoreRepository, product_code: str) -> Store:
    store = stores.get_by_code(product_code.strip().lower())
    if not store:
        raise EntityNotFoundException("Product not found in store.", {"product_code": product_code})
    return store


# --- Users and guide videos ---

def get_user_by_email(db: Session, email: str) -> User:
    user = db.query(User).filter(User.email == email.strip().lower()).first()
    if not user:
        raise EntityNotFoundException("User not found", {"email": email})
    return user


def get_latest_guide(db: Session) -> Guide:
    guide = db.query(Guide).order_by(Guide.created_at.desc(), Guide.id.desc()).first()
    if not guide:
        raise EntityNotFoundException("No video guide found")
    return guide


def create_guide(db: Session, video_link: str) -> Guide:
    if db.query(Guide).filter(Guide.video_link == video_link).first():
        raise ConflictException("Video link already exists")

    with atomic(db):
        guide = Guide(video_link=video_link)
        db.add(guide)

    db.refresh(guide)
    return guide
