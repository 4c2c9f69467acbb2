"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure.database import engine, Base, SessionLocal, atomic
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.core.exceptions import register_exception_handlers

# Import all models so SQLAlchemy knows about them
from app.domain.models.company import Company
from app.domain.models.product import Product
from app.domain.models.store import Store
from app.domain.models.purchase import Purchase
from app.domain.models.sale import Sale, SaleItem
from app.domain.models.invoice import InvoiceCounter
from app.domain.models.user import User
from app.domain.models.guide import Guide

# Import routers
from app.interfaces.api.companies import router as companies_router
from app.interfaces.api.products import router as products_router
from app.interfaces.api.store import router as store_router
from app.interfaces.api.purchases import router as purchases_router
from app.interfaces.api.sales import router as sales_router
from app.interfaces.api.invoices import router as invoices_router
from app.interfaces.api.users import router as users_router
from app.interfaces.api.guides import router as guides_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


def bootstrap_reference_data(db) -> None:
    """Seed the invoice counter and, when configured, the guide video link."""
    from app.application.services.invoice_service import ensure_counter
    from app.infrastructure.repositories.sale_repository import SQLAlchemySaleRepository

    with atomic(db):
        ensure_counter(SQLAlchemySaleRepository(db, Sale))
        if settings.GUIDE_VIDEO_LINK and not db.query(Guide).first():
            db.add(Guide(video_link=settings.GUIDE_VIDEO_LINK))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Tiles Ledger backend...", env=settings.ENVIRONMENT)

    # Create DB tables (dev only, use migrations in production)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    db = SessionLocal()
    try:
        bootstrap_reference_data(db)
    finally:
        db.close()

    yield

    logger.info("Tiles Ledger backend stopped")


app = FastAPI(
    title="Tiles Ledger",
    description="Inventory and sales ledger API for a tile-trading business",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(companies_router)
app.include_router(products_router)
app.include_router(store_router)
app.include_router(purchases_router)
app.include_router(sales_router)
app.include_router(invoices_router)
app.include_router(users_router)
app.include_router(guides_router)


@app.get("/")
def root():
    return {
        "name": "Tiles Ledger",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
