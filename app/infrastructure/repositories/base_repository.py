"""
SQLAlchemy implementation of the Base Repository.
"""

import math
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Session
from app.domain.repositories.base import BaseRepository
from app.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, id: int, for_update: bool = False) -> Optional[ModelType]:
        if for_update:
            # Bypass the identity map: a concurrent writer may have changed or deleted the row
            return self.db.get(self.model, id, with_for_update=True, populate_existing=True)
        return self.db.get(self.model, id)

    def add(self, obj: ModelType) -> ModelType:
        self.db.add(obj)
        self.db.flush()
        return obj

    def delete(self, obj: ModelType) -> None:
        self.db.delete(obj)
        self.db.flush()

    def paginate(self, page: int, limit: int, order_by: Any = None) -> Dict[str, Any]:
        query = self.db.query(self.model)
        total = query.count()
        if order_by is not None:
            query = query.order_by(*order_by) if isinstance(order_by, (list, tuple)) else query.order_by(order_by)
        items = query.offset((page - 1) * limit).limit(limit).all()

        return {
            "items": items,
            "total": total,
            "page": page,
            "limit": limit,
            "totalPages": math.ceil(total / limit) if limit else 0,
        }
