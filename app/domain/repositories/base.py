"""
Base Repository Interface.
Defines the standard contract for data access operations.

Repositories never commit: the application service that opens the atomic unit
decides when the work becomes visible.
"""

from typing import Any, Dict, Optional, Protocol, TypeVar

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations."""

    def get_by_id(self, id: int, for_update: bool = False) -> Optional[T]:
        """Get a single entity by ID.

        With `for_update` the row is locked and reloaded from the database, so a
        writer that waited on the lock sees what the previous writer committed.
        """
        ...

    def add(self, obj: T) -> T:
        """Stage a new entity and flush it so it gets an ID."""
        ...

    def delete(self, obj: T) -> None:
        """Stage the removal of an entity."""
        ...

    def paginate(self, page: int, limit: int, order_by: Any = None) -> Dict[str, Any]:
        """Page of entities plus total/page/limit/totalPages."""
        ...
