"""
Base Repository

This module provides a generic base repository with common CRUD operations
over one collection of the in-memory store. All entity-specific
repositories inherit from this class.

What This Provides:
===================
- get(id)        → Fetch single record by id
- list()         → List records with equality filters and ordering
- count()        → Count records with filtering
- create()       → Create new record (id + timestamps assigned here)
- update()       → Merge fields into an existing record
- delete()       → Remove record (missing id is a no-op)

Generic Type Pattern:
=====================
The BaseRepository uses Python generics to be type-safe:

    class CategoryRepository(BaseRepository[Category]):
        pass

    repo = CategoryRepository(store)
    category = await repo.get(id)  # Returns Category, not Any!

Snapshots:
==========
Every record handed out is a deep copy. Callers may mutate what they get
back without touching store state; the only way to change a record is
through update().

CRUD Operations Flow:
=====================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        CRUD OPERATIONS                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   CREATE:                                                                   │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │ instance = Model.new(**kwargs)  # id + timestamps           │          │
│   │ with store.lock: append          # single writer            │          │
│   │ return snapshot                  # deep copy                │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
│   UPDATE:                                                                   │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │ with store.lock:                                            │          │
│   │     locate by id (linear scan)                              │          │
│   │     merged = instance.model_copy(update=kwargs)             │          │
│   │     bump updated_at when the model has one                  │          │
│   │     replace in place                                        │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
│   DELETE:                                                                   │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │ with store.lock:                                            │          │
│   │     rebuild the list without the matching id                │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

All operations are a single linear pass over the collection. The store is
single-user and small, so no index is kept.
"""

from operator import attrgetter
from typing import Any, Callable, Generic, Optional, Type, TypeVar

from cms.shared.db.store import MemoryStore
from cms.shared.models.base import EntityModel, utcnow


# TypeVar bound to EntityModel ensures we only work with store entities
ModelType = TypeVar("ModelType", bound=EntityModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    All entity-specific repositories inherit from this class and add
    their own specialized query methods.

    Type Parameter:
        ModelType: The entity model class this repository manages

    Attributes:
        model: The entity model class
        store: The application MemoryStore

    Example:
        class MediaRepository(BaseRepository[Media]):
            def __init__(self, store: MemoryStore):
                super().__init__(Media, store)
    """

    def __init__(self, model: Type[ModelType], store: MemoryStore) -> None:
        """
        Initialize the repository.

        Args:
            model: Entity model class (e.g., Content, Category, Media)
            store: MemoryStore injected from app.state
        """
        self.model = model
        self.store = store

    @property
    def _records(self) -> list[ModelType]:
        return self.store.collection(self.model.collection_name)

    @staticmethod
    def _snapshot(instance: ModelType) -> ModelType:
        return instance.model_copy(deep=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: str) -> Optional[ModelType]:
        """
        Get a single record by its id.

        Args:
            record_id: The id of the record to fetch

        Returns:
            A snapshot of the record if found, None otherwise
        """
        return await self.find_one(lambda record: record.id == record_id)

    async def find_one(self, predicate: Callable[[ModelType], bool]) -> Optional[ModelType]:
        """
        Return the first record (in insertion order) matching ``predicate``.

        Example:
            about = await repo.find_one(lambda c: c.slug == "about")
        """
        with self.store.lock:
            for record in self._records:
                if predicate(record):
                    return self._snapshot(record)
        return None

    async def find(self, predicate: Callable[[ModelType], bool]) -> list[ModelType]:
        """Return every record matching ``predicate``, in insertion order."""
        with self.store.lock:
            return [self._snapshot(record) for record in self._records if predicate(record)]

    async def list(
        self,
        *,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = True,
    ) -> list[ModelType]:
        """
        List records with optional filtering and ordering.

        Args:
            filters: Dict of field=value equality filters
            order_by: Field name to order results by; insertion order when omitted
            order_desc: If True, order descending; if False, ascending

        Returns:
            List of record snapshots

        Example:
            drafts = await repo.list(filters={"status": ContentStatus.DRAFT})
            newest = await repo.list(order_by="updated_at")
        """
        with self.store.lock:
            records = list(self._records)

        # Apply filters: field == value
        if filters:
            for field, value in filters.items():
                if self.model.has_field(field):
                    records = [record for record in records if getattr(record, field) == value]

        # Apply ordering; sorted() is stable so ties keep insertion order
        if order_by and self.model.has_field(order_by):
            records = sorted(records, key=attrgetter(order_by), reverse=order_desc)

        return [self._snapshot(record) for record in records]

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Count records with optional filtering.

        Args:
            filters: Dict of field=value equality filters

        Returns:
            Number of matching records
        """
        if not filters:
            with self.store.lock:
                return len(self._records)
        return len(await self.list(filters=filters))

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Assigns a fresh uuid4 id and the creation timestamp(s), then
        appends the record to its collection.

        Args:
            **kwargs: Field values for the new record (snake_case names)

        Returns:
            A snapshot of the created record
        """
        instance = self.model.new(**kwargs)
        with self.store.lock:
            self._records.append(instance)
        return self._snapshot(instance)

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(
        self,
        record_id: str,
        **kwargs: Any,
    ) -> Optional[ModelType]:
        """
        Update a record by id.

        Merges the supplied fields into the existing record. Fields not
        passed keep their value; a field passed as None is cleared. Models
        with ``updated_at`` get it refreshed on every call, even when no
        fields are supplied.

        Args:
            record_id: id of the record to update
            **kwargs: Fields to merge

        Returns:
            Snapshot of the updated record, or None if not found
        """
        # id and creation time are owned by the store
        changes = {
            field: value
            for field, value in kwargs.items()
            if self.model.has_field(field) and field not in ("id", "created_at")
        }

        with self.store.lock:
            records = self._records
            for index, instance in enumerate(records):
                if instance.id != record_id:
                    continue
                if self.model.has_field("updated_at"):
                    changes["updated_at"] = max(utcnow(), instance.created_at)
                merged = instance.model_copy(update=changes, deep=True)
                records[index] = merged
                return self._snapshot(merged)
        return None

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: str) -> bool:
        """
        Delete a record by id.

        Deleting an id that does not exist is not an error.

        Args:
            record_id: id of the record to delete

        Returns:
            True if a record was removed, False if nothing matched
        """
        with self.store.lock:
            records = self._records
            remaining = [record for record in records if record.id != record_id]
            self.store.replace(self.model.collection_name, remaining)
            return len(remaining) != len(records)
