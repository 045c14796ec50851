"""
Base Service

Business logic shared by every entity kind: create, fetch, list, merge
updates, delete. Entity services subclass this and add their own queries.

Service Rules:
==============
- get() returns None for a missing id; the handler decides what that means
- update() on a missing id raises the kind's NotFoundError
- delete() never fails; a missing id is logged and ignored
"""

from typing import Any, Generic, Optional, Type

from cms.shared.core.exceptions import NotFoundError
from cms.shared.core.logging import get_logger
from cms.shared.repositories.base import BaseRepository, ModelType
from cms.shared.schemas.common import BaseSchema, PartialSchema


logger = get_logger("cms.services")


class BaseService(Generic[ModelType]):
    """
    Generic service over one repository.

    Attributes:
        repo: Repository for the entity kind
        not_found_error: Exception class raised when update() misses
        entity_name: Model class name used in log events
    """

    not_found_error: Type[NotFoundError] = NotFoundError

    def __init__(self, repo: BaseRepository[ModelType]) -> None:
        self.repo = repo
        self.entity_name = repo.model.__name__

    async def create(self, data: BaseSchema) -> ModelType:
        """
        Create an entity from a validated request body.

        Args:
            data: Insert schema instance (already validated)

        Returns:
            The created entity with its generated id
        """
        entity = await self.repo.create(**data.model_dump())
        logger.info(f"{self.entity_name} created", entity_id=entity.id)
        return entity

    async def get(self, entity_id: str) -> Optional[ModelType]:
        """Get an entity by id, or None."""
        return await self.repo.get(entity_id)

    async def list_all(self) -> list[ModelType]:
        """List every entity in insertion order."""
        return await self.repo.list()

    async def update(self, entity_id: str, data: PartialSchema) -> ModelType:
        """
        Merge the fields present in ``data`` into an existing entity.

        Args:
            entity_id: id of the entity to change
            data: Partial schema; unset fields are left alone

        Returns:
            The updated entity

        Raises:
            NotFoundError: If no entity has this id (the store is unchanged)
        """
        changes = data.changes()
        entity = await self.repo.update(entity_id, **changes)
        if entity is None:
            raise self.not_found_error(entity_id)
        logger.info(
            f"{self.entity_name} updated",
            entity_id=entity_id,
            fields=sorted(changes),
        )
        return entity

    async def delete(self, entity_id: str) -> None:
        """
        Delete an entity.

        Idempotent: deleting an unknown id succeeds without effect.
        """
        deleted = await self.repo.delete(entity_id)
        if deleted:
            logger.info(f"{self.entity_name} deleted", entity_id=entity_id)
        else:
            logger.debug(f"{self.entity_name} delete skipped, no match", entity_id=entity_id)

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        return await self.repo.count(filters=filters)
