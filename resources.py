"""Precondition-checked CRUD shared by every resource kind.

Updates compare the addressed id with the id the payload declares for
itself before touching the store, so a mismatched request reports
``PreconditionFailed`` without revealing whether the addressed row exists.
Existence checks and saves are separate store calls with no lock held in
between; concurrent updates to one id are last-write-wins.
"""
import logging
from typing import Generic, Optional, TypeVar

from errors import NotFound, PreconditionFailed
from store import Store

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResourceProtocol(Generic[T]):
    def __init__(self, kind: str, store: Store[T]):
        self.kind = kind
        self.store = store

    def list(self) -> list[T]:
        return self.store.find_all()

    def get(self, id: int) -> T:
        entity = self.store.find(id)
        if entity is None:
            logger.warning("%s %s not found", self.kind, id)
            raise NotFound(self.kind, id)
        return entity

    def create(self, entity: T) -> T:
        created = self.store.save(entity)
        logger.info("Created %s %s", self.kind, created.id)
        return created

    def save(self, entity: T) -> T:
        """Persist an entity that was loaded and changed in place."""
        return self.store.save(entity)

    def update(self, id: int, body_id: Optional[int], entity: T) -> T:
        if body_id != id:
            logger.warning("%s update rejected: path id %s, body id %s", self.kind, id, body_id)
            raise PreconditionFailed(self.kind)

        self.get(id)
        return self.store.save(entity)

    def delete(self, id: int) -> None:
        self.get(id)
        self.store.delete_by_id(id)
        logger.info("Deleted %s %s", self.kind, id)
