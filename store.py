import logging
from typing import Generic, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from errors import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Store(Generic[T]):
    """Keyed storage for one entity kind.

    ``save`` is insert-or-replace: an entity without an id is inserted and
    gets one assigned, an entity with an id replaces the stored row.
    """

    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model

    def find(self, id: int) -> Optional[T]:
        return self.db.get(self.model, id)

    def find_all(self) -> list[T]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def find_first(self, **attrs) -> Optional[T]:
        return self.db.query(self.model).filter_by(**attrs).order_by(self.model.id).first()

    def save(self, entity: T) -> T:
        saved = self.db.merge(entity)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Rejected %s: %s", self.model.__name__, exc.orig)
            raise ValidationError(self.model.__name__, str(exc.orig)) from exc
        self.db.refresh(saved)
        return saved

    def delete_by_id(self, id: int) -> None:
        entity = self.find(id)
        if entity is None:
            return
        self.db.delete(entity)
        self.db.commit()
