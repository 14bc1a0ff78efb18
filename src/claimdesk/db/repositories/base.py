"""
Base repository with generic CRUD operations.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from claimdesk.exceptions import NotFoundError
from claimdesk.models.db import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic repository providing CRUD operations for a model."""

    def __init__(self, model: Type[ModelType], session: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: Database session
        """
        self.model = model
        self.session = session

    def create(self, **kwargs: Any) -> ModelType:
        """
        Create and flush a new instance.

        Args:
            **kwargs: Model field values

        Returns:
            Created instance (with primary key assigned)
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        self.session.flush()
        return instance

    def get(self, id: int) -> Optional[ModelType]:
        """Get instance by primary key, or None."""
        return self.session.get(self.model, id)

    def get_or_raise(self, id: int) -> ModelType:
        """
        Get instance by primary key.

        Raises:
            NotFoundError: If no instance has this primary key
        """
        instance = self.get(id)
        if instance is None:
            raise NotFoundError(self.model.__name__, id)
        return instance

    def get_all(self, limit: Optional[int] = None, offset: int = 0) -> List[ModelType]:
        """Get all instances ordered by primary key."""
        query = self.session.query(self.model).order_by(self.model.id).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def update(self, id: int, **kwargs: Any) -> ModelType:
        """
        Update fields on an existing instance.

        Raises:
            NotFoundError: If no instance has this primary key
        """
        instance = self.get_or_raise(id)
        for key, value in kwargs.items():
            setattr(instance, key, value)
        self.session.flush()
        return instance

    def delete(self, id: int) -> bool:
        """Delete instance by primary key. Returns False if it did not exist."""
        instance = self.get(id)
        if instance is None:
            return False
        self.session.delete(instance)
        self.session.flush()
        return True

    def count(self) -> int:
        return self.session.query(self.model).count()
