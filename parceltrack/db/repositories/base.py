"""
Base repository with common CRUD operations.

Provides generic database operations that can be inherited by specific repositories.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import Column, Table, delete, select, update
from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseRepository(ABC, Generic[ModelT]):
    """
    Base repository with common CRUD operations.

    Rows are addressed through the table's single primary key column.

    Subclasses must implement:
    - table property: Return the SQLAlchemy Table
    - _row_to_model: Convert database row to Pydantic model
    - _model_to_dict: Convert Pydantic model to database dict
    """

    def __init__(self, session: Session):
        self.session = session

    @property
    @abstractmethod
    def table(self) -> Table:
        """SQLAlchemy table for this repository."""
        pass

    @abstractmethod
    def _row_to_model(self, row: Any) -> ModelT:
        """Convert database row to Pydantic model."""
        pass

    @abstractmethod
    def _model_to_dict(self, model: ModelT) -> dict:
        """Convert Pydantic model to database dict."""
        pass

    @property
    def pk(self) -> Column:
        """Primary key column of the table."""
        return list(self.table.primary_key.columns)[0]

    def get_by_id(self, id: Any) -> ModelT | None:
        """
        Get entity by primary key.

        Args:
            id: Primary key value

        Returns:
            Pydantic model or None if not found
        """
        stmt = select(self.table).where(self.pk == id)
        result = self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        return self._row_to_model(row)

    def create(self, model: ModelT) -> ModelT:
        """
        Create new entity.

        Args:
            model: Pydantic model to create

        Returns:
            Created model with database-generated fields
        """
        data = self._model_to_dict(model)
        stmt = self.table.insert().values(**data).returning(self.table)
        result = self.session.execute(stmt)
        row = result.fetchone()
        return self._row_to_model(row)

    def update_by_id(self, id: Any, **kwargs) -> bool:
        """
        Update entity by primary key with specific fields.

        Args:
            id: Primary key value
            **kwargs: Fields to update

        Returns:
            True if entity was updated, False if not found
        """
        stmt = update(self.table).where(self.pk == id).values(**kwargs)
        result = self.session.execute(stmt)
        return result.rowcount > 0

    def delete_by_id(self, id: Any) -> bool:
        """
        Delete entity by primary key.

        Args:
            id: Primary key value

        Returns:
            True if entity was deleted, False if not found
        """
        stmt = delete(self.table).where(self.pk == id)
        result = self.session.execute(stmt)
        return result.rowcount > 0
