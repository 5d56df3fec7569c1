"""
Unit of Work pattern for transaction coordination.

Groups parcel store calls into a single session and transaction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from parceltrack.db.connection import DatabaseConnection
from parceltrack.db.repositories.parcel import ParcelStore

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class UnitOfWork:
    """
    Unit of Work for managing database transactions.

    Usage:
        with UnitOfWork() as uow:
            number = uow.parcels.add(parcel)
            uow.commit()  # Explicit commit

        # Auto-rollback on exception:
        with UnitOfWork() as uow:
            uow.parcels.delete(number)
            raise Exception("Something went wrong")
            # Transaction is automatically rolled back
    """

    def __init__(self):
        self._session: Session | None = None
        self._parcels: ParcelStore | None = None

    def __enter__(self) -> UnitOfWork:
        self._session = DatabaseConnection.get_session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.rollback()
        self._close()
        return False  # Don't suppress exceptions

    @property
    def session(self) -> Session:
        """Get current session (raises if not in context)."""
        if self._session is None:
            raise RuntimeError("UnitOfWork must be used within a context manager")
        return self._session

    @property
    def parcels(self) -> ParcelStore:
        """Parcel store for this unit of work."""
        if self._parcels is None:
            self._parcels = ParcelStore(self.session)
        return self._parcels

    def commit(self):
        """Commit the current transaction."""
        self.session.commit()

    def rollback(self):
        """Rollback the current transaction."""
        self.session.rollback()

    def _close(self):
        """Close the session."""
        if self._session is not None:
            self._session.close()
            self._session = None
            self._parcels = None
