"""
Parcel tracker database module.

Provides database connection management and the parcel store.
Uses SQLAlchemy Core, optionally through the Cloud SQL Python Connector.
"""

from parceltrack.db.connection import DatabaseConnection
from parceltrack.db.repositories.parcel import ParcelStore
from parceltrack.db.unit_of_work import UnitOfWork

__all__ = ["DatabaseConnection", "ParcelStore", "UnitOfWork"]
