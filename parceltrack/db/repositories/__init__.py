"""
Repository implementations for the parcel tracker database.

Repositories provide a clean interface for database CRUD operations,
encapsulating SQLAlchemy queries and Pydantic model conversions.
"""

from parceltrack.db.repositories.parcel import ParcelStore

__all__ = ["ParcelStore"]
