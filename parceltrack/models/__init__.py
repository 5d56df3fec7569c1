"""
Parcel tracker data models.

This package contains the Pydantic models stored by the parcel tracker.
"""

from parceltrack.models.parcel import (
    PARCEL_STATUS_PROGRESSION,
    Parcel,
    ParcelStatus,
)

__all__ = [
    "PARCEL_STATUS_PROGRESSION",
    "Parcel",
    "ParcelStatus",
]
