"""
Exceptions raised by the parcel tracker.

Storage failures are not wrapped: SQLAlchemy errors reach the caller as-is.
"""

from parceltrack.models.parcel import ParcelStatus


class ParcelTrackError(Exception):
    """Base class for parcel tracker errors."""


class ParcelNotFoundError(ParcelTrackError, LookupError):
    """No parcel is stored under the requested number."""

    def __init__(self, number: int):
        self.number = number
        super().__init__(f"Parcel not found: {number}")


class ParcelStateError(ParcelTrackError, ValueError):
    """The parcel's current status does not allow the requested change."""

    def __init__(self, number: int, status: ParcelStatus, action: str):
        self.number = number
        self.status = status
        self.action = action
        super().__init__(
            f"Cannot {action} parcel {number}: status is {status.value}, "
            f"expected {ParcelStatus.REGISTERED.value}"
        )
