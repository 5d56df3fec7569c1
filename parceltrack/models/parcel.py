from datetime import datetime, timezone
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field

# RFC 3339 without fractional seconds, e.g. 2024-03-01T12:30:00Z
CREATED_AT_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class ParcelStatus(StrEnum):
    """Parcel lifecycle status"""

    REGISTERED = "registered"  # Accepted, waiting for dispatch
    SENT = "sent"  # Handed over for delivery
    DELIVERED = "delivered"  # Received by the client


# Order in which a parcel moves through its lifecycle
PARCEL_STATUS_PROGRESSION = [
    ParcelStatus.REGISTERED,
    ParcelStatus.SENT,
    ParcelStatus.DELIVERED,
]


def utc_timestamp(now: datetime | None = None) -> str:
    """Format a timestamp the way parcels store created_at."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime(CREATED_AT_FORMAT)


class Parcel(BaseModel):
    """
    A shipment record tracked by the parcel store.

    The number is assigned by the store on insert and never changes afterwards.
    Only address and status are expected to change once a parcel is stored.
    """

    number: Optional[int] = Field(
        default=None, description="Parcel number assigned by the store"
    )
    client: int = Field(description="Identifier of the parcel's owner")
    status: ParcelStatus = Field(
        default=ParcelStatus.REGISTERED, description="Current lifecycle status"
    )
    address: str = Field(description="Delivery address")
    created_at: str = Field(description="Creation time as an RFC 3339 string")

    @classmethod
    def new(cls, client: int, address: str) -> "Parcel":
        """Build a freshly registered parcel stamped with the current UTC time."""
        return cls(
            client=client,
            status=ParcelStatus.REGISTERED,
            address=address,
            created_at=utc_timestamp(),
        )
