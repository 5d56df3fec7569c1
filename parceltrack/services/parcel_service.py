"""
Parcel lifecycle rules applied on top of the parcel store.

Each operation runs in its own unit of work and commits on success.
"""

import logging

from parceltrack.db import UnitOfWork
from parceltrack.errors import ParcelStateError
from parceltrack.models.parcel import PARCEL_STATUS_PROGRESSION, Parcel, ParcelStatus

logger = logging.getLogger(__name__)


def format_parcel(parcel: Parcel) -> str:
    """Render a parcel as a single human-readable line."""
    return (
        f"Parcel #{parcel.number} for client {parcel.client}, "
        f"address: {parcel.address}, registered at {parcel.created_at}, "
        f"status: {parcel.status.value}"
    )


class ParcelService:
    """Registers parcels and moves them through their lifecycle."""

    def register(self, client: int, address: str) -> Parcel:
        """
        Register a new parcel for a client.

        Args:
            client: Client identifier
            address: Delivery address

        Returns:
            Stored parcel with its assigned number
        """
        parcel = Parcel.new(client, address)

        with UnitOfWork() as uow:
            parcel.number = uow.parcels.add(parcel)
            uow.commit()

        logger.info(
            f"Registered parcel {parcel.number}",
            extra={"json_fields": parcel.model_dump(mode="json")},
        )
        return parcel

    def client_parcels(self, client: int) -> list[Parcel]:
        """All parcels of a client."""
        with UnitOfWork() as uow:
            return uow.parcels.get_by_client(client)

    def next_status(self, number: int) -> ParcelStatus | None:
        """
        Advance a parcel to the next lifecycle status.

        Returns:
            The new status, or None if the parcel is already delivered

        Raises:
            ParcelNotFoundError: No parcel with this number
        """
        with UnitOfWork() as uow:
            current = uow.parcels.get(number).status
            position = PARCEL_STATUS_PROGRESSION.index(current)
            if position == len(PARCEL_STATUS_PROGRESSION) - 1:
                return None

            new_status = PARCEL_STATUS_PROGRESSION[position + 1]
            uow.parcels.set_status(number, new_status)
            uow.commit()

        logger.info(
            f"Parcel {number} status changed",
            extra={
                "json_fields": {
                    "number": number,
                    "from": current.value,
                    "to": new_status.value,
                }
            },
        )
        return new_status

    def change_address(self, number: int, address: str) -> None:
        """
        Change the delivery address of a registered parcel.

        Raises:
            ParcelNotFoundError: No parcel with this number
            ParcelStateError: Parcel has already been sent
        """
        with UnitOfWork() as uow:
            current = uow.parcels.get(number)
            if current.status != ParcelStatus.REGISTERED:
                raise ParcelStateError(number, current.status, "change address of")

            uow.parcels.set_address(number, address)
            uow.commit()

        logger.info(
            f"Parcel {number} address changed",
            extra={"json_fields": {"number": number, "address": address}},
        )

    def delete(self, number: int) -> None:
        """
        Delete a registered parcel.

        Raises:
            ParcelNotFoundError: No parcel with this number
            ParcelStateError: Parcel has already been sent
        """
        with UnitOfWork() as uow:
            current = uow.parcels.get(number)
            if current.status != ParcelStatus.REGISTERED:
                raise ParcelStateError(number, current.status, "delete")

            uow.parcels.delete(number)
            uow.commit()

        logger.info(f"Deleted parcel {number}")
