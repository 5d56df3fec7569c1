"""
Parcel store for database operations.

Maps Parcel models to rows of the parcel table and back.
"""

from typing import Any

from sqlalchemy import Table, select

from parceltrack.db.repositories.base import BaseRepository
from parceltrack.db.tables import parcel
from parceltrack.errors import ParcelNotFoundError
from parceltrack.models.parcel import Parcel, ParcelStatus


class ParcelStore(BaseRepository[Parcel]):
    """
    Repository for Parcel records.

    Updates and deletes do not check that the parcel exists: a miss is a
    silent no-op. Status changes are not validated here, see ParcelService.
    """

    @property
    def table(self) -> Table:
        return parcel

    def _row_to_model(self, row: Any) -> Parcel:
        """Convert database row to Parcel model."""
        return Parcel(
            number=row.number,
            client=row.client,
            status=ParcelStatus(row.status),
            address=row.address,
            created_at=row.created_at,
        )

    def _model_to_dict(self, model: Parcel) -> dict:
        """Convert Parcel model to database dict (number is left to the database)."""
        return {
            "client": model.client,
            "status": model.status.value,
            "address": model.address,
            "created_at": model.created_at,
        }

    def add(self, model: Parcel) -> int:
        """
        Store a new parcel.

        Args:
            model: Parcel to insert, its number is ignored

        Returns:
            Number assigned to the parcel
        """
        return self.create(model).number

    def get(self, number: int) -> Parcel:
        """
        Get parcel by number.

        Raises:
            ParcelNotFoundError: No parcel with this number
        """
        found = self.get_by_id(number)
        if found is None:
            raise ParcelNotFoundError(number)
        return found

    def set_address(self, number: int, address: str) -> None:
        """Change the delivery address of a parcel."""
        self.update_by_id(number, address=address)

    def set_status(self, number: int, status: ParcelStatus) -> None:
        """Change the status of a parcel."""
        self.update_by_id(number, status=ParcelStatus(status).value)

    def delete(self, number: int) -> None:
        """Remove a parcel."""
        self.delete_by_id(number)

    def get_by_client(self, client: int) -> list[Parcel]:
        """
        Get all parcels of a client.

        Args:
            client: Client identifier

        Returns:
            List of parcels, ordered by number
        """
        stmt = select(self.table).where(self.table.c.client == client)
        stmt = stmt.order_by(self.table.c.number.asc())

        result = self.session.execute(stmt)
        return [self._row_to_model(row) for row in result.fetchall()]
