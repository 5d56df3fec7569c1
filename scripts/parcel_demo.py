"""
Walk a parcel through the tracker's lifecycle.

Registers a parcel, changes its address, advances its status, prints the
client's parcels, then registers and deletes a second parcel.
Uses DATABASE_URL (or Cloud SQL settings) from the environment / .env file.
"""

import logging
import random
import sys

from dotenv import load_dotenv

from parceltrack.db import DatabaseConnection
from parceltrack.errors import ParcelTrackError
from parceltrack.services import ParcelService, format_parcel
from parceltrack.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def run(service: ParcelService, client: int):
    parcel = service.register(client, "Psk, Voennaya d. 4, kv. 21")
    print(f"📦 {format_parcel(parcel)}")

    service.change_address(parcel.number, "Saratov, Ulitsa Tverskaya d. 2")
    print(f"🏠 Parcel #{parcel.number}: address changed")

    status = service.next_status(parcel.number)
    print(f"🚚 Parcel #{parcel.number}: new status {status}")

    print(f"\nParcels of client {client}:")
    for stored in service.client_parcels(client):
        print(f"  - {format_parcel(stored)}")

    second = service.register(client, "Psk, Voennaya d. 4, kv. 21")
    print(f"\n📦 {format_parcel(second)}")

    service.delete(second.number)
    print(f"🗑️  Parcel #{second.number}: deleted")

    print(f"\nParcels of client {client}:")
    for stored in service.client_parcels(client):
        print(f"  - {format_parcel(stored)}")


def main():
    load_dotenv()
    setup_logging("parceltrack-demo")

    print("🚀 Parcel Tracker Demo")
    print("=" * 50)

    DatabaseConnection.initialize(create_tables=True)
    client = random.Random().randint(1, 10_000_000)

    try:
        run(ParcelService(), client)
    except ParcelTrackError as e:
        print(f"❌ {e}")
        sys.exit(1)
    finally:
        DatabaseConnection.close()

    print("=" * 50)
    print("✅ Done")


if __name__ == "__main__":
    main()
