"""Tests for ParcelStore against an in-memory SQLite database."""

import random
import time

import pytest

from parceltrack.db import ParcelStore
from parceltrack.errors import ParcelNotFoundError
from parceltrack.models.parcel import Parcel, ParcelStatus, utc_timestamp

# Seeded once per test run so client ids differ between runs
rng = random.Random(time.time_ns())


def make_parcel(client: int = 1000) -> Parcel:
    """Create a sample parcel for testing."""
    return Parcel(
        client=client,
        status=ParcelStatus.REGISTERED,
        address="test",
        created_at=utc_timestamp(),
    )


@pytest.fixture
def store(session) -> ParcelStore:
    """Create a ParcelStore bound to the test session."""
    return ParcelStore(session)


class TestAddGetDelete:
    """Tests for add, get and delete."""

    def test_add_assigns_number(self, store: ParcelStore):
        first = store.add(make_parcel())
        second = store.add(make_parcel())

        assert isinstance(first, int)
        assert second != first

    def test_get_returns_added_parcel(self, store: ParcelStore):
        parcel = make_parcel()

        number = store.add(parcel)
        stored = store.get(number)

        parcel.number = number
        assert stored == parcel

    def test_add_ignores_caller_number(self, store: ParcelStore):
        parcel = make_parcel()
        parcel.number = 999_999

        number = store.add(parcel)

        assert store.get(number).number == number

    def test_get_after_delete_fails(self, store: ParcelStore):
        number = store.add(make_parcel())

        store.delete(number)

        with pytest.raises(ParcelNotFoundError) as exc_info:
            store.get(number)
        assert exc_info.value.number == number

    def test_get_unknown_number_fails(self, store: ParcelStore):
        with pytest.raises(ParcelNotFoundError):
            store.get(123456)

    def test_delete_unknown_number_is_noop(self, store: ParcelStore):
        number = store.add(make_parcel())

        store.delete(number + 1000)

        assert store.get(number).number == number


class TestSetAddress:
    """Tests for set_address."""

    def test_set_address_updates_only_address(self, store: ParcelStore):
        parcel = make_parcel()
        number = store.add(parcel)

        store.set_address(number, "new test address")

        stored = store.get(number)
        parcel.number = number
        parcel.address = "new test address"
        assert stored == parcel

    def test_set_address_unknown_number_is_noop(self, store: ParcelStore):
        store.set_address(123456, "nowhere")

        with pytest.raises(ParcelNotFoundError):
            store.get(123456)


class TestSetStatus:
    """Tests for set_status."""

    def test_set_status_updates_only_status(self, store: ParcelStore):
        parcel = make_parcel()
        number = store.add(parcel)

        store.set_status(number, ParcelStatus.SENT)

        stored = store.get(number)
        parcel.number = number
        parcel.status = ParcelStatus.SENT
        assert stored == parcel

    def test_set_status_does_not_enforce_order(self, store: ParcelStore):
        number = store.add(make_parcel())

        store.set_status(number, ParcelStatus.DELIVERED)
        store.set_status(number, ParcelStatus.REGISTERED)

        assert store.get(number).status == ParcelStatus.REGISTERED

    def test_set_status_unknown_number_is_noop(self, store: ParcelStore):
        number = store.add(make_parcel())

        store.set_status(number + 1000, ParcelStatus.DELIVERED)

        assert store.get(number).status == ParcelStatus.REGISTERED
        with pytest.raises(ParcelNotFoundError):
            store.get(number + 1000)

    def test_set_status_accepts_string_value(self, store: ParcelStore):
        number = store.add(make_parcel())

        store.set_status(number, "sent")

        assert store.get(number).status == ParcelStatus.SENT


class TestGetByClient:
    """Tests for get_by_client."""

    def test_returns_exactly_client_parcels(self, store: ParcelStore):
        client = rng.randint(1, 10_000_000)
        parcels = [make_parcel(client) for _ in range(3)]
        store.add(make_parcel(client + 1))

        for parcel in parcels:
            parcel.number = store.add(parcel)

        stored = store.get_by_client(client)

        assert len(stored) == len(parcels)
        assert {p.number: p for p in stored} == {p.number: p for p in parcels}

    def test_unknown_client_returns_empty_list(self, store: ParcelStore):
        assert store.get_by_client(-1) == []
