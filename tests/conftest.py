import os

# Keep test runs from writing logs/errors.log and from picking up a local seed file
os.environ.setdefault("ERROR_LOG_PATH", "")
os.environ.setdefault("ROOMS_SEED_PATH", "")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.services.booking_ledger import BookingLedger
from app.services.room_registry import RoomRegistry


@pytest.fixture
def registry():
    return RoomRegistry()


@pytest.fixture
def ledger(registry):
    return BookingLedger(registry)


@pytest.fixture
def make_room(registry):
    def _make(name="Board Room", seat_capacity=8, amenities=None, price_per_hour=40.0):
        return registry.create_room(
            name=name,
            seat_capacity=seat_capacity,
            amenities=["projector"] if amenities is None else amenities,
            price_per_hour=price_per_hour,
        )
    return _make


@pytest.fixture
def client():
    with TestClient(create_app(rooms_seed_path="")) as test_client:
        yield test_client
