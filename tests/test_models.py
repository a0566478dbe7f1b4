from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from scraper.models import Event


def make_event():
    return Event(
        date="2024.01.01",
        time=1704101400,
        depth_km=10.5,
        magnitude=4.2,
        province="IZMIR",
        district="BUCA",
    )


def test_event_is_immutable():
    event = make_event()
    with pytest.raises(FrozenInstanceError):
        event.magnitude = 5.0


def test_event_to_dict():
    assert make_event().to_dict() == {
        "date": "2024.01.01",
        "time": 1704101400,
        "depth_km": 10.5,
        "magnitude": 4.2,
        "province": "IZMIR",
        "district": "BUCA",
    }


def test_event_occurred_at_is_utc():
    assert make_event().occurred_at == datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)
