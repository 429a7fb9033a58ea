from datetime import datetime

import pytest
import pytz

from calinvite import Event

FIXED_NOW = datetime(2024, 3, 10, 12, 0, 0, tzinfo=pytz.utc)
FIXED_HEX = "ab12cd34ef56ab78"


def fixed_clock() -> datetime:
    return FIXED_NOW


def fixed_hex(nbytes: int) -> str:
    return FIXED_HEX[: nbytes * 2]


@pytest.fixture
def start_time() -> datetime:
    return datetime(2024, 1, 1, 9, 0, 0, tzinfo=pytz.utc)


@pytest.fixture
def end_time() -> datetime:
    return datetime(2024, 1, 1, 10, 0, 0, tzinfo=pytz.utc)


@pytest.fixture
def simple_event(start_time: datetime, end_time: datetime) -> Event:
    return Event(
        title="Test Meeting",
        start_time=start_time,
        end_time=end_time,
        location="Test Location",
        timezone="UTC",
    )


@pytest.fixture
def complete_event(start_time: datetime, end_time: datetime) -> Event:
    return Event(
        title="Test Meeting",
        start_time=start_time,
        end_time=end_time,
        description="Test Description",
        notes="Bring a laptop",
        location="Test Location",
        url="https://meet.test.com",
        attendees=["test@example.com", "other@example.com"],
        show_attendees=True,
        timezone="UTC",
    )


@pytest.fixture
def conference_event() -> Event:
    return Event(
        title="Conference",
        multi_day_sessions=[
            {"start_time": datetime(2024, 4, 1, 9), "end_time": datetime(2024, 4, 1, 17)},
            {"start_time": datetime(2024, 4, 2, 9), "end_time": datetime(2024, 4, 2, 17)},
        ],
    )
