from datetime import datetime

import pytest
import pytz
from icalendar import vText

from calinvite import Event
from calinvite.core.formatting import (
    build_query,
    compose_description,
    compose_location,
    escape_ics_text,
    filtered_attendees,
    format_date_only,
    format_local_timestamp,
    format_utc_iso,
    format_utc_timestamp,
    unescape_ics_text,
    url_encode,
)

INSTANT = datetime(2024, 1, 1, 9, 5, 7, tzinfo=pytz.utc)


def _event(**kwargs) -> Event:
    return Event(title="Planning", all_day=True, **kwargs)


def test_url_encode_uses_form_rules() -> None:
    assert url_encode("Test & Meeting + Spaces") == "Test+%26+Meeting+%2B+Spaces"
    assert url_encode("a/b:c@d") == "a%2Fb%3Ac%40d"
    assert url_encode(60) == "60"


def test_build_query_keeps_order_and_raw_keys() -> None:
    query = build_query({"b": "x y", "a": "1/2", "dates": "1/2"}, raw_keys=("dates",))
    assert query == "b=x+y&a=1%2F2&dates=1/2"


def test_escape_ics_text() -> None:
    assert escape_ics_text("a\\b\nc,d;e") == "a\\\\b\\nc\\,d\\;e"
    assert escape_ics_text(None) == ""
    assert escape_ics_text("plain") == "plain"


def test_escape_ics_text_normalizes_carriage_returns() -> None:
    assert escape_ics_text("line1\r\nline2") == "line1\\nline2"
    assert escape_ics_text("line1\rline2") == "line1\\nline2"
    assert unescape_ics_text(escape_ics_text("a\r\nb\rc")) == "a\nb\nc"


@pytest.mark.parametrize(
    "text",
    [
        "back\\slash",
        "line one\nline two",
        "a, b; c",
        "\\n is not a newline",
        "mixed \\;,\n\\\\ end\\",
    ],
)
def test_escape_round_trip(text: str) -> None:
    escaped = escape_ics_text(text)
    assert "\n" not in escaped
    assert unescape_ics_text(escaped) == text


def test_escaped_text_is_readable_by_icalendar() -> None:
    text = "Room 4, Building B; ring twice\nthen wait"
    assert vText.from_ical(escape_ics_text(text)) == text


def test_timestamp_profiles() -> None:
    assert format_utc_timestamp(INSTANT) == "20240101T090507Z"
    assert format_utc_iso(INSTANT) == "2024-01-01T09:05:07Z"
    assert format_local_timestamp(INSTANT) == "20240101T090507"
    assert format_date_only(INSTANT) == "20240101"
    assert format_date_only(INSTANT, dashed=True) == "2024-01-01"


def test_utc_timestamp_converts_other_zones() -> None:
    tokyo = pytz.timezone("Asia/Tokyo").localize(datetime(2024, 1, 1, 18, 0))
    assert format_utc_timestamp(tokyo) == "20240101T090000Z"
    assert format_local_timestamp(tokyo) == "20240101T180000"


def test_compose_description_joins_blocks() -> None:
    event = _event(description="Agenda", notes="Bring laptop", url="https://meet.example.com/x")
    assert compose_description(event) == (
        "Agenda\n\nNotes: Bring laptop\n\nVirtual Meeting URL: https://meet.example.com/x"
    )
    assert compose_description(event, include_url=False) == "Agenda\n\nNotes: Bring laptop"


def test_compose_description_empty_when_nothing_to_show() -> None:
    assert compose_description(_event()) == ""
    assert compose_description(_event(url="https://x.test"), include_url=False) == ""
    assert compose_description(_event(url="https://x.test")) == "Virtual Meeting URL: https://x.test"


def test_compose_location() -> None:
    assert compose_location(_event(url="https://x.test")) == "https://x.test"
    assert compose_location(_event(location="Room 4")) == "Room 4"
    assert compose_location(_event(location="Room 4", url="https://x.test")) == "Room 4\nhttps://x.test"
    assert compose_location(_event()) == ""


def test_filtered_attendees() -> None:
    people = ["a@example.com", "b@example.com"]
    assert filtered_attendees(_event(attendees=people, show_attendees=True)) == tuple(people)
    assert filtered_attendees(_event(attendees=people)) == ()
    assert filtered_attendees(_event(show_attendees=True)) == ()
