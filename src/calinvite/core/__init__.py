"""Core event model and formatting for CalInvite."""

from calinvite.core.event_model import Event, EventUpdate, Session, UNSET, build_event
from calinvite.core.formatting import (
    compose_description,
    compose_location,
    escape_ics_text,
    filtered_attendees,
    format_date_only,
    format_local_timestamp,
    format_utc_timestamp,
    unescape_ics_text,
    url_encode,
)
from calinvite.core.timezone_utils import ensure_utc, resolve_timezone

__all__ = [
    "Event",
    "EventUpdate",
    "Session",
    "UNSET",
    "build_event",
    "compose_description",
    "compose_location",
    "escape_ics_text",
    "filtered_attendees",
    "format_date_only",
    "format_local_timestamp",
    "format_utc_timestamp",
    "unescape_ics_text",
    "url_encode",
    "ensure_utc",
    "resolve_timezone",
]
