"""Shared text and timestamp formatting for the provider encoders."""

from datetime import datetime
from typing import Collection, Mapping, Optional, Sequence, Tuple
from urllib.parse import quote_plus

import pytz

from calinvite.config.constants import (
    DESCRIPTION_BLOCK_SEPARATOR,
    NOTES_LABEL,
    VIRTUAL_MEETING_LABEL,
)

# NOTE: ORDER MATTERS! Backslashes first so later escapes are not doubled.
_ICS_ESCAPES: Sequence[Tuple[str, str]] = (
    ("\\", "\\\\"),
    ("\n", "\\n"),
    (",", "\\,"),
    (";", "\\;"),
)

_ICS_UNESCAPES = {"\\": "\\", "n": "\n", "N": "\n", ",": ",", ";": ";"}


def url_encode(value: object) -> str:
    """Percent-encode a value for application/x-www-form-urlencoded (spaces become '+')."""
    return quote_plus(str(value), safe="")


def build_query(params: Mapping[str, object], raw_keys: Collection[str] = ()) -> str:
    """Join an ordered mapping into ``key=value&...``.

    Values are percent-encoded unless their key is in ``raw_keys``; those
    carry values that are already URL-safe (paths, date ranges).
    """
    return "&".join(
        f"{key}={value if key in raw_keys else url_encode(value)}"
        for key, value in params.items()
    )


def escape_ics_text(value: Optional[object]) -> str:
    """Escape TEXT per RFC 5545 section 3.3.11. None becomes ''.

    CRLF and lone CR are folded to LF first, so they unescape as LF.
    """
    if value is None:
        return ""
    text = str(value).replace("\r\n", "\n").replace("\r", "\n")
    for raw, escaped in _ICS_ESCAPES:
        text = text.replace(raw, escaped)
    return text


def unescape_ics_text(value: str) -> str:
    """Reverse escape_ics_text."""
    out = []
    chars = iter(value)
    for char in chars:
        if char == "\\":
            nxt = next(chars, "")
            out.append(_ICS_UNESCAPES.get(nxt, "\\" + nxt))
        else:
            out.append(char)
    return "".join(out)


def format_utc_timestamp(instant: datetime) -> str:
    """``YYYYMMDDTHHMMSSZ``"""
    return instant.astimezone(pytz.utc).strftime("%Y%m%dT%H%M%SZ")


def format_utc_iso(instant: datetime) -> str:
    """``YYYY-MM-DDTHH:MM:SSZ`` as used by Outlook web links."""
    return instant.astimezone(pytz.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def format_local_timestamp(instant: datetime) -> str:
    """``YYYYMMDDTHHMMSS`` with no zone marker; the TZID travels separately."""
    return instant.strftime("%Y%m%dT%H%M%S")


def format_date_only(instant: datetime, dashed: bool = False) -> str:
    """``YYYYMMDD``, or ``YYYY-MM-DD`` when ``dashed``."""
    return instant.strftime("%Y-%m-%d" if dashed else "%Y%m%d")


def compose_description(event, include_url: bool = True) -> str:
    """Description, notes and (optionally) the meeting URL as blank-line separated blocks.

    Args:
        event: The event to describe.
        include_url: Whether the provider folds the virtual-meeting URL into the text.

    Returns:
        The composed text, or '' if there is nothing to show.
    """
    parts = []
    if event.description:
        parts.append(event.description)
    if event.notes:
        parts.append(NOTES_LABEL.format(notes=event.notes))
    if include_url and event.url:
        parts.append(VIRTUAL_MEETING_LABEL.format(url=event.url))
    return DESCRIPTION_BLOCK_SEPARATOR.join(parts)


def compose_location(event) -> str:
    """Physical location and meeting URL folded into one field."""
    parts = [part for part in (event.location, event.url) if part]
    return "\n".join(parts)


def filtered_attendees(event) -> Tuple[str, ...]:
    """Attendees to publish, or nothing when show_attendees is off."""
    if event.show_attendees and event.attendees:
        return tuple(event.attendees)
    return ()
