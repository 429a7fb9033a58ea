"""Timezone resolution and UTC normalization utilities."""

import logging
import re
from datetime import date, datetime, time, tzinfo
from typing import Optional, Union

import pytz
import tzlocal
from dateutil import parser
from dateutil import tz as du_tz

from calinvite.config.constants import ABBR_TO_TZ
from calinvite.exceptions.errors import TimezoneResolutionError, ValidationError

logger = logging.getLogger(__name__)

# "+01:00", "-0530", "UTC+2", "GMT-03:30"
_OFFSET_PATTERN = re.compile(
    r"^(?:UTC|GMT)?\s*([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE
)

TimeInput = Union[datetime, date, str]


def parse_offset(tz_str: str) -> Optional[tzinfo]:
    """Parse a fixed UTC offset string into a tzinfo.

    Args:
        tz_str: Offset such as "+01:00", "-0530" or "UTC+2".

    Returns:
        A fixed-offset tzinfo, or None if the string is not an offset.
    """
    match = _OFFSET_PATTERN.match(tz_str.strip())
    if not match:
        return None
    sign, hours, minutes = match.groups()
    total = int(hours) * 60 + int(minutes or 0)
    if total >= 24 * 60:
        return None
    return pytz.FixedOffset(-total if sign == "-" else total)


def resolve_timezone(tz_str: Optional[str]) -> tzinfo:
    """Resolve a timezone string to a timezone object.

    Accepts IANA names, common abbreviations, fixed offsets and "local".

    Args:
        tz_str: The timezone string (e.g., "UTC", "EST", "America/New_York", "+01:00").

    Returns:
        A tzinfo instance.

    Raises:
        TimezoneResolutionError: If nothing can resolve the string.
    """
    tz_str_raw = (tz_str or "UTC").strip()
    tz_upper = tz_str_raw.upper()

    if tz_upper in ("UTC", "Z"):
        return pytz.utc

    if tz_upper == "LOCAL":
        # User's system zone (DST aware)
        local_tz_obj = tzlocal.get_localzone()
        tz_name = getattr(local_tz_obj, "zone", None) or getattr(local_tz_obj, "key", str(local_tz_obj))
    else:
        tz_name = ABBR_TO_TZ.get(tz_upper, tz_str_raw)

    offset = parse_offset(tz_name)
    if offset is not None:
        return offset

    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        # Last-ditch attempt with dateutil (may return fixed offset)
        fallback = du_tz.gettz(tz_name)
        if fallback is not None:
            logger.warning("Timezone %r resolved through dateutil fallback", tz_name)
            return fallback

    logger.warning("Couldn't resolve timezone %r", tz_str_raw)
    raise TimezoneResolutionError(tz_str_raw)


def attach_timezone(tzobj: tzinfo, naive_dt: datetime) -> datetime:
    """Return timezone-aware datetime, using proper DST rules where possible.

    Args:
        tzobj: The timezone object (pytz or dateutil).
        naive_dt: A naive datetime to attach the timezone to.

    Returns:
        A timezone-aware datetime.
    """
    if hasattr(tzobj, "localize"):
        # pytz: honour DST rules; ambiguous or skipped wall times take the DST offset
        try:
            return tzobj.localize(naive_dt, is_dst=None)
        except pytz.exceptions.InvalidTimeError:
            return tzobj.localize(naive_dt, is_dst=True)
    # zoneinfo/dateutil: just set tzinfo; these implement DST via utcoffset()
    return naive_dt.replace(tzinfo=tzobj)


def ensure_utc(value: Optional[TimeInput], tzobj: tzinfo = pytz.utc) -> Optional[datetime]:
    """Normalize a time value to an aware UTC datetime.

    Naive values are interpreted in ``tzobj``; plain dates map to midnight
    in ``tzobj``.

    Args:
        value: A datetime, date, ISO-8601 string or None.
        tzobj: Timezone used for naive input.

    Returns:
        The UTC datetime, or None when value is None.

    Raises:
        ValidationError: If the value cannot be interpreted as a time.
    """
    if value is None:
        return None

    if isinstance(value, str):
        try:
            value = parser.parse(value)
        except (ValueError, OverflowError) as exc:
            raise ValidationError(f"Unparseable time value: {value!r}") from exc

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time.min)
    else:
        raise ValidationError(
            f"Expected datetime, date or string, got {type(value).__name__}"
        )

    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        dt = attach_timezone(tzobj, dt)
    return dt.astimezone(pytz.utc)


def to_timezone(instant: datetime, tzobj: tzinfo) -> datetime:
    """Express an aware instant in another timezone."""
    converted = instant.astimezone(tzobj)
    if hasattr(tzobj, "normalize"):
        converted = tzobj.normalize(converted)
    return converted
