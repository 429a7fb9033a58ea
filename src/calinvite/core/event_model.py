"""Event data model for calendar invitations."""

import dataclasses
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Any, Dict, Iterator, Mapping, NamedTuple, Optional, Tuple, Union

from calinvite.config.constants import ALL_DAY_DEFAULT_DURATION_SECONDS, DEFAULT_TIMEZONE
from calinvite.config.settings import DEFAULT_CONFIG, CalInviteConfig
from calinvite.core.timezone_utils import ensure_utc, resolve_timezone, to_timezone
from calinvite.exceptions.errors import ValidationError

logger = logging.getLogger(__name__)


class Session(NamedTuple):
    """One start/end pair of a calendar event, both in UTC."""

    start_time: datetime
    end_time: datetime


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class EventUpdate:
    """Partial update for an Event. Fields left as UNSET are not touched."""

    title: Any = UNSET
    start_time: Any = UNSET
    end_time: Any = UNSET
    all_day: Any = UNSET
    description: Any = UNSET
    notes: Any = UNSET
    location: Any = UNSET
    url: Any = UNSET
    attendees: Any = UNSET
    show_attendees: Any = UNSET
    timezone: Any = UNSET
    multi_day_sessions: Any = UNSET

    def changes(self) -> Dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not UNSET
        }


@dataclass(frozen=True)
class Event:
    """A validated calendar event, possibly spanning multiple sessions.

    Times are stored as aware UTC datetimes. Naive input is read in the
    event's timezone before conversion. The timezone itself only affects
    how encoders display times.
    """

    title: str
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    all_day: bool = False
    description: Optional[str] = None
    notes: Optional[str] = None
    location: Optional[str] = None
    url: Optional[str] = None
    attendees: Tuple[str, ...] = ()
    show_attendees: bool = False
    timezone: str = DEFAULT_TIMEZONE
    multi_day_sessions: Tuple[Session, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValidationError("Title is required", field="title")

        timezone = self.timezone or DEFAULT_TIMEZONE
        tzobj = resolve_timezone(timezone)

        object.__setattr__(self, "timezone", timezone)
        object.__setattr__(self, "all_day", bool(self.all_day))
        object.__setattr__(self, "show_attendees", bool(self.show_attendees))
        object.__setattr__(self, "start_time", ensure_utc(self.start_time, tzobj))
        object.__setattr__(self, "end_time", ensure_utc(self.end_time, tzobj))
        object.__setattr__(self, "attendees", _normalize_attendees(self.attendees))
        object.__setattr__(
            self,
            "multi_day_sessions",
            tuple(_normalize_session(s, tzobj) for s in (self.multi_day_sessions or ())),
        )

        self.validate()

    def validate(self) -> None:
        """Check the time invariants.

        Raises:
            ValidationError: If a timed single event lacks start or end.
        """
        if self.all_day or self.multi_day_sessions:
            return
        if self.start_time is None:
            raise ValidationError(
                "Start time is required for non-all-day events",
                field="start_time",
                missing_fields={"start_time"},
            )
        if self.end_time is None:
            raise ValidationError(
                "End time is required for non-all-day events",
                field="end_time",
                missing_fields={"end_time"},
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Event":
        """Create an Event from a plain attribute mapping.

        Unknown keys are ignored.

        Args:
            data: Mapping of event attributes.

        Returns:
            A validated Event instance.

        Raises:
            ValidationError: If the attributes violate an invariant.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        ignored = set(data) - known
        if ignored:
            logger.debug("Ignoring unknown event attributes: %s", sorted(ignored))
        kwargs = {key: value for key, value in data.items() if key in known}
        if "title" not in kwargs:
            raise ValidationError("Title is required", field="title", missing_fields={"title"})
        return cls(**kwargs)

    def update_attributes(self, update: Union[EventUpdate, Mapping[str, Any]]) -> "Event":
        """Merge a partial update and return the re-validated event.

        Args:
            update: An EventUpdate or a mapping of attribute names to values.

        Returns:
            A new Event carrying the merged attributes.

        Raises:
            ValidationError: If the merged state is invalid or a key is unknown.
        """
        if isinstance(update, EventUpdate):
            changes = update.changes()
        else:
            changes = dict(update)
            known = {f.name for f in dataclasses.fields(self)}
            unknown = set(changes) - known
            if unknown:
                raise ValidationError(f"Unknown event attributes: {sorted(unknown)}")
        return dataclasses.replace(self, **changes)

    @property
    def tzobj(self) -> tzinfo:
        return resolve_timezone(self.timezone)

    def sessions(self) -> Iterator[Session]:
        """Yield the (start, end) pairs to render.

        The multi-day session list when it is non-empty, otherwise the single
        event-level pair. Each call starts over.
        """
        if self.multi_day_sessions:
            yield from self.multi_day_sessions
        else:
            yield Session(self.start_time, self.end_time)

    def localize(self, instant: Optional[datetime]) -> Optional[datetime]:
        """Express a UTC instant in the event's timezone.

        UTC events get the instant back untouched.
        """
        if instant is None or self.timezone == "UTC":
            return instant
        return to_timezone(instant, self.tzobj)

    def all_day_range(self, now: datetime) -> Session:
        """Start and end of an all-day event, falling back to now and now + 1 day."""
        start = self.start_time or now
        end = self.end_time or start + timedelta(seconds=ALL_DAY_DEFAULT_DURATION_SECONDS)
        return Session(start, end)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary.

        Returns:
            Dictionary representation of the event with ISO-8601 timestamps.
        """
        return {
            "title": self.title,
            "start_time": _iso(self.start_time),
            "end_time": _iso(self.end_time),
            "all_day": self.all_day,
            "description": self.description,
            "notes": self.notes,
            "location": self.location,
            "url": self.url,
            "attendees": [str(a) for a in self.attendees],
            "show_attendees": self.show_attendees,
            "timezone": self.timezone,
            "multi_day_sessions": [
                {"start_time": _iso(s.start_time), "end_time": _iso(s.end_time)}
                for s in self.multi_day_sessions
            ],
        }

    def cache_payload(self) -> str:
        """Stable serialization of every field, suitable for hashing."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))

    def calendar_url(self, provider: Any, **kwargs: Any) -> str:
        """Generate the URL or ICS text for ``provider``."""
        from calinvite.providers.registry import generate

        return generate(self, provider, **kwargs)


def build_event(attributes: Mapping[str, Any], config: Optional[CalInviteConfig] = None) -> Event:
    """Build an Event, defaulting the timezone from ``config``.

    Args:
        attributes: Mapping of event attributes.
        config: Optional configuration supplying the default timezone.

    Returns:
        A validated Event instance.

    Raises:
        ValidationError: If the attributes violate an invariant.
    """
    config = config or DEFAULT_CONFIG
    data = dict(attributes)
    if not data.get("timezone"):
        data["timezone"] = config.timezone
    return Event.from_dict(data)


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _normalize_attendees(attendees: Any) -> Tuple[Any, ...]:
    if not attendees:
        return ()
    if isinstance(attendees, str):
        return (attendees,)
    return tuple(attendees)


def _normalize_session(session: Any, tzobj: tzinfo) -> Session:
    if isinstance(session, Mapping):
        start = session.get("start_time", session.get("start"))
        end = session.get("end_time", session.get("end"))
    else:
        try:
            start, end = session
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                f"Session must be a mapping or a (start, end) pair, got {session!r}",
                field="multi_day_sessions",
            ) from exc

    if start is None or end is None:
        raise ValidationError(
            "Each session requires a start time and an end time",
            field="multi_day_sessions",
        )
    return Session(ensure_utc(start, tzobj), ensure_utc(end, tzobj))
