"""Shared behaviour for the calendar provider encoders."""

import logging
import secrets
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Collection, Dict, List, Optional, Tuple

import pytz

from calinvite.core.event_model import Event, Session
from calinvite.core.formatting import build_query, filtered_attendees
from calinvite.exceptions.errors import EncodingError, MissingRequiredFieldError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
HexSource = Callable[[int], str]


def utc_now() -> datetime:
    """Current instant in UTC."""
    return datetime.now(pytz.utc)


class BaseProvider(ABC):
    """Turns one Event into a provider-specific string.

    The clock and the random hex source are injectable so callers can get
    reproducible output.
    """

    name = ""

    def __init__(
        self,
        event: Event,
        clock: Optional[Clock] = None,
        token_hex: Optional[HexSource] = None,
    ):
        self.event = event
        self.clock = clock or utc_now
        self.token_hex = token_hex or secrets.token_hex

    @abstractmethod
    def generate(self) -> str:
        """Return the URL(s) or ICS text for the event."""

    def now(self) -> datetime:
        return self.clock().astimezone(pytz.utc)

    def all_day_range(self) -> Session:
        """All-day start/end expressed in the event's timezone."""
        start, end = self.event.all_day_range(self.now())
        return Session(self.event.localize(start), self.event.localize(end))

    def timed_sessions(self) -> List[Session]:
        """Sessions for a timed event.

        Raises:
            MissingRequiredFieldError: If a single event lacks start or end.
        """
        if self.event.multi_day_sessions:
            return list(self.event.sessions())
        if self.event.start_time is None:
            raise MissingRequiredFieldError("start_time", provider=self.name)
        if self.event.end_time is None:
            raise MissingRequiredFieldError("end_time", provider=self.name)
        return [Session(self.event.start_time, self.event.end_time)]

    def attendee_addresses(self) -> Tuple[str, ...]:
        """Published attendee addresses.

        Raises:
            EncodingError: If an attendee is not a string.
        """
        attendees = filtered_attendees(self.event)
        for attendee in attendees:
            if not isinstance(attendee, str):
                raise EncodingError(
                    f"Attendee must be an email address string, got {type(attendee).__name__}",
                    provider=self.name,
                )
        return attendees


class UrlProvider(BaseProvider):
    """Base for "add to calendar" web links.

    Subclasses supply the parameter mapping for one session; values are
    percent-encoded except for keys in ``raw_keys``.
    """

    base_url = ""
    raw_keys: Collection[str] = ()

    def generate(self) -> str:
        if self.event.all_day:
            start, end = self.all_day_range()
            logger.debug("Rendering all-day %s link for %r", self.name, self.event.title)
            return self.build_url(self.all_day_params(start, end))

        sessions = self.timed_sessions()
        logger.debug(
            "Rendering %d timed %s link(s) for %r", len(sessions), self.name, self.event.title
        )
        return self.render_sessions(sessions)

    def render_sessions(self, sessions: List[Session]) -> str:
        """One full URL per session, newline-joined."""
        return "\n".join(
            self.build_url(self.timed_params(session.start_time, session.end_time))
            for session in sessions
        )

    @abstractmethod
    def all_day_params(self, start: datetime, end: datetime) -> Dict[str, object]:
        """Ordered query parameters for an all-day event."""

    @abstractmethod
    def timed_params(self, start: datetime, end: datetime) -> Dict[str, object]:
        """Ordered query parameters for one timed session."""

    def build_url(self, params: Dict[str, object]) -> str:
        return f"{self.base_url}?{build_query(params, self.raw_keys)}"
