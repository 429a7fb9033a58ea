"""Google Calendar "render" links."""

from datetime import datetime
from typing import Dict, List

from calinvite.config.constants import GOOGLE_BASE_URL
from calinvite.core.event_model import Session
from calinvite.core.formatting import (
    compose_description,
    format_date_only,
    format_utc_timestamp,
)
from calinvite.providers.base import UrlProvider


class GoogleProvider(UrlProvider):
    """Opens the Google Calendar event editor with the event pre-filled.

    Multi-day sessions are sent as comma-joined ranges in a single
    ``dates`` parameter.
    """

    name = "google"
    base_url = GOOGLE_BASE_URL
    raw_keys = ("dates",)

    def all_day_params(self, start: datetime, end: datetime) -> Dict[str, object]:
        return self._params(f"{format_date_only(start)}/{format_date_only(end)}")

    def timed_params(self, start: datetime, end: datetime) -> Dict[str, object]:
        return self._params(self._range(Session(start, end)))

    def render_sessions(self, sessions: List[Session]) -> str:
        dates = ",".join(self._range(session) for session in sessions)
        return self.build_url(self._params(dates))

    @staticmethod
    def _range(session: Session) -> str:
        return f"{format_utc_timestamp(session.start_time)}/{format_utc_timestamp(session.end_time)}"

    def _params(self, dates: str) -> Dict[str, object]:
        params: Dict[str, object] = {
            "action": "TEMPLATE",
            "text": self.event.title,
            "dates": dates,
        }
        details = compose_description(self.event, include_url=True)
        if details:
            params["details"] = details
        if self.event.location:
            params["location"] = self.event.location
        attendees = self.attendee_addresses()
        if attendees:
            params["add"] = ",".join(attendees)
        return params
