"""Outlook.com and Office 365 compose links."""

from datetime import datetime
from typing import Dict

from calinvite.config.constants import (
    OFFICE365_BASE_URL,
    OFFICE365_COMPOSE_PATH,
    OUTLOOK_BASE_URL,
    OUTLOOK_COMPOSE_PATH,
)
from calinvite.core.formatting import compose_description, format_date_only, format_utc_iso
from calinvite.providers.base import UrlProvider


class OutlookProvider(UrlProvider):
    """Personal Outlook.com calendar (outlook.live.com).

    Times are sent in UTC; Outlook converts to the viewer's zone.
    """

    name = "outlook"
    base_url = OUTLOOK_BASE_URL
    compose_path = OUTLOOK_COMPOSE_PATH
    raw_keys = ("path", "startdt", "enddt")

    def head_params(self) -> Dict[str, object]:
        return {"path": self.compose_path, "subject": self.event.title}

    def all_day_params(self, start: datetime, end: datetime) -> Dict[str, object]:
        params = self.head_params()
        params["allday"] = "true"
        params["startdt"] = format_date_only(start, dashed=True)
        params["enddt"] = format_date_only(end, dashed=True)
        return self._add_optional_params(params)

    def timed_params(self, start: datetime, end: datetime) -> Dict[str, object]:
        params = self.head_params()
        params["startdt"] = format_utc_iso(start)
        params["enddt"] = format_utc_iso(end)
        return self._add_optional_params(params)

    def _add_optional_params(self, params: Dict[str, object]) -> Dict[str, object]:
        body = compose_description(self.event, include_url=True)
        if body:
            params["body"] = body
        if self.event.location:
            params["location"] = self.event.location
        attendees = self.attendee_addresses()
        if attendees:
            params["to"] = ";".join(attendees)
        return params


class Office365Provider(OutlookProvider):
    """Work or school Office 365 calendar (outlook.office.com)."""

    name = "office365"
    base_url = OFFICE365_BASE_URL
    compose_path = OFFICE365_COMPOSE_PATH
    raw_keys = ("path",)

    def head_params(self) -> Dict[str, object]:
        return {"subject": self.event.title, "path": self.compose_path}
