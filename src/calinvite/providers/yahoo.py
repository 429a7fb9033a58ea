"""Yahoo Calendar links."""

from datetime import datetime
from typing import Dict

from calinvite.config.constants import YAHOO_BASE_URL
from calinvite.core.formatting import compose_description, format_date_only, format_utc_timestamp
from calinvite.providers.base import UrlProvider


class YahooProvider(UrlProvider):
    """Yahoo Calendar event form.

    Yahoo cannot hold several sessions in one link, so multi-day events get
    one URL per session. Attendees are not supported.
    """

    name = "yahoo"
    base_url = YAHOO_BASE_URL

    def all_day_params(self, start: datetime, end: datetime) -> Dict[str, object]:
        params = self._params(format_date_only(start), format_date_only(end))
        params["allday"] = "true"
        return params

    def timed_params(self, start: datetime, end: datetime) -> Dict[str, object]:
        return self._params(format_utc_timestamp(start), format_utc_timestamp(end))

    def _params(self, st: str, et: str) -> Dict[str, object]:
        params: Dict[str, object] = {
            "v": 60,
            "view": "d",
            "type": 20,
            "title": self.event.title,
            "st": st,
            "et": et,
        }
        desc = compose_description(self.event, include_url=True)
        if desc:
            params["desc"] = desc
        if self.event.location:
            params["in_loc"] = self.event.location
        params["crnd"] = self.event.timezone
        return params
