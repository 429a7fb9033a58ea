"""iCalendar (RFC 5545) content and download helpers."""

import logging
import re
from datetime import date, datetime
from typing import Dict, List, Optional

from icalendar.parser import dquote

from calinvite.config.constants import (
    ICS_CALSCALE,
    ICS_CONTENT_TYPE,
    ICS_LINE_ENDING,
    ICS_METHOD,
    ICS_PRODID,
    ICS_UID_DOMAIN,
    ICS_UID_HEX_BYTES,
    ICS_VERSION,
)
from calinvite.core.formatting import (
    compose_description,
    escape_ics_text,
    format_date_only,
    format_local_timestamp,
    format_utc_timestamp,
)
from calinvite.providers.base import BaseProvider

logger = logging.getLogger(__name__)


class IcsProvider(BaseProvider):
    """Standalone VCALENDAR document with one VEVENT per rendered session.

    Timed events carry local wall-clock times with a TZID parameter;
    all-day events use VALUE=DATE and always produce a single VEVENT.
    Lines are CRLF-joined and not folded.
    """

    name = "ics"

    def generate(self) -> str:
        lines = [
            "BEGIN:VCALENDAR",
            f"VERSION:{ICS_VERSION}",
            f"PRODID:{ICS_PRODID}",
            f"CALSCALE:{ICS_CALSCALE}",
            f"METHOD:{ICS_METHOD}",
        ]

        if self.event.all_day:
            start, end = self.all_day_range()
            lines.extend(self._vevent([
                f"DTSTART;VALUE=DATE:{format_date_only(start)}",
                f"DTEND;VALUE=DATE:{format_date_only(end)}",
            ]))
            count = 1
        else:
            sessions = self.timed_sessions()
            tzid = dquote(self.event.timezone)
            for start, end in sessions:
                lines.extend(self._vevent([
                    f"DTSTART;TZID={tzid}:{format_local_timestamp(self.event.localize(start))}",
                    f"DTEND;TZID={tzid}:{format_local_timestamp(self.event.localize(end))}",
                ]))
            count = len(sessions)

        lines.append("END:VCALENDAR")
        logger.debug("Rendered %d VEVENT(s) for %r", count, self.event.title)
        return ICS_LINE_ENDING.join(lines)

    def generate_uid(self, now: datetime) -> str:
        """``{unix-seconds}-{16 hex chars}@cal-invite``, fresh on every call."""
        return f"{int(now.timestamp())}-{self.token_hex(ICS_UID_HEX_BYTES)}@{ICS_UID_DOMAIN}"

    def _vevent(self, date_lines: List[str]) -> List[str]:
        now = self.now()
        vevent = [
            "BEGIN:VEVENT",
            f"UID:{self.generate_uid(now)}",
            f"DTSTAMP:{format_utc_timestamp(now)}",
            *date_lines,
            f"SUMMARY:{escape_ics_text(self.event.title)}",
        ]

        description = compose_description(self.event, include_url=True)
        if description:
            vevent.append(f"DESCRIPTION:{escape_ics_text(description)}")
        if self.event.location:
            vevent.append(f"LOCATION:{escape_ics_text(self.event.location)}")
        if self.event.url:
            vevent.append(f"URL:{self.event.url}")
        for attendee in self.attendee_addresses():
            vevent.append(f"ATTENDEE;RSVP=TRUE:mailto:{attendee}")

        vevent.append("END:VEVENT")
        return vevent


def sanitize_filename(filename: str) -> str:
    """Replace anything outside ``[0-9A-Za-z.-]`` with an underscore."""
    return re.sub(r"[^0-9A-Za-z.\-]", "_", filename)


def download_headers(filename: str) -> Dict[str, str]:
    """HTTP headers for serving ICS content as an attachment."""
    return {
        "Content-Type": ICS_CONTENT_TYPE,
        "Content-Disposition": f"attachment; filename={sanitize_filename(filename)}",
    }


def wrap_for_download(content: str, title: str, today: Optional[date] = None) -> Dict[str, object]:
    """Bundle ICS content with a filename and download headers.

    Args:
        content: The ICS text.
        title: Event title used for the filename.
        today: Date stamped into the filename (defaults to today).

    Returns:
        Dict with ``content``, ``filename`` and ``headers`` keys.
    """
    today = today or date.today()
    filename = sanitize_filename(f"{title.lower()}_{today.strftime('%Y%m%d')}.ics")
    return {
        "content": content,
        "filename": filename,
        "headers": download_headers(filename),
    }
