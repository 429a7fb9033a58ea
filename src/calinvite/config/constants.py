"""Centralized constants for CalInvite.

Provider endpoints, iCalendar header values and cache defaults live here
so encoders and collaborators share one source of truth.
"""

# Provider endpoints
GOOGLE_BASE_URL = "https://calendar.google.com/calendar/render"
OUTLOOK_BASE_URL = "https://outlook.live.com/calendar/0/action/compose"
OUTLOOK_COMPOSE_PATH = "/calendar/0/action/compose"
OFFICE365_BASE_URL = "https://outlook.office.com/owa/"
OFFICE365_COMPOSE_PATH = "/calendar/action/compose"
YAHOO_BASE_URL = "https://calendar.yahoo.com/"

# ICS calendar constants
ICS_PRODID = "-//CalInvite//EN"
ICS_VERSION = "2.0"
ICS_CALSCALE = "GREGORIAN"
ICS_METHOD = "PUBLISH"
ICS_LINE_ENDING = "\r\n"
ICS_UID_DOMAIN = "cal-invite"
ICS_UID_HEX_BYTES = 8  # 16 hex characters

# Event defaults
DEFAULT_TIMEZONE = "UTC"
ALL_DAY_DEFAULT_DURATION_SECONDS = 86400

# Description composition
NOTES_LABEL = "Notes: {notes}"
VIRTUAL_MEETING_LABEL = "Virtual Meeting URL: {url}"
DESCRIPTION_BLOCK_SEPARATOR = "\n\n"

# Cache defaults
DEFAULT_CACHE_PREFIX = "cal_invite"
DEFAULT_CACHE_EXPIRES_IN = 24 * 60 * 60

# Environment variable names
ENV_TIMEZONE = "CAL_INVITE_TIMEZONE"
ENV_CACHE_PREFIX = "CAL_INVITE_CACHE_PREFIX"
ENV_CACHE_EXPIRES_IN = "CAL_INVITE_CACHE_EXPIRES_IN"

# Download helpers
ICS_CONTENT_TYPE = "text/calendar; charset=UTF-8"

# Timezone abbreviation to IANA zone mapping
# Maps common (and DST) abbreviations to canonical IANA zones that understand DST
ABBR_TO_TZ = {
    # North America
    "EST": "America/New_York",
    "EDT": "America/New_York",
    "CST": "America/Chicago",
    "CDT": "America/Chicago",
    "MST": "America/Denver",
    "MDT": "America/Denver",
    "PST": "America/Los_Angeles",
    "PDT": "America/Los_Angeles",
    # United Kingdom / Europe
    "BST": "Europe/London",
    "CET": "Europe/Paris",
    "CEST": "Europe/Paris",
    "EET": "Europe/Athens",
    "EEST": "Europe/Athens",
    # Australia
    "AEST": "Australia/Sydney",
    "AEDT": "Australia/Sydney",
    # Asia
    "IST": "Asia/Kolkata",  # India (UTC+5:30: no DST)
}
