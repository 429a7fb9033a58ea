"""Configuration module for CalInvite."""

from calinvite.config.settings import DEFAULT_CONFIG, CalInviteConfig
from calinvite.config.constants import (
    DEFAULT_TIMEZONE,
    DEFAULT_CACHE_PREFIX,
    DEFAULT_CACHE_EXPIRES_IN,
    ICS_PRODID,
)

__all__ = [
    "DEFAULT_CONFIG",
    "CalInviteConfig",
    "DEFAULT_TIMEZONE",
    "DEFAULT_CACHE_PREFIX",
    "DEFAULT_CACHE_EXPIRES_IN",
    "ICS_PRODID",
]
