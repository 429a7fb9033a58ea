"""
CalInvite - Calendar Invitation Generator

Turns one event description into "add to calendar" links for Google,
Outlook, Office 365 and Yahoo, or into RFC 5545 iCalendar text.
"""

__version__ = "1.0.0"

# Public API - import commonly used components
from calinvite.config.settings import CalInviteConfig
from calinvite.exceptions.errors import (
    CalInviteError,
    EncodingError,
    MissingRequiredFieldError,
    UnknownProviderError,
    ValidationError,
)
from calinvite.core.event_model import Event, EventUpdate, Session, build_event
from calinvite.providers.registry import SUPPORTED_PROVIDERS, ProviderKind, generate

__all__ = [
    # Version
    "__version__",
    # Config
    "CalInviteConfig",
    # Exceptions
    "CalInviteError",
    "EncodingError",
    "MissingRequiredFieldError",
    "UnknownProviderError",
    "ValidationError",
    # Core
    "Event",
    "EventUpdate",
    "Session",
    "build_event",
    "SUPPORTED_PROVIDERS",
    "ProviderKind",
    "generate",
]
