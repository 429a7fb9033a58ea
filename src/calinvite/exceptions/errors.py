"""Exception taxonomy for CalInvite.

All errors are raised synchronously; nothing here is retried or recovered
internally.
"""

from typing import Iterable, Optional


class CalInviteError(Exception):
    """Base class for every error raised by CalInvite."""


class ValidationError(CalInviteError):
    """Raised when an event violates an invariant at construction or update."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        missing_fields: Optional[Iterable[str]] = None,
    ):
        self.field = field
        self.missing_fields = sorted(missing_fields) if missing_fields else []
        super().__init__(message)


class TimezoneResolutionError(ValidationError):
    """Raised when an event timezone cannot be resolved."""

    def __init__(self, timezone: str):
        self.timezone = timezone
        super().__init__(f"Unknown timezone: {timezone!r}", field="timezone")


class EncodingError(CalInviteError):
    """Raised when an encoder fails to produce output."""

    def __init__(self, message: str, provider: Optional[str] = None):
        self.provider = provider
        super().__init__(message)


class MissingRequiredFieldError(EncodingError):
    """Raised when a timed event reaches an encoder without start or end."""

    def __init__(self, field: str, provider: Optional[str] = None):
        self.field = field
        label = field.replace("_", " ").capitalize()
        super().__init__(f"{label} is required", provider=provider)


class UnknownProviderError(CalInviteError, ValueError):
    """Raised when a provider identifier does not resolve to an encoder."""

    def __init__(self, provider: object, supported: Iterable[str] = ()):
        self.provider = provider
        self.supported = list(supported)
        message = f"Unknown calendar provider: {provider!r}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)
