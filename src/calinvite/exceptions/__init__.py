"""Custom exceptions for CalInvite."""

from calinvite.exceptions.errors import (
    CalInviteError,
    ValidationError,
    TimezoneResolutionError,
    EncodingError,
    MissingRequiredFieldError,
    UnknownProviderError,
)

__all__ = [
    "CalInviteError",
    "ValidationError",
    "TimezoneResolutionError",
    "EncodingError",
    "MissingRequiredFieldError",
    "UnknownProviderError",
]
