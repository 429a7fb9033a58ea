"""User-friendly error message handling."""

from calinvite.exceptions.errors import (
    EncodingError,
    MissingRequiredFieldError,
    TimezoneResolutionError,
    UnknownProviderError,
    ValidationError,
)


def get_user_friendly_error(error: Exception) -> str:
    """Convert an exception to a user-friendly error message.

    Args:
        error: The exception to convert.

    Returns:
        A user-friendly error message string.
    """
    if isinstance(error, UnknownProviderError):
        supported = ", ".join(error.supported) or "none"
        return f"'{error.provider}' is not a supported calendar. Choose one of: {supported}."

    if isinstance(error, TimezoneResolutionError):
        return f"The timezone '{error.timezone}' was not recognised. Use an IANA name like Europe/Paris or an offset like +01:00."

    if isinstance(error, ValidationError):
        if error.missing_fields:
            return f"Event data is incomplete: missing {', '.join(error.missing_fields)}"
        return f"Event data is invalid: {error}"

    if isinstance(error, MissingRequiredFieldError):
        return f"Cannot build a {error.provider or 'calendar'} invite: {str(error).lower()}."

    if isinstance(error, EncodingError):
        return f"The invite could not be generated: {error}"

    # Default message
    return f"An error occurred: {str(error)}"

