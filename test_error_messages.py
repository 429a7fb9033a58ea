from calinvite.exceptions import (
    EncodingError,
    MissingRequiredFieldError,
    TimezoneResolutionError,
    UnknownProviderError,
    ValidationError,
)
from calinvite.utils import get_user_friendly_error


def test_unknown_provider_message() -> None:
    error = UnknownProviderError("aol", supported=["google", "ics"])
    assert get_user_friendly_error(error) == (
        "'aol' is not a supported calendar. Choose one of: google, ics."
    )


def test_unknown_provider_without_choices() -> None:
    assert get_user_friendly_error(UnknownProviderError("aol")).endswith("Choose one of: none.")


def test_timezone_message() -> None:
    message = get_user_friendly_error(TimezoneResolutionError("Mars/Olympus"))
    assert message.startswith("The timezone 'Mars/Olympus' was not recognised.")
    assert "+01:00" in message


def test_validation_message_lists_missing_fields() -> None:
    error = ValidationError("missing", missing_fields=["title", "end_time"])
    assert get_user_friendly_error(error) == "Event data is incomplete: missing end_time, title"


def test_validation_message_without_missing_fields() -> None:
    error = ValidationError("End time must be after start time", field="end_time")
    assert get_user_friendly_error(error) == (
        "Event data is invalid: End time must be after start time"
    )


def test_missing_field_message() -> None:
    error = MissingRequiredFieldError("start_time", provider="google")
    assert get_user_friendly_error(error) == "Cannot build a google invite: start time is required."


def test_missing_field_message_without_provider() -> None:
    message = get_user_friendly_error(MissingRequiredFieldError("end_time"))
    assert message == "Cannot build a calendar invite: end time is required."


def test_encoding_message() -> None:
    error = EncodingError("Attendee must be a string", provider="ics")
    assert get_user_friendly_error(error) == (
        "The invite could not be generated: Attendee must be a string"
    )


def test_unexpected_error_message() -> None:
    assert get_user_friendly_error(RuntimeError("boom")) == "An error occurred: boom"
