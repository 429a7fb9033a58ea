"""Utility functions for CalInvite."""

from calinvite.utils.error_messages import get_user_friendly_error

__all__ = [
    "get_user_friendly_error",
]
