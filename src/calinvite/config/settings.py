"""Explicit configuration value handed to collaborators."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import dotenv_values

from calinvite.config.constants import (
    DEFAULT_CACHE_EXPIRES_IN,
    DEFAULT_CACHE_PREFIX,
    DEFAULT_TIMEZONE,
    ENV_CACHE_EXPIRES_IN,
    ENV_CACHE_PREFIX,
    ENV_TIMEZONE,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalInviteConfig:
    """Settings for the event builder and the cache wrapper.

    Encoders never read this; it is passed to whichever collaborator
    needs it.
    """

    timezone: str = DEFAULT_TIMEZONE
    cache_prefix: str = DEFAULT_CACHE_PREFIX
    cache_expires_in: int = DEFAULT_CACHE_EXPIRES_IN

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "CalInviteConfig":
        """Build a config from the process environment and an optional .env file.

        Process environment wins over the file. The file is parsed without
        mutating os.environ.

        Args:
            env_file: Optional path to a .env file.

        Returns:
            A CalInviteConfig instance.
        """
        file_values: Mapping[str, Optional[str]] = {}
        if env_file is not None and Path(env_file).exists():
            file_values = dotenv_values(env_file)

        def lookup(name: str) -> Optional[str]:
            value = os.environ.get(name) or file_values.get(name)
            return value.strip() if value else None

        expires_raw = lookup(ENV_CACHE_EXPIRES_IN)
        expires_in = DEFAULT_CACHE_EXPIRES_IN
        if expires_raw:
            try:
                expires_in = int(expires_raw)
            except ValueError:
                logger.warning(
                    "Ignoring non-integer %s=%r, using %d",
                    ENV_CACHE_EXPIRES_IN, expires_raw, DEFAULT_CACHE_EXPIRES_IN
                )

        return cls(
            timezone=lookup(ENV_TIMEZONE) or DEFAULT_TIMEZONE,
            cache_prefix=lookup(ENV_CACHE_PREFIX) or DEFAULT_CACHE_PREFIX,
            cache_expires_in=expires_in,
        )


DEFAULT_CONFIG = CalInviteConfig()
