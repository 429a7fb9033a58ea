"""Cache capability interface and the read-through generate wrapper."""

import fnmatch
import hashlib
import logging
import threading
import time
from typing import Callable, Dict, Optional, Protocol, Tuple, Union, runtime_checkable

from calinvite.config.settings import DEFAULT_CONFIG, CalInviteConfig
from calinvite.core.event_model import Event
from calinvite.providers.registry import ProviderKind, generate, parse_provider

logger = logging.getLogger(__name__)


@runtime_checkable
class CacheStore(Protocol):
    """What a cache backend must offer. ``delete_matching`` is optional."""

    def read(self, key: str) -> Optional[str]:
        ...

    def write(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class MemoryStore:
    """Thread-safe in-process store with per-entry expiry."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._entries: Dict[str, Tuple[str, Optional[float]]] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def read(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at is not None and self._clock() >= expires_at:
                del self._entries[key]
                return None
            return value

    def write(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        expires_at = self._clock() + ttl if ttl else None
        with self._lock:
            self._entries[key] = (value, expires_at)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def delete_matching(self, pattern: str) -> int:
        """Delete keys matching a glob pattern; returns how many were removed."""
        with self._lock:
            doomed = [key for key in self._entries if fnmatch.fnmatchcase(key, pattern)]
            for key in doomed:
                del self._entries[key]
        return len(doomed)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def event_cache_key(event: Event, provider: Union[ProviderKind, str], prefix: str) -> str:
    """``{prefix}:providers:{provider}:{sha256 of the event fields}``."""
    kind = parse_provider(provider)
    digest = hashlib.sha256(event.cache_payload().encode("utf-8")).hexdigest()
    return f"{prefix}:providers:{kind.value}:{digest}"


class CachedGenerator:
    """Read-through cache around ``generate``.

    ICS output embeds a fresh UID and DTSTAMP, so a cache hit returns the
    exact text produced on the miss.
    """

    def __init__(self, store: CacheStore, config: Optional[CalInviteConfig] = None):
        if not isinstance(store, CacheStore):
            raise TypeError("Cache store must implement read/write/delete")
        self.store = store
        self.config = config or DEFAULT_CONFIG

    def generate(self, event: Event, provider: Union[ProviderKind, str], **kwargs) -> str:
        key = event_cache_key(event, provider, self.config.cache_prefix)
        cached = self.store.read(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        value = generate(event, provider, **kwargs)
        self.store.write(key, value, ttl=self.config.cache_expires_in)
        return value

    def clear_provider_cache(self, provider: Union[ProviderKind, str]) -> None:
        kind = parse_provider(provider)
        self._delete_pattern(f"{self.config.cache_prefix}:providers:{kind.value}:*")

    def clear(self) -> None:
        self._delete_pattern(f"{self.config.cache_prefix}:*")

    def _delete_pattern(self, pattern: str) -> None:
        delete_matching = getattr(self.store, "delete_matching", None)
        if delete_matching is None:
            logger.warning("Cache store %s cannot delete by pattern; skipping %s",
                           type(self.store).__name__, pattern)
            return
        delete_matching(pattern)
