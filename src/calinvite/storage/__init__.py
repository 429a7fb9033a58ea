"""Cache storage for generated calendar links."""

from calinvite.storage.cache import CacheStore, CachedGenerator, MemoryStore, event_cache_key

__all__ = [
    "CacheStore",
    "CachedGenerator",
    "MemoryStore",
    "event_cache_key",
]
