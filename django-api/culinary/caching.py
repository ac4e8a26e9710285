"""Cache keys for catalog reads.

Query results are keyed by a generation counter so a single bump drops every
cached query at once.
"""

import hashlib
import time

from django.conf import settings
from django.core.cache import cache

EVENT_LIST_KEY = "culinary:events:list"
GENERATION_KEY = "culinary:events:generation"


def event_key(event_id: str) -> str:
    return f"culinary:event:{event_id}"


def query_key(fingerprint: str) -> str:
    # Fingerprints carry visitor search text; hash it to a memcached-safe key.
    generation = cache.get_or_set(GENERATION_KEY, fresh_generation, timeout=None)
    digest = hashlib.md5(fingerprint.encode(), usedforsecurity=False).hexdigest()
    return f"culinary:events:query:{generation}:{digest}"


def fresh_generation() -> int:
    """Return a generation no earlier counter can collide with."""
    return time.time_ns()


def timeout() -> int:
    return settings.CULINARY["CACHE_TIMEOUT"]


def invalidate_catalog(event_id: str | None = None) -> None:
    cache.delete(EVENT_LIST_KEY)
    if event_id is not None:
        cache.delete(event_key(event_id))
    try:
        cache.incr(GENERATION_KEY)
    except ValueError:
        cache.set(GENERATION_KEY, fresh_generation(), timeout=None)
