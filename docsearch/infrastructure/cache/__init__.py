"""Cache: Redis service, staged-hit result cache and key utilities.

CacheService holds the Redis connection; ResultCache stages and fetches
hits for the search pipeline; key format is in keys.py (DRY).
"""

from docsearch.infrastructure.cache.keys import staged_hit_key
from docsearch.infrastructure.cache.redis_cache import CacheService
from docsearch.infrastructure.cache.result_cache import ResultCache

__all__ = [
    "CacheService",
    "ResultCache",
    "staged_hit_key",
]
