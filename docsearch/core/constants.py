"""Core constants: cache key prefixes, lookup key delimiter and result caps.

Single source of truth for key structure and the limits imposed by the
interaction surface (choice count, choice label length).
"""

# Cache key prefix for hits staged during autocomplete
CACHE_PREFIX_STAGED = "staged"

# Delimiter for composite keys (cache keys and lookup keys)
CACHE_KEY_SEP = ":"

# Staged hits live this long unless resolved (seconds)
STAGED_HIT_TTL = 60

# Backend result caps
SUGGESTION_HITS_PER_PAGE = 25
RESOLUTION_HITS_PER_PAGE = 5

# Interaction surface limits
MAX_CHOICES = 19
MAX_CHOICE_NAME_LENGTH = 100

DEFAULT_USER_AGENT = "docsearch/1.0.0 (+https://github.com/docsearch)"
