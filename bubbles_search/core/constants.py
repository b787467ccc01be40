"""Core constants: cache key prefixes and search engine limits.

Single source of truth for literal values shared between the HTTP layer,
use cases and infrastructure.
"""

# Cache key prefixes
CACHE_PREFIX_SEARCH = "search"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Query parsing
MIN_TERM_LENGTH = 3
DEFAULT_RESULT_LIMIT = 20
MAX_RESULT_LIMIT = 50
MAX_QUERY_LENGTH = 500

# Snippet extraction
CONTEXT_WINDOW_CHARS = 60
FALLBACK_EXCERPT_CHARS = 150

# Trending / did-you-mean
TRENDING_QUERY_MAX_LENGTH = 80
SUGGESTION_MAX_DISTANCE = 2

# Typeahead
TYPEAHEAD_MIN_LENGTH = 2
TYPEAHEAD_DEFAULT_LIMIT = 10
TYPEAHEAD_MAX_LIMIT = 20
TYPEAHEAD_MAX_QUERY_LENGTH = 200
