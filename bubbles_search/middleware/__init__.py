"""HTTP middleware: timeout and request ID.

Applied in main app; order matters (first added = outermost).
"""

from bubbles_search.middleware.request_id import RequestIDMiddleware
from bubbles_search.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
