from .client import TodoistClient
from .commands import make_command
from .rate_limiter import RateLimiter
from .transport import REST_API, SYNC_API, Transport, rest_endpoint, sync_endpoint

__all__ = [
    "TodoistClient",
    "Transport",
    "RateLimiter",
    "make_command",
    "rest_endpoint",
    "sync_endpoint",
    "REST_API",
    "SYNC_API",
]
