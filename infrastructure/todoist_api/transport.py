import logging
import os
from typing import Any, Callable, Dict, Mapping, Optional, Union

import requests

from core.errors import TransportError
from .rate_limiter import RateLimiter

REST_API = os.environ.get("TODOIST_REST_API", "https://api.todoist.com/rest/v1")
SYNC_API = os.environ.get("TODOIST_SYNC_API", "https://api.todoist.com/sync/v8")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"

logger = logging.getLogger("todoist.api")


def _join(base: str, *parts: Any) -> str:
    segments = [str(part).strip("/") for part in parts if str(part).strip("/")]
    return "/".join([base.rstrip("/")] + segments)


def rest_endpoint(*parts: Any) -> str:
    return _join(REST_API, *parts)


def sync_endpoint(*parts: Any) -> str:
    return _join(SYNC_API, *parts)


class Transport:
    """Authenticated HTTP access to both API shapes.

    Every non-2xx answer and every connection failure becomes a TransportError;
    nothing is retried.
    """

    def __init__(
        self,
        token_provider: Callable[[], Optional[str]],
        session: Optional[requests.Session] = None,
        rate_limiter: Optional[RateLimiter] = None,
        timeout: float = 30,
    ) -> None:
        self.token_provider = token_provider
        self.session = session or requests.Session()
        self.rate_limiter = rate_limiter or RateLimiter()
        self.timeout = timeout

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Union[str, bytes, None] = None,
    ) -> requests.Response:
        token = self.token_provider()
        if not token:
            raise TransportError("Todoist API token missing")
        request_headers: Dict[str, str] = {"Authorization": f"Bearer {token}"}
        request_headers.update(headers or {})
        query = {str(k): str(v) for k, v in (params or {}).items()}

        self.rate_limiter.acquire()
        logger.debug("%s %s %s", method, endpoint, query or "")
        try:
            response = self.session.request(
                method,
                endpoint,
                params=query or None,
                data=body,
                headers=request_headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Todoist API network error: {exc}") from exc
        self.rate_limiter.update(response.headers)
        if not 200 <= response.status_code < 300:
            reason = getattr(response, "reason", "") or ""
            status_line = f"{response.status_code} {reason}".strip()
            raise TransportError(f"{status_line}: {response.text}", status=response.status_code)
        return response


__all__ = [
    "REST_API",
    "SYNC_API",
    "FORM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
    "Transport",
    "rest_endpoint",
    "sync_endpoint",
]
