from collections import defaultdict
from collections import deque
from collections.abc import Awaitable
from collections.abc import Callable
from threading import RLock
from time import monotonic

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response


class ImportRateLimitMiddleware(BaseHTTPMiddleware):
    """In-memory sliding-window limiter for GET requests under one path prefix.

    Only the contribution import reaches GitHub, so it is the only route
    limited by default.
    """

    def __init__(
        self,
        app,
        requests_per_window: int = 30,
        window_seconds: int = 60,
        path_prefix: str = "/contributions/",
    ) -> None:
        super().__init__(app)
        # Config values below 1 would block everything.
        self.max_requests = max(1, requests_per_window)
        self.window_seconds = max(1, window_seconds)
        self.path_prefix = path_prefix
        # One queue of request timestamps per client key.
        self._ip_buckets: dict[str, deque[float]] = defaultdict(deque)
        self._lock = RLock()

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.method != "GET" or not request.url.path.startswith(
            self.path_prefix
        ):
            return await call_next(request)

        ip = self._client_ip(request)
        now = monotonic()

        with self._lock:
            bucket = self._ip_buckets[ip]
            cutoff = now - self.window_seconds
            while bucket and bucket[0] <= cutoff:
                bucket.popleft()

            if len(bucket) >= self.max_requests:
                retry_after = max(1, int(self.window_seconds - (now - bucket[0])))
                return JSONResponse(
                    status_code=429,
                    content={"detail": "Too Many Requests"},
                    headers={"Retry-After": str(retry_after)},
                )

            bucket.append(now)

        return await call_next(request)

    @staticmethod
    def _client_ip(request: Request) -> str:
        # Reverse proxies usually set X-Forwarded-For.
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip() or "unknown"

        if request.client and request.client.host:
            return request.client.host

        return "unknown"
