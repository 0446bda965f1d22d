"""
Rate limiting middleware for the Seller Panel backend
Uses in-memory storage with sliding window algorithm
"""
import time
from collections import defaultdict
from typing import Dict, List, Tuple

from fastapi import HTTPException, Request, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from seller_panel.core.auth import decode_token


class RateLimiter:
    """
    In-memory rate limiter using sliding window algorithm.

    State is per process; each worker enforces its own window.
    """

    def __init__(self, cleanup_interval: int = 60, clock=time.time):
        # {identifier: [timestamp, ...]}
        self._requests: Dict[str, List[float]] = defaultdict(list)
        self._clock = clock
        self._last_cleanup = clock()
        self._cleanup_interval = cleanup_interval

    def _cleanup_old_entries(self, window_seconds: int):
        """Drop identifiers with no hits in the last two windows"""
        now = self._clock()
        if now - self._last_cleanup < self._cleanup_interval:
            return

        cutoff = now - window_seconds * 2
        for identifier in list(self._requests.keys()):
            self._requests[identifier] = [ts for ts in self._requests[identifier] if ts > cutoff]
            if not self._requests[identifier]:
                del self._requests[identifier]

        self._last_cleanup = now

    def is_allowed(
        self,
        identifier: str,
        max_requests: int,
        window_seconds: int = 60
    ) -> Tuple[bool, int, int]:
        """
        Check if a request is allowed under the rate limit.

        Returns:
            Tuple of (is_allowed, remaining_requests, retry_after_seconds)
        """
        self._cleanup_old_entries(window_seconds)

        now = self._clock()
        window_start = now - window_seconds

        hits = [ts for ts in self._requests[identifier] if ts > window_start]
        self._requests[identifier] = hits

        if len(hits) >= max_requests:
            retry_after = int(min(hits) + window_seconds - now) + 1
            return False, 0, retry_after

        hits.append(now)
        return True, max_requests - len(hits), 0

    def reset(self):
        self._requests.clear()


# Global rate limiter instance
rate_limiter = RateLimiter()


# Requests per minute
RATE_LIMITS = {
    "authenticated": 600,    # dashboard polls several endpoints per refresh
    "unauthenticated": 60,   # login, registration, public catalog
}

# Paths that are exempt from rate limiting
EXEMPT_PATHS = {
    "/",
    "/health",
    "/docs",
    "/openapi.json",
    "/redoc",
}

# Login, registration and refresh are always limited per client IP
IP_KEYED_PREFIX = "/api/auth/"


def client_ip(request: Request) -> str:
    """Get the client IP, considering proxies"""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    if request.client:
        return request.client.host

    return "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Middleware that applies rate limiting based on authentication status.

    Headers returned:
    - X-RateLimit-Limit: Maximum requests per window
    - X-RateLimit-Remaining: Remaining requests in current window
    - Retry-After / X-RateLimit-Reset: Seconds until a slot frees up (when limited)
    """

    def __init__(self, app, limiter: RateLimiter = None, limits: Dict[str, int] = None):
        super().__init__(app)
        self.limiter = limiter or rate_limiter
        self.limits = limits or RATE_LIMITS

    async def dispatch(self, request: Request, call_next):
        if request.url.path in EXEMPT_PATHS or request.method == "OPTIONS":
            return await call_next(request)

        identifier, limit = self._get_identifier_and_limit(request)

        is_allowed, remaining, retry_after = self.limiter.is_allowed(
            identifier=identifier,
            max_requests=limit,
            window_seconds=60
        )

        if not is_allowed:
            # JSONResponse instead of HTTPException so CORS headers still apply
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"detail": "Rate limit exceeded. Please slow down."},
                headers={
                    "X-RateLimit-Limit": str(limit),
                    "X-RateLimit-Remaining": "0",
                    "X-RateLimit-Reset": str(retry_after),
                    "Retry-After": str(retry_after),
                }
            )

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(limit)
        response.headers["X-RateLimit-Remaining"] = str(remaining)

        return response

    def _get_identifier_and_limit(self, request: Request) -> Tuple[str, int]:
        """Verified access tokens are keyed by user id; anything else by client IP"""
        by_ip = f"ip:{client_ip(request)}", self.limits["unauthenticated"]
        if request.url.path.startswith(IP_KEYED_PREFIX):
            return by_ip

        auth_header = request.headers.get("Authorization")
        if not auth_header or not auth_header.startswith("Bearer "):
            return by_ip

        try:
            payload = decode_token(auth_header[len("Bearer "):])
        except HTTPException:
            return by_ip

        user_id = payload.get("sub")
        if not user_id:
            return by_ip

        return f"user:{user_id}", self.limits["authenticated"]
