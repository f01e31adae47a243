"""
Rate limiting for API endpoints
"""
import time
from collections import defaultdict
from fastapi import Request, HTTPException
from typing import Dict, List
import logging

from app.config import settings

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    In-memory sliding window rate limiter, keyed by learner (or IP)
    Production: Use Redis for distributed rate limiting
    """

    MINUTE = 60
    HOUR = 3600

    def __init__(self, requests_per_minute: int = 60, requests_per_hour: int = 1000):
        self.limits = {
            self.MINUTE: requests_per_minute,
            self.HOUR: requests_per_hour,
        }

        # {window_seconds: {client_id: [timestamps]}}
        self.trackers: Dict[int, Dict[str, List[float]]] = {
            window: defaultdict(list) for window in self.limits
        }

    def _get_client_id(self, request: Request) -> str:
        """Authenticated learner id when set, client IP otherwise"""
        # Raw identity headers are caller-controlled, so they never pick the bucket
        user_id = getattr(request.state, "user_id", None)
        if user_id:
            return f"user:{user_id}"

        return request.client.host if request.client else "unknown"

    def _prune(self, window: int, now: float):
        """Remove timestamps older than the window"""
        tracker = self.trackers[window]
        cutoff = now - window

        for client_id in list(tracker.keys()):
            tracker[client_id] = [ts for ts in tracker[client_id] if ts > cutoff]
            if not tracker[client_id]:
                del tracker[client_id]

    async def check_rate_limit(self, request: Request) -> None:
        """
        Check if request exceeds rate limits

        Raises:
            HTTPException: 429 if rate limit exceeded
        """
        client_id = self._get_client_id(request)
        now = time.time()

        for window, limit in self.limits.items():
            self._prune(window, now)

            if len(self.trackers[window][client_id]) >= limit:
                unit = "minute" if window == self.MINUTE else "hour"
                logger.warning(f"Rate limit exceeded ({unit}): {client_id}")
                raise HTTPException(
                    status_code=429,
                    detail={
                        "error": "rate_limit_exceeded",
                        "message": f"Too many requests. Limit: {limit} requests per {unit}",
                        "retry_after": window
                    }
                )

        for window in self.limits:
            self.trackers[window][client_id].append(now)

        logger.debug(f"Rate limit check passed: {client_id}")


# Global instance
rate_limiter = RateLimiter(
    requests_per_minute=settings.RATE_LIMIT_PER_MINUTE,
    requests_per_hour=settings.RATE_LIMIT_PER_HOUR
)
