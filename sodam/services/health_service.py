"""
Health service - application and redis availability
"""
from typing import Any, Dict

import redis

from sodam.config import Settings
from sodam.core.logging import get_logger

logger = get_logger(__name__)


class HealthService:
    """Reports whether the service and its redis databases are reachable"""

    def __init__(self, settings: Settings, primary_client: redis.Redis, cache_client: redis.Redis):
        self.settings = settings
        self.primary_client = primary_client
        self.cache_client = cache_client

    def check(self) -> Dict[str, Any]:
        """
        Liveness/readiness snapshot

        Returns:
            Dict with status, version and per-database availability
        """
        redis_available = self._ping(self.primary_client, "primary")
        cache_available = self._ping(self.cache_client, "cache")

        return {
            "status": "ready" if redis_available and cache_available else "not_ready",
            "version": self.settings.app_version,
            "redis_available": redis_available,
            "cache_available": cache_available,
        }

    def is_primary_available(self) -> bool:
        return self._ping(self.primary_client, "primary")

    def is_cache_available(self) -> bool:
        return self._ping(self.cache_client, "cache")

    def _ping(self, client: redis.Redis, name: str) -> bool:
        try:
            return bool(client.ping())
        except redis.RedisError as e:
            logger.warning("Redis ping failed", database=name, error=str(e))
            return False
