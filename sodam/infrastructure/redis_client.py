"""
Redis client factories

The primary client uses ``redis_database``; the cache client uses the
``app.redis.cacheDatabase`` index so cached entries live apart from tokens.
Clients connect lazily on first command.
"""
import redis

from sodam.config import Settings
from sodam.core.logging import get_logger

logger = get_logger(__name__)


def _build_client(settings: Settings, database: int) -> redis.Redis:
    return redis.Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=database,
        password=settings.redis_password or None,
        socket_timeout=settings.redis_timeout,
        socket_connect_timeout=settings.redis_timeout,
        decode_responses=True,
    )


def create_primary_client(settings: Settings) -> redis.Redis:
    """Client for the primary database (tokens, sessions)"""
    logger.info(
        "Initializing primary redis client",
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_database,
        password_set=bool(settings.redis_password)
    )
    return _build_client(settings, settings.redis_database)


def create_cache_client(settings: Settings) -> redis.Redis:
    """Client for the cache database"""
    cache_database = settings.get_redis_cache_database()
    logger.info(
        "Initializing cache redis client",
        host=settings.redis_host,
        port=settings.redis_port,
        db=cache_database,
        password_set=bool(settings.redis_password)
    )
    return _build_client(settings, cache_database)
