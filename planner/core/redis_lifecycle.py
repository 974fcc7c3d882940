# planner/core/redis_lifecycle.py
import redis.asyncio as redis
from planner.core.config import settings
from planner.core.cache import RedisCache
from planner.core.logger import logger
from typing import AsyncGenerator, Optional

_cache_instance: Optional[RedisCache] = None


async def init_cache() -> RedisCache:
    """Connect to Redis once per process and wrap the client in a RedisCache."""
    global _cache_instance

    if _cache_instance is None:
        client = redis.from_url(settings.REDIS_URL, decode_responses=True)
        try:
            await client.ping()
        except redis.ConnectionError:
            await client.aclose()
            raise RuntimeError("Could not connect to Redis server") from None
        _cache_instance = RedisCache(client)
        logger.info("Connected to Redis trip cache")

    return _cache_instance


async def get_cache() -> AsyncGenerator[RedisCache, None]:
    """FastAPI dependency injection for RedisCache."""
    yield await init_cache()


async def close_cache():
    """Close the Redis connection on application shutdown."""
    global _cache_instance
    if _cache_instance:
        await _cache_instance.redis.aclose()
        _cache_instance = None
