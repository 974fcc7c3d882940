import json
from typing import Any, Optional
from uuid import UUID
import redis.asyncio as redis


class RedisCache:
    def __init__(self, redis_client: redis.Redis):
        self.redis = redis_client

    async def ping(self) -> bool:
        return bool(await self.redis.ping())

    async def get(self, key: str, version: Optional[int] = None) -> Optional[Any]:
        """Get value from cache, optionally using version"""
        if version is not None:
            key = f"{key}:v{version}"
        data = await self.redis.get(key)
        if data:
            return json.loads(data)
        return None

    async def set(self, key: str, value: Any, expire: int = 3600, version: Optional[int] = None) -> None:
        """Set value in cache with optional version"""
        if version is not None:
            key = f"{key}:v{version}"
        await self.redis.set(
            key,
            json.dumps(value, default=str),
            ex=expire
        )

    async def get_version(self, key: str) -> int:
        """Current version counter of a key family, 0 when never bumped"""
        version = await self.redis.get(f"{key}:version")
        return int(version) if version else 0

    async def bump_version(self, key: str) -> int:
        """Move a key family to a new version so older entries are never read again"""
        return await self.redis.incr(f"{key}:version")

    @staticmethod
    def build_key(*args) -> str:
        """Build cache key from arguments"""
        return ":".join(str(arg) for arg in args)


def trip_key(trip_id: UUID) -> str:
    return RedisCache.build_key("trips", "id", trip_id)


async def invalidate_trip_cache(cache: RedisCache, trip_id: UUID) -> None:
    """
    Retire every cached snapshot of a trip.

    A reader that loaded the trip before this call writes under the old
    version, which later readers no longer look at.
    """
    await cache.bump_version(trip_key(trip_id))
