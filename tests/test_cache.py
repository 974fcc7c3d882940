from uuid import uuid4

import pytest

from planner.core.cache import invalidate_trip_cache, trip_key


@pytest.mark.asyncio
async def test_versioned_entries_are_kept_apart(cache):
    await cache.set("trips:id:1", {"is_confirmed": False}, version=0)

    assert await cache.get("trips:id:1", version=0) == {"is_confirmed": False}
    assert await cache.get("trips:id:1", version=1) is None
    assert await cache.get("trips:id:1") is None


@pytest.mark.asyncio
async def test_invalidating_a_trip_moves_it_to_a_new_version(cache):
    trip_id = uuid4()
    key = trip_key(trip_id)
    assert key == f"trips:id:{trip_id}"
    assert await cache.get_version(key) == 0

    await cache.set(key, {"destination": "Rio de Janeiro"}, version=0)
    await invalidate_trip_cache(cache, trip_id)
    await invalidate_trip_cache(cache, trip_id)

    version = await cache.get_version(key)
    assert version == 2
    assert await cache.get(key, version=version) is None
