"""
Test Suite for Store Client

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from store.client import BACKEND_MEMORY, BACKEND_REDIS, KeyValueClient



@pytest.mark.asyncio
async def test_list_push_and_trim(kv_client):
    for i in range(5):
        await kv_client.rpush("l", str(i), max_len=3)
    assert await kv_client.lrange("l") == ["2", "3", "4"]
    await kv_client.delete("l")
    assert await kv_client.lrange("l") == []


@pytest.mark.asyncio
async def test_lrange_returns_a_copy(kv_client):
    await kv_client.rpush("l", "a")
    rows = await kv_client.lrange("l")
    rows.append("b")
    assert await kv_client.lrange("l") == ["a"]


@pytest.mark.asyncio
async def test_fallback_is_bounded():
    client = KeyValueClient(url=None, max_fallback_items=2)
    await client.rpush("a", "1")
    await client.rpush("b", "2")
    await client.rpush("c", "3")
    assert await client.lrange("c") == []
    # existing lists still accept entries
    await client.rpush("a", "9")
    assert await client.lrange("a") == ["1", "9"]


@pytest.mark.asyncio
async def test_memory_only_client_reports_backend():
    client = await KeyValueClient.connect(None)
    assert client.backend == BACKEND_MEMORY
    await client.aclose()


@pytest.mark.asyncio
async def test_unreachable_redis_falls_back(monkeypatch):
    import redis.asyncio as aioredis

    class DeadRedis:
        async def ping(self):
            raise ConnectionError("refused")

    monkeypatch.setattr(aioredis, "from_url", lambda *a, **kw: DeadRedis())
    client = await KeyValueClient.connect("redis://nowhere:6379/0", retry_cooldown=60)
    assert client.backend == BACKEND_MEMORY
    await client.rpush("k", "v")
    assert await client.lrange("k") == ["v"]


@pytest.mark.asyncio
async def test_redis_errors_fall_back_per_operation(monkeypatch):
    import redis.asyncio as aioredis

    class FlakyRedis:
        async def ping(self):
            return True

        def pipeline(self):
            raise TimeoutError("slow")

        async def lrange(self, key, start, end):
            raise TimeoutError("slow")

        async def aclose(self):
            return None

    monkeypatch.setattr(aioredis, "from_url", lambda *a, **kw: FlakyRedis())
    client = await KeyValueClient.connect("redis://flaky:6379/0")
    assert client.backend == BACKEND_REDIS
    await client.rpush("k", "v")
    assert await client.lrange("k") == ["v"]
    await client.aclose()
