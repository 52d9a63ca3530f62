"""
Client code for Redis access, with in-memory fallback if Redis is unavailable.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Optional

from config import settings

log = logging.getLogger(__name__)

BACKEND_REDIS = "redis"
BACKEND_MEMORY = "memory"


class KeyValueClient:
    """Key-value access over Redis, degrading to process memory.

    Instances are built with :meth:`connect` (or directly with ``url=None`` for
    a memory-only client) and handed to whoever needs them; there is no module
    level connection.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        max_fallback_items: Optional[int] = None,
        op_timeout: Optional[float] = None,
        retry_cooldown: Optional[float] = None,
    ) -> None:
        self.url = url or None
        self._redis: Any = None
        self._fallback_lists: dict[str, list[str]] = {}
        self._init_lock = asyncio.Lock()
        self._retry_after_monotonic: float = 0.0
        self._using_fallback = self.url is None
        self._max_fallback = int(max_fallback_items if max_fallback_items is not None else settings.store_fallback_max_items)
        self._op_timeout = float(op_timeout if op_timeout is not None else settings.store_op_timeout_seconds)
        self._retry_cooldown = float(retry_cooldown if retry_cooldown is not None else settings.store_redis_retry_cooldown_seconds)

    @classmethod
    async def connect(cls, url: Optional[str] = None, **kwargs: Any) -> KeyValueClient:
        client = cls(url, **kwargs)
        await client._get_redis()
        log.info("Key-value store ready (backend=%s)", client.backend)
        return client

    @property
    def backend(self) -> str:
        return BACKEND_MEMORY if self._using_fallback else BACKEND_REDIS

    async def _get_redis(self) -> Any:
        if self.url is None:
            return None
        if self._redis is not None:
            return self._redis
        if time.monotonic() < self._retry_after_monotonic:
            self._using_fallback = True
            return None

        async with self._init_lock:
            if self._redis is not None:
                return self._redis
            if time.monotonic() < self._retry_after_monotonic:
                self._using_fallback = True
                return None
            try:
                import redis.asyncio as aioredis

                client = aioredis.from_url(
                    self.url,
                    decode_responses=True,
                    socket_connect_timeout=self._op_timeout,
                    socket_timeout=self._op_timeout,
                )
                await asyncio.wait_for(client.ping(), timeout=self._op_timeout)
                self._redis = client
                self._retry_after_monotonic = 0.0
                self._using_fallback = False
                log.info("Redis connected: %s", self.url)
                return self._redis
            except Exception as exc:
                self._retry_after_monotonic = time.monotonic() + max(0.0, self._retry_cooldown)
                if not self._using_fallback:
                    log.warning("Redis unavailable (%s), using in-memory fallback", exc)
                    self._using_fallback = True
                return None

    def _remember_list(self, key: str, value: str, max_len: Optional[int]) -> None:
        if key not in self._fallback_lists and len(self._fallback_lists) >= self._max_fallback:
            return
        lst = self._fallback_lists.setdefault(key, [])
        lst.append(value)
        if max_len and len(lst) > max_len:
            del lst[:-max_len]

    async def delete(self, key: str) -> None:
        client = await self._get_redis()
        if client is None:
            self._fallback_lists.pop(key, None)
            return
        try:
            await asyncio.wait_for(client.delete(key), timeout=self._op_timeout)
        except Exception as exc:
            log.debug("Redis DEL error %s: %s", key, exc)
            self._fallback_lists.pop(key, None)

    async def rpush(self, key: str, value: str, ttl: Optional[int] = None, max_len: Optional[int] = None) -> None:
        client = await self._get_redis()
        if client is None:
            self._remember_list(key, value, max_len)
            return
        try:
            pipe = client.pipeline()
            pipe.rpush(key, value)
            if max_len:
                pipe.ltrim(key, -max_len, -1)
            if ttl:
                pipe.expire(key, ttl)
            await asyncio.wait_for(pipe.execute(), timeout=self._op_timeout)
        except Exception as exc:
            log.debug("Redis RPUSH error %s: %s", key, exc)
            self._remember_list(key, value, max_len)

    async def lrange(self, key: str) -> list[str]:
        client = await self._get_redis()
        if client is None:
            return list(self._fallback_lists.get(key, []))
        try:
            return await asyncio.wait_for(client.lrange(key, 0, -1), timeout=self._op_timeout)
        except Exception as exc:
            log.debug("Redis LRANGE error %s: %s", key, exc)
            return list(self._fallback_lists.get(key, []))

    async def aclose(self) -> None:
        client, self._redis = self._redis, None
        if client is None:
            return
        try:
            await client.aclose()
        except Exception as exc:
            log.debug("Redis close error: %s", exc)
