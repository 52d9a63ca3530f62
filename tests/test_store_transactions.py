"""
Test Suite for the Transaction Store

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import re

import pytest

from engine.enums import TransactionType
from store import keys
from store.transactions import TransactionStore


def _fields(**overrides):
    base = {
        "description": "Grocery Shopping",
        "amount": 150.5,
        "type": "expense",
        "date": "2024-01-15",
        "category": "Food",
    }
    base.update(overrides)
    return base


@pytest.mark.asyncio
async def test_add_and_list(txn_store):
    created = await txn_store.add("user123", _fields())
    assert re.match(r"^txn_\d+$", created.id)
    assert created.type is TransactionType.expense
    rows = await txn_store.list("user123")
    assert rows == [created]


@pytest.mark.asyncio
async def test_users_are_isolated(txn_store):
    await txn_store.add("user123", _fields())
    assert await txn_store.list("someone-else") == []


@pytest.mark.asyncio
async def test_ids_unique_and_insertion_ordered(txn_store):
    made = [await txn_store.add("u", _fields(amount=float(i + 1))) for i in range(20)]
    ids = [t.id for t in made]
    assert len(set(ids)) == len(ids)
    assert [t.amount for t in await txn_store.list("u")] == [float(i + 1) for i in range(20)]


@pytest.mark.asyncio
async def test_per_user_cap(kv_client):
    store = TransactionStore(kv_client, max_per_user=3)
    for i in range(5):
        await store.add("u", _fields(amount=float(i + 1)))
    assert [t.amount for t in await store.list("u")] == [3.0, 4.0, 5.0]


@pytest.mark.asyncio
async def test_corrupt_rows_are_skipped(txn_store, kv_client):
    good = await txn_store.add("u", _fields())
    await kv_client.rpush(keys.transactions("u"), "{not json")
    await kv_client.rpush(keys.transactions("u"), '{"id": "txn_1"}')
    await kv_client.rpush(keys.transactions("u"), '["list"]')
    assert await txn_store.list("u") == [good]


@pytest.mark.asyncio
async def test_clear(txn_store):
    await txn_store.add("u", _fields())
    await txn_store.add("u", _fields(amount=9.0))
    assert await txn_store.clear("u") == 2
    assert await txn_store.list("u") == []
    assert txn_store.backend == "memory"
