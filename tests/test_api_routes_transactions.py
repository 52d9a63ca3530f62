"""
Test Suite for API Routes - Transactions

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import datetime

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from api.requests import TransactionCreate
from api.routes import transactions as transactions_route
from engine.enums import TransactionType
from store.exceptions import StoreError


def _body(**overrides):
    base = {
        "description": "Grocery Shopping",
        "amount": 150.50,
        "type": "expense",
        "date": "2024-01-15",
        "category": "Food",
        "user_id": "user123",
    }
    base.update(overrides)
    return base


@pytest.mark.asyncio
async def test_create_then_list(txn_store):
    res = await transactions_route.create_transaction(TransactionCreate(**_body()), store=txn_store)
    created = res.transaction
    assert created.id.startswith("txn_")
    assert created.type == TransactionType.expense
    assert created.date == "2024-01-15"

    listed = await transactions_route.list_transactions(user_id="user123", store=txn_store)
    assert [t.id for t in listed.transactions] == [created.id]


@pytest.mark.asyncio
async def test_list_empty_for_unknown_user(txn_store):
    listed = await transactions_route.list_transactions(user_id="nobody", store=txn_store)
    assert listed.transactions == []


@pytest.mark.asyncio
async def test_clear_removes_only_that_user(txn_store):
    await transactions_route.create_transaction(TransactionCreate(**_body()), store=txn_store)
    await transactions_route.create_transaction(TransactionCreate(**_body(amount=20.0)), store=txn_store)
    await transactions_route.create_transaction(TransactionCreate(**_body(user_id="user456")), store=txn_store)

    res = await transactions_route.clear_transactions(user_id="user123", store=txn_store)
    assert res.deleted == 2
    assert (await transactions_route.list_transactions(user_id="user123", store=txn_store)).transactions == []
    assert len((await transactions_route.list_transactions(user_id="user456", store=txn_store)).transactions) == 1

    again = await transactions_route.clear_transactions(user_id="user123", store=txn_store)
    assert again.deleted == 0


@pytest.mark.parametrize("overrides", [
    {"type": "invalid"},
    {"amount": -100},
    {"amount": 0},
    {"amount": "100"},
    {"amount": float("inf")},
    {"description": ""},
    {"category": ""},
    {"user_id": ""},
    {"date": "not-a-date"},
])
def test_create_request_validation(overrides):
    with pytest.raises(ValidationError):
        TransactionCreate(**_body(**overrides))


def test_create_request_missing_fields():
    with pytest.raises(ValidationError):
        TransactionCreate(description="Test")


def test_create_request_parses_date():
    req = TransactionCreate(**_body())
    assert req.date == datetime.date(2024, 1, 15)


@pytest.mark.asyncio
async def test_store_failure_becomes_503():
    class BrokenStore:
        async def list(self, user_id):
            raise StoreError("backend gone")

    with pytest.raises(HTTPException) as exc:
        await transactions_route.list_transactions(user_id="u", store=BrokenStore())
    assert exc.value.status_code == 503


@pytest.mark.asyncio
async def test_unexpected_failure_becomes_500():
    class BuggyStore:
        async def add(self, user_id, fields):
            raise RuntimeError("boom")

    with pytest.raises(HTTPException) as exc:
        await transactions_route.create_transaction(TransactionCreate(**_body()), store=BuggyStore())
    assert exc.value.status_code == 500
    assert exc.value.detail == "boom"
