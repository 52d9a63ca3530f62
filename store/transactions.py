"""
Transaction persistence: per-user capped lists of JSON records on top of the key-value client.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, List, Optional

from config import TRANSACTION_ID_PREFIX, settings
from engine.enums import TransactionType
from engine.forecast.series import Transaction
from store import keys
from store.client import KeyValueClient
from store.exceptions import CorruptRecord

log = logging.getLogger(__name__)

_FIELDS = ("id", "description", "amount", "type", "date", "category", "user_id")


def _serialise(txn: Transaction) -> dict:
    return {
        "id": txn.id,
        "description": txn.description,
        "amount": txn.amount,
        "type": txn.type.value,
        "date": txn.date,
        "category": txn.category,
        "user_id": txn.user_id,
    }


def _decode(key: str, raw: str) -> Transaction:
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise CorruptRecord(key, f"invalid json ({exc})") from exc
    if not isinstance(payload, dict):
        raise CorruptRecord(key, "record is not an object")
    missing = [f for f in _FIELDS if f not in payload]
    if missing:
        raise CorruptRecord(key, f"missing fields {missing}")
    try:
        return Transaction(
            id=str(payload["id"]),
            description=str(payload["description"]),
            amount=float(payload["amount"]),
            type=TransactionType(payload["type"]),
            date=str(payload["date"]),
            category=str(payload["category"]),
            user_id=str(payload["user_id"]),
        )
    except (TypeError, ValueError) as exc:
        raise CorruptRecord(key, str(exc)) from exc


class TransactionStore:
    def __init__(self, client: KeyValueClient, max_per_user: Optional[int] = None) -> None:
        self.client = client
        self.max_per_user = max_per_user if max_per_user is not None else settings.transactions_max_per_user
        self._last_id_ns = 0

    @property
    def backend(self) -> str:
        return self.client.backend

    def _next_id(self) -> str:
        # wall clock in ns, bumped so ids stay unique within the process
        now = max(time.time_ns(), self._last_id_ns + 1)
        self._last_id_ns = now
        return f"{TRANSACTION_ID_PREFIX}{now}"

    async def add(self, user_id: str, fields: Dict[str, Any]) -> Transaction:
        txn = Transaction(
            id=self._next_id(),
            description=fields["description"],
            amount=float(fields["amount"]),
            type=TransactionType(fields["type"]),
            date=str(fields["date"]),
            category=fields["category"],
            user_id=user_id,
        )
        await self.client.rpush(
            keys.transactions(user_id),
            json.dumps(_serialise(txn)),
            ttl=settings.transactions_ttl or None,
            max_len=self.max_per_user,
        )
        log.info("Transaction stored id=%s type=%s", txn.id, txn.type.value)
        return txn

    async def list(self, user_id: str) -> List[Transaction]:
        key = keys.transactions(user_id)
        rows: List[Transaction] = []
        for raw in await self.client.lrange(key):
            try:
                rows.append(_decode(key, raw))
            except CorruptRecord as exc:
                log.warning("Skipping stored transaction: %s", exc)
        return rows

    async def clear(self, user_id: str) -> int:
        """Drop a user's whole ledger, returning how many records it held."""
        key = keys.transactions(user_id)
        count = len(await self.client.lrange(key))
        await self.client.delete(key)
        log.info("Transactions cleared count=%d", count)
        return count
