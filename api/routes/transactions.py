"""
Transaction routes for recording income and expense entries, listing a user's ledger and clearing it.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging

from fastapi import APIRouter, Depends, Query

from api.requests import TransactionCreate
from api.responses import (
    TransactionClearResponse,
    TransactionListResponse,
    TransactionOut,
    TransactionResponse,
)
from api.routes.common import get_store
from api.routes.exception import handle_exceptions
from store.transactions import TransactionStore

router = APIRouter(tags=["Transactions"])
log = logging.getLogger(__name__)


@router.get("/transactions", summary="List a user's transactions in insertion order")
@handle_exceptions
async def list_transactions(
    user_id: str = Query(min_length=1),
    store: TransactionStore = Depends(get_store),
) -> TransactionListResponse:
    rows = await store.list(user_id)
    return TransactionListResponse(transactions=[TransactionOut.of(t) for t in rows])


@router.post("/transactions", status_code=201, summary="Record an income or expense transaction")
@handle_exceptions
async def create_transaction(
    req: TransactionCreate,
    store: TransactionStore = Depends(get_store),
) -> TransactionResponse:
    txn = await store.add(req.user_id, {
        "description": req.description,
        "amount": req.amount,
        "type": req.type,
        "date": req.date.isoformat(),
        "category": req.category,
    })
    log.info("Transaction created id=%s category=%s amount=%s", txn.id, txn.category, txn.amount)
    return TransactionResponse(transaction=TransactionOut.of(txn))


@router.delete("/transactions", summary="Remove every transaction a user has recorded")
@handle_exceptions
async def clear_transactions(
    user_id: str = Query(min_length=1),
    store: TransactionStore = Depends(get_store),
) -> TransactionClearResponse:
    return TransactionClearResponse(deleted=await store.clear(user_id))
