"""
Entry point for the SpendTrend API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI

from api.routes import router
from config import API_PREFIX, settings
from store.client import KeyValueClient
from store.transactions import TransactionStore

logging.basicConfig(
    level=getattr(logging, str(settings.log_level).upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


async def open_store(url: Optional[str]) -> TransactionStore:
    client = await KeyValueClient.connect(url)
    return TransactionStore(client)


def create_app(store: Optional[TransactionStore] = None) -> FastAPI:
    """Build the application.

    With ``store`` given, that store is attached as-is and left open on
    shutdown; otherwise one is opened from ``settings.redis_url`` during
    startup and closed again afterwards.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned = store is None
        app.state.store = store if store is not None else await open_store(settings.redis_url)
        log.info("SpendTrend started (store=%s)", app.state.store.backend)
        try:
            yield
        finally:
            if owned:
                await app.state.store.client.aclose()
            app.state.store = None

    app = FastAPI(
        title="SpendTrend",
        description="Income and expense ledger with least-squares projection of the next expense.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store
    app.include_router(router, prefix=API_PREFIX)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=str(settings.log_level).lower(),
        access_log=True,
    )
