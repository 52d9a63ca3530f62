"""
Shared dependencies for API route modules.

The transaction store is built once during application startup and attached
to ``app.state``; routes receive it through :func:`get_store` rather than
reaching for a module-level handle, which keeps the handlers easy to call
directly with a stand-in store.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Request

from store.transactions import TransactionStore


def attached_store(request: Request) -> Optional[TransactionStore]:
    return getattr(request.app.state, "store", None)


def get_store(request: Request) -> TransactionStore:
    store = attached_store(request)
    if store is None:
        raise HTTPException(status_code=503, detail="Transaction store is not ready")
    return store
