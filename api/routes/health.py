"""
Health and readiness routes reporting service and store status.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.routes.common import attached_store
from api.routes.exception import handle_exceptions
from config import HEALTH_MESSAGE

router = APIRouter(tags=["Health"])


@router.get("/health")
@handle_exceptions
async def health(request: Request) -> Dict[str, Any]:
    store = attached_store(request)
    return {
        "status": "ok",
        "message": HEALTH_MESSAGE,
        "store": store.backend if store is not None else None,
    }


@router.get("/ready", summary="Store readiness probe")
async def ready(request: Request) -> JSONResponse:
    store = attached_store(request)
    is_ready = store is not None
    return JSONResponse(
        status_code=200 if is_ready else 503,
        content={"ready": is_ready, "store": store.backend if is_ready else None},
    )
