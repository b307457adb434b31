"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from simt.api.deps import get_store
from simt.core.exceptions import StorageError
from simt.core.protocols import IKeyValueStore

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
def ready(store: IKeyValueStore = Depends(get_store)):
    try:
        store.ping()
    except StorageError as exc:
        return JSONResponse(status_code=503, content={"status": "unavailable", "detail": str(exc)})
    return {"status": "ready"}
