from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from guitar_api.repositories.json_storage import StorageError
from guitar_api.routers.guitars import get_guitar_service
from guitar_api.schemas.guitar import ErrorResponse, RefreshResult
from guitar_api.services.guitar_service import GuitarService

router = APIRouter(tags=["admin"])


@router.post("/admin/refresh", response_model=RefreshResult, responses={500: {"model": ErrorResponse}})
@router.post("/refresh", response_model=RefreshResult, include_in_schema=False)
def refresh(svc: GuitarService = Depends(get_guitar_service)):
    """Reload the collection from the backing file, discarding in-memory changes."""
    try:
        count = svc.reload()
    except StorageError as exc:
        # only reachable with STRICT_LOAD; the previous collection is kept
        return JSONResponse({"error": exc.message}, status_code=500)
    return RefreshResult(message=f"Data reloaded from {svc.repository.data_file.name}", count=count)
