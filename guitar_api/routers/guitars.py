from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from guitar_api.schemas.guitar import ErrorResponse, GuitarDeleted
from guitar_api.services.guitar_service import GuitarError, GuitarService

router = APIRouter(prefix="/guitars", tags=["guitars"])

_NOT_FOUND = {404: {"model": ErrorResponse}}


def get_guitar_service(request: Request) -> GuitarService:
    svc = getattr(getattr(request.app, "state", None), "guitar_service", None)
    if not svc:
        raise RuntimeError("GuitarService not configured")
    return svc


def _error_response(err: GuitarError) -> JSONResponse:
    return JSONResponse({"error": err.message}, status_code=err.status_code)


@router.get("")
def list_guitars(svc: GuitarService = Depends(get_guitar_service)):
    return svc.list_guitars()


@router.get("/{guitar_id}", responses=_NOT_FOUND)
def get_guitar(guitar_id: str, svc: GuitarService = Depends(get_guitar_service)):
    try:
        return svc.get_guitar(guitar_id)
    except GuitarError as exc:
        return _error_response(exc)


@router.post("", status_code=201, responses={400: {"model": ErrorResponse}})
def create_guitar(payload: Any = Body(None), svc: GuitarService = Depends(get_guitar_service)):
    try:
        return svc.create_guitar(payload)
    except GuitarError as exc:
        return _error_response(exc)


@router.put("/{guitar_id}", responses=_NOT_FOUND)
def update_guitar(guitar_id: str, payload: Any = Body(None), svc: GuitarService = Depends(get_guitar_service)):
    try:
        return svc.update_guitar(guitar_id, payload)
    except GuitarError as exc:
        return _error_response(exc)


@router.delete("/{guitar_id}", response_model=GuitarDeleted, responses=_NOT_FOUND)
def delete_guitar(guitar_id: str, svc: GuitarService = Depends(get_guitar_service)):
    try:
        guitar = svc.delete_guitar(guitar_id)
    except GuitarError as exc:
        return _error_response(exc)
    return GuitarDeleted(message="Guitar deleted", guitar=guitar)
