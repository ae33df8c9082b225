from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from neighborhood_api.core.config import Settings, get_settings
from neighborhood_api.domain.errors import DomainError
from neighborhood_api.schemas import NeighborhoodCreate, NeighborhoodPage, NeighborhoodRead
from neighborhood_api.services.neighborhood_service import NeighborhoodService

router = APIRouter(prefix="/api/v1/neighborhood", tags=["neighborhood"])

DEFAULT_PAGE = 1


def _get_service(request: Request) -> NeighborhoodService:
    svc = getattr(getattr(request.app, "state", None), "neighborhood_service", None)
    if not svc:
        raise RuntimeError("NeighborhoodService nao configurado")
    return svc


def _get_settings(request: Request) -> Settings:
    settings = getattr(getattr(request.app, "state", None), "settings", None)
    return settings or get_settings()


def error_response(err: DomainError) -> JSONResponse:
    return JSONResponse({"ok": False, "error": err.code, "message": err.message}, status_code=err.status_code)


def _lenient_int(raw: Optional[str], default: int) -> int:
    """Parse a query value; anything missing, non-numeric or below 1 falls back to ``default``."""
    try:
        value = int((raw or "").strip())
    except ValueError:
        return default
    return value if value >= 1 else default


@router.get("/", response_model=NeighborhoodPage)
def list_neighborhoods(request: Request, page: Optional[str] = None, size: Optional[str] = None):
    svc = _get_service(request)
    current_page = _lenient_int(page, DEFAULT_PAGE)
    limit = _lenient_int(size, _get_settings(request).default_page_size)
    neighborhoods = svc.list_neighborhood(current_page, limit)
    return NeighborhoodPage(
        page=current_page,
        totalPages=svc.get_total_pages(limit),
        neighborhoods=[NeighborhoodRead.from_domain(n) for n in neighborhoods],
    )


@router.get("/{neighborhood_id}", response_model=NeighborhoodRead)
def get_neighborhood(neighborhood_id: UUID, request: Request):
    svc = _get_service(request)
    try:
        neighborhood = svc.get_neighborhood_by_id(neighborhood_id)
    except DomainError as exc:
        return error_response(exc)
    return NeighborhoodRead.from_domain(neighborhood)


@router.post("/", status_code=201, response_model=NeighborhoodRead)
def create_neighborhood(payload: NeighborhoodCreate, request: Request):
    svc = _get_service(request)
    try:
        created = svc.create_neighborhood(payload.to_domain())
    except DomainError as exc:
        return error_response(exc)
    return NeighborhoodRead.from_domain(created)


@router.delete("/{neighborhood_id}", status_code=204)
def delete_neighborhood(neighborhood_id: UUID, request: Request):
    svc = _get_service(request)
    try:
        svc.delete_neighborhood_by_id(neighborhood_id)
    except DomainError as exc:
        return error_response(exc)
    return Response(status_code=204)
