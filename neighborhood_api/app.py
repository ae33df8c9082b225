from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from neighborhood_api.core.config import Settings, get_settings
from neighborhood_api.core.logging_config import setup_logging
from neighborhood_api.domain.errors import DomainError
from neighborhood_api.repositories.neighborhood_repository import NeighborhoodRepository
from neighborhood_api.routers import neighborhoods as neighborhoods_router
from neighborhood_api.services.neighborhood_service import NeighborhoodService

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (anti clickjacking, nosniff, HSTS in prod)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def _prepare_repository(settings: Settings) -> NeighborhoodRepository:
    repository = NeighborhoodRepository(settings.neighborhood_db_path)
    repository.start_database()
    seed = settings.neighborhood_seed_file
    if seed and repository.count() == 0:
        repository.load_defaults(seed)
    return repository


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatível com uvicorn/gunicorn (``uvicorn neighborhood_api.main:app``)."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Neighborhood API v1")

    if settings.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(settings.allowed_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    repository = _prepare_repository(settings)
    app.state.settings = settings
    app.state.neighborhood_service = NeighborhoodService(repository)
    logger.info("Base de bairros em %s", repository.path)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        if exc.status_code >= 500:
            logger.error("Erro em %s %s: %s", request.method, request.url.path, exc.message)
        return neighborhoods_router.error_response(exc)

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(neighborhoods_router.router)
    return app
