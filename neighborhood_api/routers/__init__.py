"""
FastAPI routers grouped por domínio.

Each file inside this package exposes an APIRouter that is included in the
application built by ``neighborhood_api.app.create_app``.
"""
