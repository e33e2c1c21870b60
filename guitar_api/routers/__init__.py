"""
FastAPI routers grouped by concern (guitars, admin).

Each module exposes an APIRouter that is included by ``guitar_api.app``.
"""
