"""Central API router composition.

Mounts the route modules on one router for `FastAPI.include_router(...)`.
Paths are served at the root (no version prefix) to stay compatible with
existing clients.
"""

from fastapi import APIRouter

from .records import router as records_router

router = APIRouter()

router.include_router(records_router)
