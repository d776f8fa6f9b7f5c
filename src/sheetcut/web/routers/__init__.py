"""API routers for the REST API."""

from sheetcut.web.routers.pack import router as pack_router
from sheetcut.web.routers.packers import router as packers_router

__all__ = [
    "pack_router",
    "packers_router",
]
