"""API routers for the REST API."""

from sitecabins.web.routers.catalogue import router as catalogue_router
from sitecabins.web.routers.layout import router as layout_router
from sitecabins.web.routers.order import router as order_router

__all__ = [
    "catalogue_router",
    "layout_router",
    "order_router",
]
