"""Checkout payload endpoint."""

from typing import Any

from fastapi import APIRouter

from sitecabins.infrastructure.checkout import build_order
from sitecabins.web.dependencies import CatalogueDep, build_working_set
from sitecabins.web.schemas.requests import OrderRequest

router = APIRouter(prefix="/order", tags=["order"])


@router.post("")
async def create_order(request: OrderRequest, catalogue: CatalogueDep) -> dict[str, Any]:
    """Build the checkout payload for the requested items.

    Args:
        request: Placed items and target platform.
        catalogue: Injected unit catalogue.

    Returns:
        The payload in the platform's shape (generic for unknown platforms).
    """
    working_set, _ = build_working_set(request.items, catalogue)
    return build_order(working_set, request.platform, catalogue)
