"""Catalogue endpoints."""

from fastapi import APIRouter

from sitecabins.web.dependencies import CatalogueDep
from sitecabins.web.schemas.responses import CatalogueEntrySchema, CatalogueSchema

router = APIRouter(prefix="/catalogue", tags=["catalogue"])


@router.get("", response_model=CatalogueSchema)
async def list_catalogue(catalogue: CatalogueDep) -> CatalogueSchema:
    """List every catalogued unit type."""
    return CatalogueSchema(
        entries=[
            CatalogueEntrySchema(
                type=unit_type,
                sku=entry.sku,
                label=entry.label,
                len=entry.dims.length,
                wid=entry.dims.width,
                ht=entry.dims.height,
                weekly=entry.weekly_rate,
            )
            for unit_type, entry in catalogue.items()
        ]
    )
