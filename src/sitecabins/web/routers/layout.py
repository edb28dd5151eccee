"""Layout geometry endpoints: overlap detection and grid snapping."""

from fastapi import APIRouter

from sitecabins.domain import Vec3
from sitecabins.domain.services import find_overlaps, snap_vec3
from sitecabins.web.dependencies import CatalogueDep, build_working_set
from sitecabins.web.schemas.requests import LayoutRequest, SnapRequest
from sitecabins.web.schemas.responses import OverlapReportSchema, SnapResponse

router = APIRouter(prefix="/layout", tags=["layout"])


@router.post("/overlaps", response_model=OverlapReportSchema)
async def check_overlaps(
    request: LayoutRequest, catalogue: CatalogueDep
) -> OverlapReportSchema:
    """Report which of the requested items collide."""
    working_set, indexes = build_working_set(request.items, catalogue)
    pairs = [
        (indexes[first_id], indexes[second_id])
        for first_id, second_id in find_overlaps(working_set, catalogue)
    ]
    overlapping = sorted({index for pair in pairs for index in pair})
    ignored = [
        index for index in range(len(request.items)) if index not in indexes.values()
    ]
    return OverlapReportSchema(overlapping=overlapping, pairs=pairs, ignored=ignored)


@router.post("/snap", response_model=SnapResponse)
async def snap_position(request: SnapRequest) -> SnapResponse:
    """Snap a drag position to the grid. Non-positive steps are rejected."""
    snapped = snap_vec3(Vec3.from_sequence(request.position), request.step)
    return SnapResponse(position=snapped.as_tuple())
