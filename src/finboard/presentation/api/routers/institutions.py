"""Institutions router."""

from fastapi import APIRouter

from finboard.presentation.api.dependencies import InstitutionQuery
from finboard.presentation.api.schemas import InstitutionResponse

router = APIRouter()


@router.get(
    "/{institution_id}",
    summary="Get institution",
    responses={
        200: {"description": "Institution metadata"},
        404: {"description": "Institution not found"},
        503: {"description": "Aggregator unavailable"},
    },
)
async def get_institution(
    institution_id: str,
    query: InstitutionQuery,
) -> InstitutionResponse:
    """Get display metadata (name, logo, colors) of an institution."""
    result = await query.execute(institution_id)
    return InstitutionResponse.from_domain(result.unwrap())
