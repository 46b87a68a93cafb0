"""Point of sale API endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from ..domain.models import Pos
from ..domain.services import PosService
from ..repositories.dependencies import get_pos_service
from .schemas import PosListResponse, PosRequest, PosResponse, ProblemDetails

router = APIRouter(prefix="/api/pos", tags=["pos"])


@router.get(
    "",
    response_model=PosListResponse,
    responses={200: {"description": "List of points of sale"}},
)
def list_pos(pos_service: PosService = Depends(get_pos_service)) -> PosListResponse:
    """List all points of sale ordered by ID."""
    return PosListResponse(
        pos=[PosResponse.model_validate(pos) for pos in pos_service.get_all()]
    )


@router.get(
    "/filter",
    response_model=PosResponse,
    responses={404: {"model": ProblemDetails, "description": "POS not found"}},
)
def get_pos_by_name(
    name: str = Query(min_length=1),
    pos_service: PosService = Depends(get_pos_service),
) -> PosResponse:
    """Get a point of sale by its unique name."""
    return PosResponse.model_validate(pos_service.get_by_name(name))


@router.get(
    "/{pos_id}",
    response_model=PosResponse,
    responses={
        404: {"model": ProblemDetails, "description": "POS not found"},
        422: {"model": ProblemDetails, "description": "Invalid POS ID format"},
    },
)
def get_pos(
    pos_id: int, pos_service: PosService = Depends(get_pos_service)
) -> PosResponse:
    """Get a point of sale by ID."""
    return PosResponse.model_validate(pos_service.get_by_id(pos_id))


@router.post(
    "",
    response_model=PosResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ProblemDetails, "description": "POS name already exists"},
        422: {"model": ProblemDetails, "description": "Validation error"},
    },
)
def create_pos(
    pos_data: PosRequest, pos_service: PosService = Depends(get_pos_service)
) -> PosResponse:
    """Create a new point of sale."""
    pos = pos_service.upsert(Pos(**pos_data.model_dump()))
    return PosResponse.model_validate(pos)


@router.put(
    "/{pos_id}",
    response_model=PosResponse,
    responses={
        404: {"model": ProblemDetails, "description": "POS not found"},
        409: {"model": ProblemDetails, "description": "POS name already exists"},
        422: {"model": ProblemDetails, "description": "Validation error"},
    },
)
def update_pos(
    pos_id: int,
    pos_data: PosRequest,
    pos_service: PosService = Depends(get_pos_service),
) -> PosResponse:
    """Update an existing point of sale."""
    pos = pos_service.upsert(Pos(id=pos_id, **pos_data.model_dump()))
    return PosResponse.model_validate(pos)


@router.delete(
    "/{pos_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ProblemDetails, "description": "POS not found"}},
)
def delete_pos(
    pos_id: int, pos_service: PosService = Depends(get_pos_service)
) -> Response:
    """Delete a point of sale."""
    pos_service.delete(pos_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
