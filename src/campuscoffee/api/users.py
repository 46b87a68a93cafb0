"""User API endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from ..domain.models import User
from ..domain.services import UserService
from ..repositories.dependencies import get_user_service
from .schemas import ProblemDetails, UserListResponse, UserRequest, UserResponse

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=UserListResponse)
def list_users(
    user_service: UserService = Depends(get_user_service),
) -> UserListResponse:
    """List all users ordered by ID."""
    return UserListResponse(
        users=[UserResponse.model_validate(user) for user in user_service.get_all()]
    )


@router.get(
    "/filter",
    response_model=UserResponse,
    responses={404: {"model": ProblemDetails, "description": "User not found"}},
)
def get_user_by_login_name(
    login_name: str = Query(min_length=1),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Get a user by login name."""
    return UserResponse.model_validate(user_service.get_by_login_name(login_name))


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ProblemDetails, "description": "User not found"}},
)
def get_user(
    user_id: int, user_service: UserService = Depends(get_user_service)
) -> UserResponse:
    """Get a user by ID."""
    return UserResponse.model_validate(user_service.get_by_id(user_id))


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ProblemDetails, "description": "Login name or email already exists"},
        422: {"model": ProblemDetails, "description": "Validation error"},
    },
)
def create_user(
    user_data: UserRequest, user_service: UserService = Depends(get_user_service)
) -> UserResponse:
    """Create a new user."""
    user = user_service.upsert(User(**user_data.model_dump()))
    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={
        404: {"model": ProblemDetails, "description": "User not found"},
        409: {"model": ProblemDetails, "description": "Login name or email already exists"},
    },
)
def update_user(
    user_id: int,
    user_data: UserRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update an existing user."""
    user = user_service.upsert(User(id=user_id, **user_data.model_dump()))
    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ProblemDetails, "description": "User not found"}},
)
def delete_user(
    user_id: int, user_service: UserService = Depends(get_user_service)
) -> Response:
    """Delete a user."""
    user_service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
