"""Pydantic models for API request/response validation."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain.models import CampusType, PosType


# Base response models
class BaseResponse(BaseModel):
    """Base response model with common fields."""

    model_config = ConfigDict(from_attributes=True)


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs."""

    type: str = Field(description="A URI reference that identifies the problem type")
    title: str = Field(
        description="A short, human-readable summary of the problem type"
    )
    status: int = Field(description="The HTTP status code")
    detail: Optional[str] = Field(
        None, description="A human-readable explanation specific to this occurrence"
    )
    instance: Optional[str] = Field(
        None, description="A URI reference that identifies the specific occurrence"
    )


# POS schemas
class PosRequest(BaseModel):
    """Schema for creating or updating a point of sale."""

    name: str = Field(description="Unique name of the POS", min_length=1, max_length=255)
    description: str = Field("", description="Free-text description", max_length=1000)
    type: PosType = Field(description="Kind of point of sale")
    campus: CampusType = Field(description="Campus the POS is located on")
    street: str = Field(description="Street name", min_length=1, max_length=255)
    house_number: str = Field(description="House number", min_length=1, max_length=16)
    postal_code: int = Field(description="Postal code", ge=1000, le=99999)
    city: str = Field(description="City", min_length=1, max_length=255)


class PosResponse(BaseResponse):
    """Schema for point of sale response."""

    id: int
    name: str
    description: str
    type: PosType
    campus: CampusType
    street: str
    house_number: str
    postal_code: int
    city: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PosListResponse(BaseModel):
    """Schema for list of points of sale."""

    pos: List[PosResponse]


# User schemas
class UserRequest(BaseModel):
    """Schema for creating or updating a user."""

    login_name: str = Field(
        description="Unique login name",
        min_length=1,
        max_length=255,
        pattern=r"^[A-Za-z0-9_.-]+$",
    )
    email_address: str = Field(
        description="Unique email address",
        max_length=255,
        pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
    )
    first_name: str = Field(description="First name", min_length=1, max_length=255)
    last_name: str = Field(description="Last name", min_length=1, max_length=255)


class UserResponse(BaseResponse):
    """Schema for user response."""

    id: int
    login_name: str
    email_address: str
    first_name: str
    last_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserListResponse(BaseModel):
    """Schema for list of users."""

    users: List[UserResponse]
