from typing import Literal, Optional
from uuid import UUID

from pydantic import Field

from lms_api.schemas.base import APIModel, RecordResponse


Flag = Literal[0, 1]


# ============= Auth =============


class SignUpRequest(APIModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    phone_number: str = Field(..., min_length=1)
    role_id: Optional[UUID] = None


class TokenResponse(APIModel):
    access_token: str
    token_type: str = "bearer"


# ============= User roles =============


class UserRoleCreate(APIModel):
    name: str = Field(..., min_length=1, description="Unique role name")
    status: Flag = 1


class UserRoleUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1)
    status: Optional[Flag] = None


class UserRoleResponse(RecordResponse):
    name: str
    status: int


# ============= Users =============


class UserResponse(RecordResponse):
    username: str
    email: str
    first_name: str
    last_name: str
    age: int
    phone_number: str
    difficulty_level: Optional[str] = None
    suitability_for_coding: int = 0
    suitable_method: Optional[str] = None
    entrance_test: int = 0
    role_id: Optional[UUID] = None
    status: int = 1
    face_img_url: Optional[str] = None


class UserDetail(UserResponse):
    role: Optional[UserRoleResponse] = None


class UserUpdate(APIModel):
    """Fields a user record may change; anything else in the body is ignored."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0)
    phone_number: Optional[str] = None
    difficulty_level: Optional[str] = None
    status: Optional[Flag] = None
    suitability_for_coding: Optional[Flag] = None
    suitable_method: Optional[str] = None
    face_img_url: Optional[str] = None
    entrance_test: Optional[Flag] = None
    password: Optional[str] = None
