from datetime import datetime
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class APIModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RecordResponse(APIModel):
    id: UUID
    created_at: datetime
    updated_at: datetime


class MessageResponse(APIModel):
    message: str


class Page(APIModel, Generic[T]):
    items: List[T]
    total: int
    page: int
    page_size: int
    pages: int


# ============= Populated references =============


class UserSummary(APIModel):
    id: UUID
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role_id: Optional[UUID] = None


class GuideSummary(APIModel):
    id: UUID
    course_info: str = Field(..., description="Course info of the parent guide")
