"""Pydantic DTOs for the User feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from cms.application.schemas.article import ArticleSummary

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserCreate(BaseModel):
    """Schema for registering an author."""

    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN, examples=["author@example.com"])


class UserUpdate(BaseModel):
    email: str | None = Field(None, max_length=255, pattern=EMAIL_PATTERN)


class UserResponse(BaseModel):
    id: int
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class UserDetailResponse(UserResponse):
    """A user together with the articles they wrote."""

    articles: list[ArticleSummary] = []
