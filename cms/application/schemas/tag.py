"""Pydantic DTOs for the Tag feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from cms.application.schemas.article import ArticleSummary


class TagCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=191, examples=["python"])


class TagUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=191)


class TagResponse(BaseModel):
    id: int
    title: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TagDetailResponse(TagResponse):
    """A tag together with the articles it is attached to."""

    articles: list[ArticleSummary] = []
