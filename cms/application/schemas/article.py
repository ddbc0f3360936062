"""Pydantic DTOs (Data Transfer Objects) for the Article feature.

These only check request shape. Title, slug and body rules live in the
domain entity so they apply to every caller, not just HTTP.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from cms.domain.entities import Article


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    user_id: int = Field(..., ge=1, examples=[1])
    title: str = Field(..., examples=["Getting Started"])
    slug: str = Field(..., examples=["getting-started"])
    body: str = Field(..., examples=["This is the first article."])
    published: bool = False
    tag_ids: list[int] = Field(default_factory=list, examples=[[1, 2]])


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article; all fields optional."""

    user_id: int | None = Field(None, ge=1)
    title: str | None = None
    slug: str | None = None
    body: str | None = None
    published: bool | None = None
    tag_ids: list[int] | None = None


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    user_id: int
    title: str
    slug: str
    body: str
    published: bool
    tag_ids: list[int]
    created: datetime | None
    modified: datetime | None

    @classmethod
    def from_entity(cls, article: Article) -> "ArticleResponse":
        """Flatten the domain entity (ArticleId, tuple of tag ids) for the wire."""
        return cls(
            id=article.id.value if article.id is not None else 0,
            user_id=article.user_id,
            title=article.title,
            slug=article.slug,
            body=article.body,
            published=article.published,
            tag_ids=list(article.tag_ids),
            created=article.created,
            modified=article.modified,
        )


class ArticleSummary(BaseModel):
    """Short article listing embedded in tag and user detail views."""

    id: int
    title: str
    slug: str
    published: bool
    created: datetime | None

    @classmethod
    def from_entity(cls, article: Article) -> "ArticleSummary":
        return cls(
            id=article.id.value if article.id is not None else 0,
            title=article.title,
            slug=article.slug,
            published=article.published,
            created=article.created,
        )


class CreateArticleResponse(BaseModel):
    """Result of the create-article use case."""

    success: bool
    article_id: int | None
    errors: list[str]
