from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    ArticleSummary,
    CreateArticleResponse,
)
from .tag import TagCreate, TagUpdate, TagResponse, TagDetailResponse
from .user import UserCreate, UserUpdate, UserResponse, UserDetailResponse

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleSummary",
    "CreateArticleResponse",
    "TagCreate",
    "TagUpdate",
    "TagResponse",
    "TagDetailResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserDetailResponse",
]
