from .article_repository import ArticleRepository
from .tag_repository import TagRepository
from .user_repository import UserRepository

__all__ = [
    "ArticleRepository",
    "TagRepository",
    "UserRepository",
]
