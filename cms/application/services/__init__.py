from .article_service import ArticleService
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    "ArticleService",
    "TagService",
    "UserService",
]
