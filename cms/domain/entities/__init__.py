from .article import Article, ArticleId
from .tag import Tag
from .user import User

__all__ = [
    "Article",
    "ArticleId",
    "Tag",
    "User",
]
