from .article import ArticleModel, articles_tags
from .tag import TagModel
from .user import UserModel

__all__ = [
    "ArticleModel",
    "TagModel",
    "UserModel",
    "articles_tags",
]
