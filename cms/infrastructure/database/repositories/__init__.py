from .article_repository import SQLAlchemyArticleRepository
from .tag_repository import SQLAlchemyTagRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyTagRepository",
    "SQLAlchemyUserRepository",
]
