"""Application service for reading, editing and deleting articles.

Creation goes through ``CreateArticleUseCase``; everything else the
article endpoints need lives here.
"""

import logging

from cms.application.interfaces import ArticleRepository
from cms.application.schemas import ArticleUpdate
from cms.domain.entities import Article, ArticleId
from cms.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.find_by_id(ArticleId.from_int(article_id))
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self, skip: int = 0, limit: int = 100) -> list[Article]:
        return await self._repository.find_all(skip=skip, limit=limit)

    async def list_articles_by_tag(self, tag_id: int) -> list[Article]:
        return await self._repository.find_by_tag(tag_id)

    async def list_articles_by_user(self, user_id: int) -> list[Article]:
        return await self._repository.find_by_user(user_id)

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        """Apply a partial update; raises DomainValidationError on invalid fields."""
        article = await self.get_article(article_id)
        updated = article.update(data.model_dump(exclude_unset=True))
        saved = await self._repository.save(updated)
        logger.info("Article %d updated", article_id)
        return saved

    async def delete_article(self, article_id: int) -> bool:
        identity = ArticleId.from_int(article_id)
        exists = await self._repository.find_by_id(identity)
        if exists is None:
            raise EntityNotFoundError("Article", article_id)
        deleted = await self._repository.delete(identity)
        logger.info("Article %d deleted", article_id)
        return deleted
