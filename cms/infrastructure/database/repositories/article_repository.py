"""Concrete article repository backed by SQLAlchemy."""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cms.application.interfaces import ArticleRepository
from cms.domain.entities import Article, ArticleId
from cms.domain.exceptions import DuplicateEntityError, PersistenceError
from cms.infrastructure.database.models import ArticleModel, TagModel, UserModel, articles_tags

logger = logging.getLogger(__name__)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article.reconstruct(
            {
                "id": model.id,
                "user_id": model.user_id,
                "title": model.title,
                "slug": model.slug,
                "body": model.body,
                "published": model.published,
                "tag_ids": [tag.id for tag in model.tags],
                "created": model.created,
                "modified": model.modified,
            }
        )

    async def save(self, article: Article) -> Article:
        if await self._session.get(UserModel, article.user_id) is None:
            raise PersistenceError(f"User {article.user_id} does not exist")
        tags = await self._load_tags(article.tag_ids)
        await self._ensure_slug_free(article)

        if not article.is_persisted:
            model = ArticleModel(
                user_id=article.user_id,
                title=article.title,
                slug=article.slug,
                body=article.body,
                published=article.published,
            )
            model.tags = tags
            self._session.add(model)
        else:
            model = await self._session.get(ArticleModel, article.id.value)
            if model is None:
                raise PersistenceError(f"Article {article.id.value} not found in database")
            model.user_id = article.user_id
            model.title = article.title
            model.slug = article.slug
            model.body = article.body
            model.published = article.published
            model.tags = tags
            model.modified = datetime.now(timezone.utc)

        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            raise PersistenceError("Failed to save article") from exc

        logger.debug("Saved article %d (slug=%s)", model.id, model.slug)
        return self._to_entity(model)

    async def find_by_id(self, article_id: ArticleId) -> Article | None:
        model = await self._session.get(ArticleModel, article_id.value)
        return self._to_entity(model) if model else None

    async def find_all(self, skip: int = 0, limit: int = 100) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .order_by(ArticleModel.created.desc(), ArticleModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def find_by_tag(self, tag_id: int) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .join(articles_tags, articles_tags.c.article_id == ArticleModel.id)
            .where(articles_tags.c.tag_id == tag_id)
            .order_by(ArticleModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def find_by_user(self, user_id: int) -> list[Article]:
        stmt = select(ArticleModel).where(ArticleModel.user_id == user_id).order_by(ArticleModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def delete(self, article_id: ArticleId) -> bool:
        model = await self._session.get(ArticleModel, article_id.value)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _load_tags(self, tag_ids: tuple[int, ...]) -> list[TagModel]:
        """Fetch tag rows in first-seen order; duplicate ids collapse to one link."""
        unique_ids = list(dict.fromkeys(tag_ids))
        if not unique_ids:
            return []
        result = await self._session.execute(select(TagModel).where(TagModel.id.in_(unique_ids)))
        by_id = {tag.id: tag for tag in result.scalars().all()}
        missing = [tag_id for tag_id in unique_ids if tag_id not in by_id]
        if missing:
            raise PersistenceError(f"Unknown tag ids: {missing}")
        return [by_id[tag_id] for tag_id in unique_ids]

    async def _ensure_slug_free(self, article: Article) -> None:
        stmt = select(ArticleModel.id).where(ArticleModel.slug == article.slug)
        if article.is_persisted:
            stmt = stmt.where(ArticleModel.id != article.id.value)
        if (await self._session.execute(stmt)).first() is not None:
            raise DuplicateEntityError("Article", "slug", article.slug)
