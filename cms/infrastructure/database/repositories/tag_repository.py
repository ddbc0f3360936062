"""Concrete tag repository backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cms.application.interfaces import TagRepository
from cms.domain.entities import Tag
from cms.domain.exceptions import PersistenceError
from cms.infrastructure.database.models import TagModel


class SQLAlchemyTagRepository(TagRepository):
    """Implements the TagRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: TagModel) -> Tag:
        return Tag(
            id=model.id,
            title=model.title,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def get_by_id(self, tag_id: int) -> Tag | None:
        result = await self._session.get(TagModel, tag_id)
        return self._to_entity(result) if result else None

    async def get_by_title(self, title: str) -> Tag | None:
        result = await self._session.execute(select(TagModel).where(TagModel.title == title))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Tag]:
        stmt = select(TagModel).order_by(TagModel.title).offset(skip).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, tag: Tag) -> Tag:
        model = TagModel(title=tag.title)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, tag: Tag) -> Tag:
        model = await self._session.get(TagModel, tag.id)
        if model is None:
            raise PersistenceError(f"Tag {tag.id} not found in database")
        model.title = tag.title
        model.updated_at = tag.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, tag_id: int) -> bool:
        model = await self._session.get(TagModel, tag_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
