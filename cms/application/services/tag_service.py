"""Application service (use case) for Tag operations."""

from cms.application.interfaces import TagRepository
from cms.application.schemas import TagCreate, TagUpdate
from cms.domain.entities import Tag
from cms.domain.exceptions import DuplicateEntityError, EntityNotFoundError


class TagService:
    """Orchestrates tag CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: TagRepository):
        self._repository = repository

    async def get_tag(self, tag_id: int) -> Tag:
        tag = await self._repository.get_by_id(tag_id)
        if tag is None:
            raise EntityNotFoundError("Tag", tag_id)
        return tag

    async def list_tags(self, skip: int = 0, limit: int = 100) -> list[Tag]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def create_tag(self, data: TagCreate) -> Tag:
        await self._ensure_title_free(data.title)
        return await self._repository.create(Tag(title=data.title))

    async def update_tag(self, tag_id: int, data: TagUpdate) -> Tag:
        tag = await self.get_tag(tag_id)
        if data.title is not None and data.title != tag.title:
            await self._ensure_title_free(data.title)
        tag.update(title=data.title)
        return await self._repository.update(tag)

    async def delete_tag(self, tag_id: int) -> bool:
        exists = await self._repository.get_by_id(tag_id)
        if exists is None:
            raise EntityNotFoundError("Tag", tag_id)
        return await self._repository.delete(tag_id)

    async def _ensure_title_free(self, title: str) -> None:
        if await self._repository.get_by_title(title) is not None:
            raise DuplicateEntityError("Tag", "title", title)
