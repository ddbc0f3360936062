"""Abstract repository interface (port) for Tag persistence."""

from abc import ABC, abstractmethod

from cms.domain.entities import Tag


class TagRepository(ABC):
    """Port for tag persistence, implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, tag_id: int) -> Tag | None:
        ...

    @abstractmethod
    async def get_by_title(self, title: str) -> Tag | None:
        """Look a tag up by its unique title."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Tag]:
        ...

    @abstractmethod
    async def create(self, tag: Tag) -> Tag:
        """Persist a new tag and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, tag: Tag) -> Tag:
        ...

    @abstractmethod
    async def delete(self, tag_id: int) -> bool:
        """Delete a tag. Returns True if deleted, False if not found."""
        ...
