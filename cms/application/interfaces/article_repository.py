"""Abstract repository interface (port) for Article persistence."""

from abc import ABC, abstractmethod

from cms.domain.entities import Article, ArticleId


class ArticleRepository(ABC):
    """Port for article persistence, implemented in the infrastructure layer."""

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Insert a new article or update an existing one.

        Returns the stored representation with its identity and timestamps.
        Raises ``PersistenceError`` when the store rejects the write and
        ``DuplicateEntityError`` when the slug is already taken.
        """
        ...

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Article | None:
        """Retrieve a single article by its identity."""
        ...

    @abstractmethod
    async def find_all(self, skip: int = 0, limit: int = 100) -> list[Article]:
        """Retrieve a paginated list of articles, newest first."""
        ...

    @abstractmethod
    async def delete(self, article_id: ArticleId) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def find_by_tag(self, tag_id: int) -> list[Article]:
        """Retrieve the articles linked to a tag, ordered by id."""
        ...

    @abstractmethod
    async def find_by_user(self, user_id: int) -> list[Article]:
        """Retrieve the articles written by a user, ordered by id."""
        ...
