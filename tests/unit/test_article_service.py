"""Unit tests for the ArticleService."""

import pytest

from cms.application.interfaces import ArticleRepository
from cms.application.schemas import ArticleUpdate
from cms.application.services import ArticleService
from cms.domain.entities import Article, ArticleId
from cms.domain.exceptions import DomainValidationError, EntityNotFoundError


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1

    async def save(self, article: Article) -> Article:
        if article.id is None:
            data = {
                "id": self._next_id,
                "user_id": article.user_id,
                "title": article.title,
                "slug": article.slug,
                "body": article.body,
                "published": article.published,
                "tag_ids": list(article.tag_ids),
                "created": "2026-01-20 10:00:00",
                "modified": "2026-01-20 10:00:00",
            }
            article = Article.reconstruct(data)
            self._next_id += 1
        elif article.id.value not in self._articles:
            raise ValueError(f"Article {article.id.value} not found")
        self._articles[article.id.value] = article
        return article

    async def find_by_id(self, article_id: ArticleId) -> Article | None:
        return self._articles.get(article_id.value)

    async def find_all(self, skip: int = 0, limit: int = 100) -> list[Article]:
        articles = list(self._articles.values())
        return articles[skip : skip + limit]

    async def find_by_tag(self, tag_id: int) -> list[Article]:
        return [a for a in self._articles.values() if tag_id in a.tag_ids]

    async def find_by_user(self, user_id: int) -> list[Article]:
        return [a for a in self._articles.values() if a.user_id == user_id]

    async def delete(self, article_id: ArticleId) -> bool:
        if article_id.value in self._articles:
            del self._articles[article_id.value]
            return True
        return False


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def service(repository: FakeArticleRepository) -> ArticleService:
    return ArticleService(repository)


async def _seed(repository: FakeArticleRepository, slug: str = "seeded") -> Article:
    return await repository.save(
        Article.create({"user_id": 1, "title": "Seeded", "slug": slug, "body": "Old body"})
    )


@pytest.mark.asyncio
async def test_get_article(service: ArticleService, repository: FakeArticleRepository):
    created = await _seed(repository)
    article = await service.get_article(created.id.value)
    assert article.slug == "seeded"


@pytest.mark.asyncio
async def test_get_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.get_article(999)


@pytest.mark.asyncio
async def test_list_articles(service: ArticleService, repository: FakeArticleRepository):
    await _seed(repository, "a1")
    await _seed(repository, "a2")
    await _seed(repository, "a3")
    assert len(await service.list_articles()) == 3
    assert len(await service.list_articles(skip=1, limit=1)) == 1


@pytest.mark.asyncio
async def test_update_article(service: ArticleService, repository: FakeArticleRepository):
    created = await _seed(repository)
    updated = await service.update_article(created.id.value, ArticleUpdate(title="New"))

    assert updated.title == "New"
    assert updated.body == "Old body"
    assert updated.id == created.id
    assert updated.created == created.created


@pytest.mark.asyncio
async def test_update_article_rejects_invalid_slug(service: ArticleService, repository: FakeArticleRepository):
    created = await _seed(repository)
    with pytest.raises(DomainValidationError, match="Slug can only contain"):
        await service.update_article(created.id.value, ArticleUpdate(slug="Bad Slug"))

    unchanged = await service.get_article(created.id.value)
    assert unchanged.slug == "seeded"


@pytest.mark.asyncio
async def test_update_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.update_article(42, ArticleUpdate(title="Nope"))


@pytest.mark.asyncio
async def test_delete_article(service: ArticleService, repository: FakeArticleRepository):
    created = await _seed(repository)
    result = await service.delete_article(created.id.value)
    assert result is True
    with pytest.raises(EntityNotFoundError):
        await service.get_article(created.id.value)


@pytest.mark.asyncio
async def test_delete_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.delete_article(7)


@pytest.mark.asyncio
async def test_list_articles_by_tag(service: ArticleService, repository: FakeArticleRepository):
    tagged = await repository.save(
        Article.create({"user_id": 1, "title": "Tagged", "slug": "tagged", "body": "B", "tag_ids": [2]})
    )
    await _seed(repository)

    result = await service.list_articles_by_tag(2)
    assert [a.id for a in result] == [tagged.id]


@pytest.mark.asyncio
async def test_list_articles_by_user(service: ArticleService, repository: FakeArticleRepository):
    mine = await _seed(repository)
    await repository.save(
        Article.create({"user_id": 2, "title": "Other", "slug": "other", "body": "B"})
    )

    result = await service.list_articles_by_user(1)
    assert [a.id for a in result] == [mine.id]
