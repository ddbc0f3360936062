"""Unit tests for the TagService and UserService."""

import pytest

from cms.application.interfaces import TagRepository, UserRepository
from cms.application.schemas import TagCreate, TagUpdate, UserCreate, UserUpdate
from cms.application.services import TagService, UserService
from cms.domain.entities import Tag, User
from cms.domain.exceptions import DuplicateEntityError, EntityNotFoundError

pytestmark = pytest.mark.asyncio


class FakeTagRepository(TagRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._tags: dict[int, Tag] = {}
        self._next_id = 1

    async def get_by_id(self, tag_id: int) -> Tag | None:
        return self._tags.get(tag_id)

    async def get_by_title(self, title: str) -> Tag | None:
        return next((t for t in self._tags.values() if t.title == title), None)

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Tag]:
        return list(self._tags.values())[skip : skip + limit]

    async def create(self, tag: Tag) -> Tag:
        tag.id = self._next_id
        self._next_id += 1
        self._tags[tag.id] = tag
        return tag

    async def update(self, tag: Tag) -> Tag:
        self._tags[tag.id] = tag
        return tag

    async def delete(self, tag_id: int) -> bool:
        return self._tags.pop(tag_id, None) is not None


class FakeUserRepository(UserRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._users: dict[int, User] = {}
        self._next_id = 1

    async def get_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[User]:
        return list(self._users.values())[skip : skip + limit]

    async def create(self, user: User) -> User:
        user.id = self._next_id
        self._next_id += 1
        self._users[user.id] = user
        return user

    async def update(self, user: User) -> User:
        self._users[user.id] = user
        return user

    async def delete(self, user_id: int) -> bool:
        return self._users.pop(user_id, None) is not None


@pytest.fixture
def tag_service() -> TagService:
    return TagService(FakeTagRepository())


@pytest.fixture
def user_service() -> UserService:
    return UserService(FakeUserRepository())


class TestTagService:
    async def test_create_and_get(self, tag_service: TagService):
        tag = await tag_service.create_tag(TagCreate(title="First Tag"))
        assert tag.id == 1
        assert (await tag_service.get_tag(1)).title == "First Tag"

    async def test_duplicate_title_rejected(self, tag_service: TagService):
        await tag_service.create_tag(TagCreate(title="First Tag"))
        with pytest.raises(DuplicateEntityError):
            await tag_service.create_tag(TagCreate(title="First Tag"))

    async def test_rename_to_existing_title_rejected(self, tag_service: TagService):
        await tag_service.create_tag(TagCreate(title="First Tag"))
        second = await tag_service.create_tag(TagCreate(title="Second Tag"))
        with pytest.raises(DuplicateEntityError):
            await tag_service.update_tag(second.id, TagUpdate(title="First Tag"))

    async def test_update_keeps_title_when_unchanged(self, tag_service: TagService):
        tag = await tag_service.create_tag(TagCreate(title="Stable"))
        before = tag.updated_at
        updated = await tag_service.update_tag(tag.id, TagUpdate(title="Stable"))
        assert updated.title == "Stable"
        assert updated.updated_at >= before

    async def test_delete_and_missing(self, tag_service: TagService):
        tag = await tag_service.create_tag(TagCreate(title="Temp"))
        assert await tag_service.delete_tag(tag.id) is True
        with pytest.raises(EntityNotFoundError):
            await tag_service.get_tag(tag.id)
        with pytest.raises(EntityNotFoundError):
            await tag_service.delete_tag(tag.id)


class TestUserService:
    async def test_create_normalizes_email(self, user_service: UserService):
        user = await user_service.create_user(UserCreate(email="User1@Example.com"))
        assert user.email == "user1@example.com"

    async def test_duplicate_email_rejected(self, user_service: UserService):
        await user_service.create_user(UserCreate(email="user1@example.com"))
        with pytest.raises(DuplicateEntityError):
            await user_service.create_user(UserCreate(email="USER1@example.com"))

    async def test_update_email(self, user_service: UserService):
        user = await user_service.create_user(UserCreate(email="old@example.com"))
        updated = await user_service.update_user(user.id, UserUpdate(email="new@example.com"))
        assert updated.email == "new@example.com"

    async def test_list_and_delete(self, user_service: UserService):
        await user_service.create_user(UserCreate(email="a@example.com"))
        await user_service.create_user(UserCreate(email="b@example.com"))
        assert len(await user_service.list_users()) == 2
        assert await user_service.delete_user(1) is True
        with pytest.raises(EntityNotFoundError):
            await user_service.get_user(1)
