"""Application service (use case) for User operations."""

from cms.application.interfaces import UserRepository
from cms.application.schemas import UserCreate, UserUpdate
from cms.domain.entities import User
from cms.domain.exceptions import DuplicateEntityError, EntityNotFoundError


class UserService:
    """Orchestrates user CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_user(self, user_id: int) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def list_users(self, skip: int = 0, limit: int = 100) -> list[User]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def create_user(self, data: UserCreate) -> User:
        email = data.email.lower()
        if await self._repository.get_by_email(email) is not None:
            raise DuplicateEntityError("User", "email", email)
        return await self._repository.create(User(email=email))

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        user = await self.get_user(user_id)
        email = data.email.lower() if data.email is not None else None
        if email is not None and email != user.email:
            if await self._repository.get_by_email(email) is not None:
                raise DuplicateEntityError("User", "email", email)
        user.update(email=email)
        return await self._repository.update(user)

    async def delete_user(self, user_id: int) -> bool:
        exists = await self._repository.get_by_id(user_id)
        if exists is None:
            raise EntityNotFoundError("User", user_id)
        return await self._repository.delete(user_id)
