"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from cms.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence, implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        """Retrieve a single user by ID."""
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Look a user up by their unique email address."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 100) -> list[User]:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        ...

    @abstractmethod
    async def update(self, user: User) -> User:
        ...

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        ...
