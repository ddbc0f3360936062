"""FastAPI dependency injection: wires infrastructure to the application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cms.application.services import ArticleService, TagService, UserService
from cms.application.use_cases import CreateArticleUseCase
from cms.infrastructure.database.session import get_db_session
from cms.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyTagRepository,
    SQLAlchemyUserRepository,
)


async def get_create_article_use_case(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[CreateArticleUseCase, None]:
    """Provides the create-article use case bound to the request session."""
    yield CreateArticleUseCase(SQLAlchemyArticleRepository(session))


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository)


async def get_tag_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[TagService, None]:
    repository = SQLAlchemyTagRepository(session)
    yield TagService(repository)


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserService, None]:
    repository = SQLAlchemyUserRepository(session)
    yield UserService(repository)
