"""Use case: create an article from raw input and persist it through the repository port."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from cms.application.interfaces import ArticleRepository
from cms.domain.entities import Article
from cms.domain.exceptions import DomainValidationError

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class CreateArticleFailure(str, Enum):
    """Why an article could not be created."""

    VALIDATION = "validation"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class CreateArticleResult:
    """Outcome of a single ``CreateArticleUseCase.execute`` call.

    ``errors`` is empty iff ``success`` is true.
    """

    success: bool
    article_id: int | None = None
    errors: list[str] = field(default_factory=list)
    failure: CreateArticleFailure | None = None

    @classmethod
    def created(cls, article_id: int | None) -> "CreateArticleResult":
        return cls(success=True, article_id=article_id)

    @classmethod
    def rejected(cls, message: str) -> "CreateArticleResult":
        return cls(success=False, errors=[message], failure=CreateArticleFailure.VALIDATION)

    @classmethod
    def failed(cls) -> "CreateArticleResult":
        return cls(
            success=False,
            errors=[UNEXPECTED_ERROR_MESSAGE],
            failure=CreateArticleFailure.UNEXPECTED,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "articleId": self.article_id,
            "errors": list(self.errors),
        }


class CreateArticleUseCase:
    """Validates input through the Article entity and saves it via the repository port.

    Never raises: domain validation errors are returned verbatim, anything
    else is logged and reported with a generic message.
    """

    def __init__(self, repository: ArticleRepository, logger: logging.Logger | None = None):
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, data: Mapping[str, Any]) -> CreateArticleResult:
        payload = dict(data)
        try:
            article = Article.create(payload)
            saved = await self._repository.save(article)
        except DomainValidationError as exc:
            self._logger.warning(
                "Article creation failed: domain validation error: %s",
                exc.message,
                extra={"error": exc.message, "input": payload},
            )
            return CreateArticleResult.rejected(exc.message)
        except Exception as exc:
            self._logger.error(
                "Article creation failed: unexpected error: %s",
                exc,
                extra={"error": str(exc), "input": payload},
            )
            return CreateArticleResult.failed()

        article_id = saved.id.value if saved.id is not None else None
        self._logger.info(
            "Article created successfully (article_id=%s, user_id=%s)",
            article_id,
            payload.get("user_id"),
            extra={"article_id": article_id, "user_id": payload.get("user_id")},
        )
        return CreateArticleResult.created(article_id)
