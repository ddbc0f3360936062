from .create_article import (
    CreateArticleFailure,
    CreateArticleResult,
    CreateArticleUseCase,
)

__all__ = [
    "CreateArticleFailure",
    "CreateArticleResult",
    "CreateArticleUseCase",
]
