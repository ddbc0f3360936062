"""Article CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from fastapi.responses import JSONResponse

from cms.application.schemas import (
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
    CreateArticleResponse,
)
from cms.application.services import ArticleService
from cms.application.use_cases import CreateArticleFailure, CreateArticleUseCase
from cms.domain.exceptions import (
    DomainValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    PersistenceError,
)
from cms.infrastructure.dependencies import get_article_service, get_create_article_use_case

router = APIRouter(prefix="/articles", tags=["Articles"])

_FAILURE_STATUS = {
    CreateArticleFailure.VALIDATION: 422,
    CreateArticleFailure.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve a paginated list of articles, newest first."""
    articles = await service.list_articles(skip=skip, limit=limit)
    return [ArticleResponse.from_entity(a) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int = Path(..., ge=1),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.from_entity(article)


@router.post(
    "",
    response_model=CreateArticleResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        422: {"model": CreateArticleResponse},
        500: {"model": CreateArticleResponse},
    },
)
async def create_article(
    data: ArticleCreate,
    use_case: CreateArticleUseCase = Depends(get_create_article_use_case),
):
    """Create a new article through the create-article use case."""
    result = await use_case.execute(data.model_dump())
    body = CreateArticleResponse(
        success=result.success,
        article_id=result.article_id,
        errors=result.errors,
    )
    if result.success:
        return body
    return JSONResponse(status_code=_FAILURE_STATUS[result.failure], content=body.model_dump())


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    data: ArticleUpdate,
    article_id: int = Path(..., ge=1),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update an existing article; unsupplied fields keep their values."""
    try:
        article = await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DomainValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ArticleResponse.from_entity(article)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: int = Path(..., ge=1),
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article by ID."""
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
