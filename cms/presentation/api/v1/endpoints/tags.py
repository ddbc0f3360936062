"""Tag CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from cms.application.schemas import (
    ArticleSummary,
    TagCreate,
    TagDetailResponse,
    TagResponse,
    TagUpdate,
)
from cms.application.services import ArticleService, TagService
from cms.domain.exceptions import DuplicateEntityError, EntityNotFoundError, PersistenceError
from cms.infrastructure.dependencies import get_article_service, get_tag_service

router = APIRouter(prefix="/tags", tags=["Tags"])


@router.get("", response_model=list[TagResponse])
async def list_tags(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: TagService = Depends(get_tag_service),
) -> list[TagResponse]:
    tags = await service.list_tags(skip=skip, limit=limit)
    return [TagResponse.model_validate(t, from_attributes=True) for t in tags]


@router.get("/{tag_id}", response_model=TagDetailResponse)
async def get_tag(
    tag_id: int,
    service: TagService = Depends(get_tag_service),
    article_service: ArticleService = Depends(get_article_service),
) -> TagDetailResponse:
    """Retrieve a tag with its related articles."""
    try:
        tag = await service.get_tag(tag_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    articles = await article_service.list_articles_by_tag(tag_id)
    return TagDetailResponse(
        id=tag.id,
        title=tag.title,
        created_at=tag.created_at,
        updated_at=tag.updated_at,
        articles=[ArticleSummary.from_entity(a) for a in articles],
    )


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    data: TagCreate,
    service: TagService = Depends(get_tag_service),
) -> TagResponse:
    try:
        tag = await service.create_tag(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return TagResponse.model_validate(tag, from_attributes=True)


@router.put("/{tag_id}", response_model=TagResponse)
async def update_tag(
    tag_id: int,
    data: TagUpdate,
    service: TagService = Depends(get_tag_service),
) -> TagResponse:
    try:
        tag = await service.update_tag(tag_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return TagResponse.model_validate(tag, from_attributes=True)


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(
    tag_id: int,
    service: TagService = Depends(get_tag_service),
) -> None:
    """Delete a tag; its article links go with it."""
    try:
        await service.delete_tag(tag_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
