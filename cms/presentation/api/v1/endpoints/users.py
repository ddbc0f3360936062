"""User CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from cms.application.schemas import (
    ArticleSummary,
    UserCreate,
    UserDetailResponse,
    UserResponse,
    UserUpdate,
)
from cms.application.services import ArticleService, UserService
from cms.domain.exceptions import DuplicateEntityError, EntityNotFoundError, PersistenceError
from cms.infrastructure.dependencies import get_article_service, get_user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """Retrieve a paginated list of users."""
    users = await service.list_users(skip=skip, limit=limit)
    return [UserResponse.model_validate(u, from_attributes=True) for u in users]


@router.get("/{user_id}", response_model=UserDetailResponse)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
    article_service: ArticleService = Depends(get_article_service),
) -> UserDetailResponse:
    """Retrieve a single user by ID, with the articles they wrote."""
    try:
        user = await service.get_user(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    articles = await article_service.list_articles_by_user(user_id)
    return UserDetailResponse(
        id=user.id,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
        articles=[ArticleSummary.from_entity(a) for a in articles],
    )


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Register a new author."""
    try:
        user = await service.create_user(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    data: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update an existing user."""
    try:
        user = await service.update_user(user_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete a user together with their articles."""
    try:
        await service.delete_user(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
