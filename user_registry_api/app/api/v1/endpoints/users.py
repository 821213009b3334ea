"""
User endpoints for API v1.

CRUD over the in‑memory user list.  Records are addressed by name,
compared case‑insensitively.  ``PATCH`` and ``PUT`` on ``/user/{name}``
are both accepted and both merge only the fields sent.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from user_registry_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from user_registry_api.app.services.user_service import (
    UserAlreadyExistsError,
    UserNotFoundError,
    UserService,
    get_user_service,
)

router = APIRouter()


@router.get("", response_model=List[UserRead], response_model_exclude_none=True)
async def list_users(
    name: Optional[str] = Query(None, description="Return only users with this name (case‑insensitive)"),
    service: UserService = Depends(get_user_service),
) -> List[UserRead]:
    """Return all users in insertion order, optionally filtered by name."""
    return service.list_users(name)


@router.get("/{name}", response_model=UserRead, response_model_exclude_none=True)
async def get_user(name: str, service: UserService = Depends(get_user_service)) -> UserRead:
    try:
        return service.get_user(name)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.post(
    "",
    response_model=UserRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(user: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    """Создать пользователя.

    Returns 409 if a user with the same name already exists.
    """
    try:
        return service.create_user(user)
    except UserAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.put("/{name}", response_model=UserRead, response_model_exclude_none=True)
@router.patch("/{name}", response_model=UserRead, response_model_exclude_none=True)
async def update_user(
    name: str,
    user_in: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Update an existing user.

    Returns 404 if no user has this name and 409 if the update would
    rename the user to a name another user already has.
    """
    try:
        return service.update_user(name, user_in)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except UserAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_user(name: str, service: UserService = Depends(get_user_service)) -> None:
    try:
        service.delete_user(name)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return None
