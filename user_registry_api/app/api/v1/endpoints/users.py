"""
User endpoints for API v1.

Users are plain name strings addressed by their position in the list.
``POST`` and ``PUT`` take the name as the raw request body (any
content type, decoded as UTF-8, not trimmed).  An index outside the
current list answers 404; nothing else about the input is validated.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from user_registry_api.app.schemas.user import ErrorResponse
from user_registry_api.app.services.user_service import (
    UserNotFoundError,
    UserService,
    get_user_service,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}

# The name is read straight from the body, so describe it for the docs.
_RAW_NAME_BODY = {
    "requestBody": {
        "required": True,
        "content": {"text/plain": {"schema": {"type": "string"}, "example": "Gita"}},
    }
}


async def read_name(request: Request) -> str:
    """Return the request body verbatim as the user's name."""
    body = await request.body()
    return body.decode("utf-8", errors="replace")


def _not_found(exc: UserNotFoundError) -> HTTPException:
    logger.warning("%s (store holds %d users)", exc, exc.size)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get("", response_model=List[str])
async def list_users(service: UserService = Depends(get_user_service)) -> List[str]:
    """Return every user in order."""
    return service.list_users()


@router.get("/{user_id}", response_model=str, responses=_NOT_FOUND)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> str:
    """Return the user at index ``user_id``."""
    try:
        return service.get_user(user_id)
    except UserNotFoundError as e:
        raise _not_found(e)


@router.post("", response_model=str, openapi_extra=_RAW_NAME_BODY)
async def add_user(
    name: str = Depends(read_name),
    service: UserService = Depends(get_user_service),
) -> str:
    """Append a user to the end of the list."""
    return service.add_user(name)


@router.put("/{user_id}", response_model=str, responses=_NOT_FOUND, openapi_extra=_RAW_NAME_BODY)
async def update_user(
    user_id: int,
    name: str = Depends(read_name),
    service: UserService = Depends(get_user_service),
) -> str:
    """Overwrite the user at index ``user_id``."""
    try:
        return service.update_user(user_id, name)
    except UserNotFoundError as e:
        raise _not_found(e)


@router.delete("/{user_id}", response_model=str, responses=_NOT_FOUND)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> str:
    """Remove the user at index ``user_id``; later users move down one index."""
    try:
        return service.delete_user(user_id)
    except UserNotFoundError as e:
        raise _not_found(e)
