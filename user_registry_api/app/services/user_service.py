"""
Business logic for users.

``UserService`` performs the five user operations against a
``UserStore`` and produces the confirmation messages returned by the
API.  Index lookups that fall outside the store raise
``UserNotFoundError``; names themselves are accepted as given, so empty
strings and duplicates are stored like any other name.
"""

import logging
from typing import List

from fastapi import Depends

from ..core.store import Found, UserStore, get_user_store

logger = logging.getLogger(__name__)

ADDED_MESSAGE = "User Added Successfully!"
UPDATED_MESSAGE = "User Updated Successfully!"
DELETED_MESSAGE = "User Deleted Successfully!"


class UserNotFoundError(LookupError):
    """Raised when an index does not address an existing user."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"User not found at index {index}")
        self.index = index
        self.size = size


class UserService:
    """Operations on the user list."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def list_users(self) -> List[str]:
        users = self.store.list_all()
        logger.debug("Listing %d users", len(users))
        return users

    def get_user(self, index: int) -> str:
        result = self.store.get(index)
        if not isinstance(result, Found):
            raise UserNotFoundError(result.index, result.size)
        logger.debug("Fetched user %d", index)
        return result.value

    def add_user(self, name: str) -> str:
        size = self.store.append(name)
        logger.info("Added user %r at index %d", name, size - 1)
        return ADDED_MESSAGE

    def update_user(self, index: int, name: str) -> str:
        result = self.store.replace(index, name)
        if not isinstance(result, Found):
            raise UserNotFoundError(result.index, result.size)
        logger.info("Updated user %d: %r -> %r", index, result.value, name)
        return UPDATED_MESSAGE

    def delete_user(self, index: int) -> str:
        result = self.store.remove(index)
        if not isinstance(result, Found):
            raise UserNotFoundError(result.index, result.size)
        logger.info("Deleted user %d (%r)", index, result.value)
        return DELETED_MESSAGE


def get_user_service(store: UserStore = Depends(get_user_store)) -> UserService:
    """FastAPI dependency building a service around the app's store."""
    return UserService(store)
