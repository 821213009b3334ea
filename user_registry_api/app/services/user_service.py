"""
Business logic for users.

``UserService`` wraps a ``UserStore`` and enforces the rules the store
itself does not know about: names are unique ignoring case, and a
rename may not take a name already used by another record.  Failures
are raised as ``UserServiceError`` subclasses which the endpoints turn
into HTTP errors.
"""

import logging
from typing import List, Optional

from fastapi import Depends

from ..core.store import UserStore, get_user_store
from ..schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "User with the name does not exists"


class UserServiceError(Exception):
    """Base class for user service failures."""


class UserNotFoundError(UserServiceError):
    def __init__(self, name: str) -> None:
        super().__init__(NOT_FOUND_MESSAGE)
        self.name = name


class UserAlreadyExistsError(UserServiceError):
    def __init__(self, name: str) -> None:
        super().__init__(f"User with the name {name!r} already exists")
        self.name = name


class UserService:
    """Сервис для работы с пользователями.

    Operates on the store passed to it; it keeps no state of its own.
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def list_users(self, name: Optional[str] = None) -> List[UserRead]:
        """Return all users, or only those named ``name`` (case‑insensitive)."""
        if name:
            return self.store.filter_by_name(name)
        return self.store.all()

    def get_user(self, name: str) -> UserRead:
        user = self.store.find(name)
        if user is None:
            raise UserNotFoundError(name)
        return user

    def create_user(self, data: UserCreate) -> UserRead:
        """Append a new user and return the stored record.

        Raises ``UserAlreadyExistsError`` when a user with the same
        name (ignoring case) is already stored.
        """
        if self.store.find(data.name) is not None:
            logger.warning("Rejected duplicate user %s", data.name)
            raise UserAlreadyExistsError(data.name)
        user = self.store.add(UserRead.model_validate(data.model_dump()))
        logger.info("Created user %s (%d stored)", user.name, len(self.store))
        return user

    def update_user(self, name: str, data: UserUpdate) -> UserRead:
        """Merge the provided fields into the user named ``name``.

        Fields absent from ``data`` keep their stored values.  If the
        update renames the user, the new name must not belong to a
        different record; afterwards the user is found by the new name.
        """
        current = self.store.find(name)
        if current is None:
            logger.warning("Update of unknown user %s", name)
            raise UserNotFoundError(name)
        changes = data.changes()
        new_name = changes.get("name")
        if new_name is not None and new_name.casefold() != current.name.casefold():
            if self.store.find(new_name) is not None:
                logger.warning("Rejected rename of %s to existing name %s", current.name, new_name)
                raise UserAlreadyExistsError(new_name)
            logger.info("Renaming user %s to %s", current.name, new_name)
        updated = current.model_copy(update=changes)
        self.store.replace(name, updated)
        logger.info("Updated user %s: %s", updated.name, sorted(changes))
        return updated

    def delete_user(self, name: str) -> None:
        if not self.store.remove(name):
            logger.warning("Delete of unknown user %s", name)
            raise UserNotFoundError(name)
        logger.info("Deleted user %s (%d stored)", name, len(self.store))


def get_user_service(store: UserStore = Depends(get_user_store)) -> UserService:
    """FastAPI dependency building a service around the app's store."""
    return UserService(store)
