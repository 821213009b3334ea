"""
In‑memory record store.

``UserStore`` keeps user records in insertion order and locates them
by linear scan on the case‑insensitive name.  The application factory
creates one store per app and places it on ``app.state``; request
handlers obtain it through the ``get_user_store`` dependency.  Nothing
here is thread safe: the API serves requests from a single event loop.
"""

from typing import List, Optional

from fastapi import Request

from ..schemas.user import UserRead


def _key(name: str) -> str:
    return name.casefold()


class UserStore:
    """Ordered collection of user records keyed by name."""

    def __init__(self, users: Optional[List[UserRead]] = None) -> None:
        self._users: List[UserRead] = list(users or [])

    def __len__(self) -> int:
        return len(self._users)

    def all(self) -> List[UserRead]:
        """Return every record in insertion order."""
        return list(self._users)

    def filter_by_name(self, name: str) -> List[UserRead]:
        """Return records whose name equals ``name`` ignoring case."""
        key = _key(name)
        return [user for user in self._users if _key(user.name) == key]

    def index_of(self, name: str) -> int:
        """Position of the first record named ``name``, or ``-1``."""
        key = _key(name)
        for index, user in enumerate(self._users):
            if _key(user.name) == key:
                return index
        return -1

    def find(self, name: str) -> Optional[UserRead]:
        index = self.index_of(name)
        return self._users[index] if index != -1 else None

    def add(self, user: UserRead) -> UserRead:
        self._users.append(user)
        return user

    def replace(self, name: str, user: UserRead) -> Optional[UserRead]:
        """Swap the record named ``name`` for ``user`` in place.

        Returns ``None`` when no record has that name.
        """
        index = self.index_of(name)
        if index == -1:
            return None
        self._users[index] = user
        return user

    def remove(self, name: str) -> bool:
        index = self.index_of(name)
        if index == -1:
            return False
        del self._users[index]
        return True


def get_user_store(request: Request) -> UserStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.user_store
