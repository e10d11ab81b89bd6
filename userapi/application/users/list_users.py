"""
Use case: List every stored user.

Input: None.
Output: list[UserResult]
Side effects: None.
Failure cases: NotFoundError (any storage failure is reported as not found).
"""

import logging
from typing import Optional

from userapi.application.users.dtos import UserResult
from userapi.domain.users.errors import NotFoundError, StorageError
from userapi.domain.users.ports import UserStorage

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Returns all users. An empty collection is a success."""

    def __init__(self, storage: UserStorage, timeout: Optional[float] = None) -> None:
        self._storage = storage
        self._timeout = timeout

    def execute(self) -> list[UserResult]:
        """Run the list use case.

        Returns:
            Every stored user, possibly none.

        Raises:
            NotFoundError: If the storage layer fails for any reason.
        """
        try:
            users = self._storage.find_all(timeout=self._timeout)
        except StorageError as exc:
            logger.warning("Listing users failed: %s", exc)
            raise NotFoundError("users") from exc

        logger.debug("Listed %d users", len(users))
        return [
            UserResult(id=u.id, email=u.email, username=u.username) for u in users
        ]
