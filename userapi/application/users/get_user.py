"""
Use case: Read one user by its encoded identifier.

Input: GetUserQuery (user_id)
Output: UserResult
Side effects: None.
Failure cases: InvalidIdentifierError, AppError E-0990 wrapping the
storage failure (a wrapped NotFoundError still reads as not found).
"""

import logging
from typing import Optional

from userapi.application.users.dtos import GetUserQuery, UserResult
from userapi.domain.users.errors import MARSHAL_ERROR_CODE, AppError
from userapi.domain.users.ports import IdentifierCodec, UserStorage

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Looks a single user up by id."""

    def __init__(
        self,
        storage: UserStorage,
        codec: IdentifierCodec,
        timeout: Optional[float] = None,
    ) -> None:
        self._storage = storage
        self._codec = codec
        self._timeout = timeout

    def execute(self, query: GetUserQuery) -> UserResult:
        """Run the read-one use case.

        Raises:
            InvalidIdentifierError: If the id cannot be decoded.
            AppError: If the lookup fails, with the original failure as cause.
        """
        user_id = self._codec.encode(self._codec.decode(query.user_id))

        try:
            user = self._storage.find_one(user_id, timeout=self._timeout)
        except AppError as exc:
            logger.info("Lookup of user %s failed: %s", user_id, exc)
            raise AppError(
                message=f"error find one user by id: {user_id}",
                developer_message=str(exc),
                code=MARSHAL_ERROR_CODE,
                cause=exc,
            ) from exc

        return UserResult(id=user.id, email=user.email, username=user.username)
