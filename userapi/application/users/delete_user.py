"""
Use case: Delete one user by its encoded identifier.

Input: DeleteUserCommand (user_id)
Output: The canonical id of the deleted user.
Side effects: Removes one document.
Failure cases: InvalidIdentifierError, NotFoundError, AppError E-0994.
"""

import logging
from typing import Optional

from userapi.application.users.dtos import DeleteUserCommand
from userapi.domain.users.errors import DELETE_ERROR_CODE, AppError, NotFoundError
from userapi.domain.users.ports import IdentifierCodec, UserStorage

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Removes a user."""

    def __init__(
        self,
        storage: UserStorage,
        codec: IdentifierCodec,
        timeout: Optional[float] = None,
    ) -> None:
        self._storage = storage
        self._codec = codec
        self._timeout = timeout

    def execute(self, command: DeleteUserCommand) -> str:
        user_id = self._codec.encode(self._codec.decode(command.user_id))

        try:
            self._storage.delete(user_id, timeout=self._timeout)
        except NotFoundError:
            raise
        except AppError as exc:
            raise AppError(
                message=f"error delete user id: {user_id}",
                developer_message=str(exc),
                code=DELETE_ERROR_CODE,
                cause=exc,
            ) from exc

        logger.info("Deleted user %s", user_id)
        return user_id
