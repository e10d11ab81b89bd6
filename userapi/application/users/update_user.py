"""
Use case: Replace all mutable fields of a user.

Input: UpdateUserCommand (user_id, email, username, password)
Output: UserResult (the updated user)
Side effects: Rewrites one document.
Failure cases: InvalidIdentifierError, NotFoundError / StorageError from
the initial lookup (passed through), AppError E-0993 wrapping an update
failure.
"""

import logging
from typing import Optional

from userapi.application.users.dtos import UpdateUserCommand, UserResult
from userapi.domain.users.entities import UserChanges
from userapi.domain.users.errors import UPDATE_ERROR_CODE, AppError
from userapi.domain.users.ports import IdentifierCodec, UserStorage

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Loads a user, applies changes and writes it back.

    Subclasses decide which fields change by overriding ``_changes``.
    """

    action = "update"

    def __init__(
        self,
        storage: UserStorage,
        codec: IdentifierCodec,
        timeout: Optional[float] = None,
    ) -> None:
        self._storage = storage
        self._codec = codec
        self._timeout = timeout

    def _changes(self, command: UpdateUserCommand) -> UserChanges:
        if None in (command.email, command.username, command.password):
            raise ValueError("a full update needs email, username and password")
        return UserChanges.overwrite_all(
            email=command.email,
            username=command.username,
            password=command.password,
        )

    def execute(self, command: UpdateUserCommand) -> UserResult:
        """Run the update use case.

        Args:
            command: The target id and the new field values.

        Returns:
            The user as stored after the update.

        Raises:
            InvalidIdentifierError: If the id cannot be decoded.
            NotFoundError: If the user does not exist.
            AppError: If the write fails.
        """
        changes = self._changes(command)
        user_id = self._codec.encode(self._codec.decode(command.user_id))

        current = self._storage.find_one(user_id, timeout=self._timeout)
        updated = current.apply(changes)

        try:
            self._storage.update(updated, timeout=self._timeout)
        except AppError as exc:
            raise AppError(
                message=f"error {self.action} user id: {user_id}",
                developer_message=str(exc),
                code=UPDATE_ERROR_CODE,
                cause=exc,
            ) from exc

        logger.info("User %s: %s applied", user_id, self.action)
        return UserResult(id=updated.id, email=updated.email, username=updated.username)
