"""
Use case: Create a user from the submitted fields.

Input: CreateUserCommand (email, username, password)
Output: CreatedUserResult (the submitted input plus the assigned id)
Side effects: Inserts one document.
Failure cases: AppError E-0991 wrapping the storage failure.
"""

import logging
from typing import Optional

from userapi.application.users.dtos import CreateUserCommand, CreatedUserResult
from userapi.domain.users.entities import CreateUserInput
from userapi.domain.users.errors import CREATE_ERROR_CODE, AppError
from userapi.domain.users.ports import UserStorage

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Persists a new user within a creation deadline.

    The deadline comes from configuration; it bounds the whole
    storage round-trip.
    """

    def __init__(self, storage: UserStorage, timeout: Optional[float] = None) -> None:
        self._storage = storage
        self._timeout = timeout

    def execute(self, command: CreateUserCommand) -> CreatedUserResult:
        """Run the create use case.

        Args:
            command: The submitted email, username and password.

        Returns:
            The submitted fields and the identifier storage assigned.

        Raises:
            AppError: If storage cannot create the user.
        """
        user_input = CreateUserInput(
            email=command.email,
            username=command.username,
            password=command.password,
        )

        try:
            assigned_id = self._storage.create(user_input.to_user(), timeout=self._timeout)
        except AppError as exc:
            raise AppError(
                message=f"error create user with name: {user_input.username}",
                developer_message=str(exc),
                code=CREATE_ERROR_CODE,
                cause=exc,
            ) from exc

        logger.info("Created user id=%s username=%s", assigned_id, user_input.username)
        return CreatedUserResult(
            email=user_input.email,
            username=user_input.username,
            password=user_input.password,
            assigned_id=assigned_id,
        )
