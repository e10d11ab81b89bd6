"""
Use case: Change only the supplied fields of a user.

Same flow and failure cases as UpdateUserUseCase; a field whose
command value is None keeps its stored value.
"""

from userapi.application.users.dtos import UpdateUserCommand
from userapi.application.users.update_user import UpdateUserUseCase
from userapi.domain.users.entities import UserChanges


class PartiallyUpdateUserUseCase(UpdateUserUseCase):
    """Partial variant of the update use case."""

    action = "partially update"

    def _changes(self, command: UpdateUserCommand) -> UserChanges:
        return UserChanges(
            email=command.email,
            username=command.username,
            password=command.password,
        )
