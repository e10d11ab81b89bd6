"""
Tests for the users application layer (use cases).

Tests use cases against the in-memory storage. No real infrastructure needed.
"""

from unittest.mock import MagicMock

import pytest

from userapi.application.users.create_user import CreateUserUseCase
from userapi.application.users.delete_user import DeleteUserUseCase
from userapi.application.users.dtos import (
    CreateUserCommand,
    DeleteUserCommand,
    GetUserQuery,
    UpdateUserCommand,
)
from userapi.application.users.get_user import GetUserUseCase
from userapi.application.users.list_users import ListUsersUseCase
from userapi.application.users.partially_update_user import PartiallyUpdateUserUseCase
from userapi.application.users.update_user import UpdateUserUseCase
from userapi.domain.users.entities import User
from userapi.domain.users.errors import (
    CREATE_ERROR_CODE,
    DELETE_ERROR_CODE,
    MARSHAL_ERROR_CODE,
    UPDATE_ERROR_CODE,
    AppError,
    ErrorKind,
    InvalidIdentifierError,
    NotFoundError,
    StorageError,
    classify,
)
from userapi.domain.users.ports import UserStorage
from userapi.infrastructure.users.object_ids import object_id_codec

MISSING_ID = "64b7f0c2a1b2c3d4e5f60718"


class TestListUsersUseCase:

    def test_empty_collection_is_empty_list(self, storage) -> None:
        """No stored users lists as an empty list."""
        assert ListUsersUseCase(storage).execute() == []

    def test_returns_every_user(self, storage) -> None:
        """Every stored user is returned."""
        first = storage.seed("a@x", "a", "pa")
        second = storage.seed("b@x", "b", "pb")
        results = ListUsersUseCase(storage).execute()
        assert {r.id for r in results} == {first.id, second.id}

    def test_storage_failure_reported_as_not_found(self, storage) -> None:
        """A storage failure while listing surfaces as NotFoundError."""
        storage.fail_with = StorageError("connection refused")
        with pytest.raises(NotFoundError) as exc_info:
            ListUsersUseCase(storage).execute()
        assert isinstance(exc_info.value.__cause__, StorageError)

    def test_non_storage_failure_propagates(self, storage) -> None:
        """Errors outside the storage kind are not translated."""
        storage.fail_with = RuntimeError("bug")
        with pytest.raises(RuntimeError):
            ListUsersUseCase(storage).execute()

    def test_timeout_is_forwarded(self, storage) -> None:
        """The configured timeout reaches the storage call."""
        ListUsersUseCase(storage, timeout=5.0).execute()
        assert storage.timeouts == [5.0]


class TestCreateUserUseCase:

    def test_echoes_input_and_stores_user(self, storage) -> None:
        """Create stores the user and echoes the submitted input."""
        command = CreateUserCommand(email="e@x", username="neo", password="secret")
        result = CreateUserUseCase(storage).execute(command)

        assert (result.email, result.username, result.password) == ("e@x", "neo", "secret")
        stored = storage.users[result.assigned_id]
        assert stored.password_hash == "secret"

    def test_uses_creation_deadline(self, storage) -> None:
        """Create passes its own deadline to storage."""
        command = CreateUserCommand(email="e", username="u", password="p")
        CreateUserUseCase(storage, timeout=0.01).execute(command)
        assert storage.timeouts == [0.01]

    def test_storage_failure_wrapped(self, storage) -> None:
        """A storage failure on create becomes E-0991."""
        storage.fail_with = StorageError("deadline exceeded")
        command = CreateUserCommand(email="e", username="neo", password="p")
        with pytest.raises(AppError) as exc_info:
            CreateUserUseCase(storage).execute(command)
        error = exc_info.value
        assert error.code == CREATE_ERROR_CODE
        assert "neo" in error.message
        assert isinstance(error.cause, StorageError)


class TestGetUserUseCase:

    def test_returns_user_without_password(self, storage) -> None:
        """Read-one returns the user with no password field."""
        user = storage.seed("a", "b", "c")
        result = GetUserUseCase(storage, object_id_codec).execute(GetUserQuery(user.id))
        assert (result.id, result.email, result.username) == (user.id, "a", "b")
        assert not hasattr(result, "password_hash")

    def test_missing_user_wraps_not_found(self, storage) -> None:
        """A missing user is wrapped in E-0990 with NotFoundError as cause."""
        with pytest.raises(AppError) as exc_info:
            GetUserUseCase(storage, object_id_codec).execute(GetUserQuery(MISSING_ID))
        assert exc_info.value.code == MARSHAL_ERROR_CODE
        assert classify(exc_info.value) is ErrorKind.NOT_FOUND

    def test_malformed_id_rejected_before_storage(self, storage) -> None:
        """A malformed id fails before storage is called."""
        with pytest.raises(InvalidIdentifierError):
            GetUserUseCase(storage, object_id_codec).execute(GetUserQuery("nope"))
        assert storage.timeouts == []


class TestUpdateUserUseCase:

    def test_full_update_overwrites_all_fields(self, storage) -> None:
        """Full update stores every submitted field."""
        user = storage.seed("a", "b", "c")
        command = UpdateUserCommand(user.id, email="x", username="y", password="z")
        result = UpdateUserUseCase(storage, object_id_codec).execute(command)

        stored = storage.users[user.id]
        assert (stored.email, stored.username, stored.password_hash) == ("x", "y", "z")
        assert (result.email, result.username) == ("x", "y")

    def test_full_update_requires_every_field(self, storage) -> None:
        """Full update refuses a command with a missing field."""
        user = storage.seed("a", "b", "c")
        with pytest.raises(ValueError):
            UpdateUserUseCase(storage, object_id_codec).execute(
                UpdateUserCommand(user.id, email="x")
            )

    def test_missing_user_raises_not_found(self, storage) -> None:
        """Updating an unknown user raises NotFoundError unchanged."""
        command = UpdateUserCommand(MISSING_ID, email="x", username="y", password="z")
        with pytest.raises(NotFoundError):
            UpdateUserUseCase(storage, object_id_codec).execute(command)

    def test_write_failure_wrapped(self) -> None:
        """A failed write is wrapped as E-0993."""
        storage = MagicMock(spec=UserStorage)
        storage.find_one.return_value = _user(MISSING_ID)
        storage.update.side_effect = StorageError("write failed")

        command = UpdateUserCommand(MISSING_ID, email="x", username="y", password="z")
        with pytest.raises(AppError) as exc_info:
            UpdateUserUseCase(storage, object_id_codec).execute(command)
        assert exc_info.value.code == UPDATE_ERROR_CODE
        assert classify(exc_info.value) is ErrorKind.DOMAIN

    def test_vanished_between_read_and_write_is_not_found(self) -> None:
        """A user deleted between read and write still maps to not found."""
        storage = MagicMock(spec=UserStorage)
        storage.find_one.return_value = _user(MISSING_ID)
        storage.update.side_effect = NotFoundError()

        command = UpdateUserCommand(MISSING_ID, email="x", username="y", password="z")
        with pytest.raises(AppError) as exc_info:
            UpdateUserUseCase(storage, object_id_codec).execute(command)
        assert classify(exc_info.value) is ErrorKind.NOT_FOUND


class TestPartiallyUpdateUserUseCase:

    def test_only_given_fields_change(self, storage) -> None:
        """Partial update leaves unset fields untouched."""
        user = storage.seed("a", "b", "c")
        command = UpdateUserCommand(user.id, email=None, username="new", password=None)
        PartiallyUpdateUserUseCase(storage, object_id_codec).execute(command)

        stored = storage.users[user.id]
        assert (stored.email, stored.username, stored.password_hash) == ("a", "new", "c")

    def test_no_changes_rewrites_same_record(self, storage) -> None:
        """A partial update with no changes writes the record back as-is."""
        user = storage.seed("a", "b", "c")
        PartiallyUpdateUserUseCase(storage, object_id_codec).execute(UpdateUserCommand(user.id))
        assert storage.users[user.id] == user

    def test_failure_message_names_partial_update(self) -> None:
        """The wrapped failure names the partial update action."""
        storage = MagicMock(spec=UserStorage)
        storage.find_one.return_value = _user(MISSING_ID)
        storage.update.side_effect = StorageError("write failed")
        with pytest.raises(AppError) as exc_info:
            PartiallyUpdateUserUseCase(storage, object_id_codec).execute(
                UpdateUserCommand(MISSING_ID, username="n")
            )
        assert exc_info.value.message.startswith("error partially update user id")


class TestDeleteUserUseCase:

    def test_deletes_and_returns_id(self, storage) -> None:
        """Delete removes the user and returns its id."""
        user = storage.seed("a", "b", "c")
        assert DeleteUserUseCase(storage, object_id_codec).execute(DeleteUserCommand(user.id)) == user.id
        assert user.id not in storage.users

    def test_missing_user_raises_not_found(self, storage) -> None:
        """Deleting an unknown user raises NotFoundError unchanged."""
        with pytest.raises(NotFoundError):
            DeleteUserUseCase(storage, object_id_codec).execute(DeleteUserCommand(MISSING_ID))

    def test_storage_failure_wrapped(self, storage) -> None:
        """A non-not-found delete failure becomes E-0994."""
        storage.fail_with = StorageError("socket closed")
        with pytest.raises(AppError) as exc_info:
            DeleteUserUseCase(storage, object_id_codec).execute(DeleteUserCommand(MISSING_ID))
        assert exc_info.value.code == DELETE_ERROR_CODE

    def test_malformed_id_rejected(self, storage) -> None:
        """A malformed id is rejected with InvalidIdentifierError."""
        with pytest.raises(InvalidIdentifierError):
            DeleteUserUseCase(storage, object_id_codec).execute(DeleteUserCommand("123"))


def _user(user_id: str) -> User:
    return User(id=user_id, email="a", username="b", password_hash="c")
