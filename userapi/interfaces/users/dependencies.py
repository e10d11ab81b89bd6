"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the users context; tests
override ``get_user_storage`` to run without MongoDB.
"""

from fastapi import Depends

from userapi.application.users.create_user import CreateUserUseCase
from userapi.application.users.delete_user import DeleteUserUseCase
from userapi.application.users.get_user import GetUserUseCase
from userapi.application.users.list_users import ListUsersUseCase
from userapi.application.users.partially_update_user import PartiallyUpdateUserUseCase
from userapi.application.users.update_user import UpdateUserUseCase
from userapi.core.config import Settings, get_settings
from userapi.domain.users.ports import IdentifierCodec, UserStorage
from userapi.infrastructure.mongodb import get_database
from userapi.infrastructure.users.mongo_storage import MongoUserStorage
from userapi.infrastructure.users.object_ids import object_id_codec


def get_user_storage(settings: Settings = Depends(get_settings)) -> UserStorage:
    """Build the MongoDB-backed user storage on the shared client."""
    return MongoUserStorage.from_database(get_database(), settings.mongodb_collection)


def get_identifier_codec() -> IdentifierCodec:
    return object_id_codec


def get_list_users_use_case(
    storage: UserStorage = Depends(get_user_storage),
    settings: Settings = Depends(get_settings),
) -> ListUsersUseCase:
    """Build ListUsersUseCase with its infrastructure dependencies."""
    return ListUsersUseCase(storage=storage, timeout=settings.request_timeout_seconds)


def get_create_user_use_case(
    storage: UserStorage = Depends(get_user_storage),
    settings: Settings = Depends(get_settings),
) -> CreateUserUseCase:
    """Build CreateUserUseCase bounded by the creation deadline."""
    return CreateUserUseCase(storage=storage, timeout=settings.create_timeout_seconds)


def get_get_user_use_case(
    storage: UserStorage = Depends(get_user_storage),
    codec: IdentifierCodec = Depends(get_identifier_codec),
    settings: Settings = Depends(get_settings),
) -> GetUserUseCase:
    """Build GetUserUseCase with its infrastructure dependencies."""
    return GetUserUseCase(
        storage=storage, codec=codec, timeout=settings.request_timeout_seconds
    )


def get_update_user_use_case(
    storage: UserStorage = Depends(get_user_storage),
    codec: IdentifierCodec = Depends(get_identifier_codec),
    settings: Settings = Depends(get_settings),
) -> UpdateUserUseCase:
    """Build UpdateUserUseCase with its infrastructure dependencies."""
    return UpdateUserUseCase(
        storage=storage, codec=codec, timeout=settings.request_timeout_seconds
    )


def get_partially_update_user_use_case(
    storage: UserStorage = Depends(get_user_storage),
    codec: IdentifierCodec = Depends(get_identifier_codec),
    settings: Settings = Depends(get_settings),
) -> PartiallyUpdateUserUseCase:
    """Build PartiallyUpdateUserUseCase with its infrastructure dependencies."""
    return PartiallyUpdateUserUseCase(
        storage=storage, codec=codec, timeout=settings.request_timeout_seconds
    )


def get_delete_user_use_case(
    storage: UserStorage = Depends(get_user_storage),
    codec: IdentifierCodec = Depends(get_identifier_codec),
    settings: Settings = Depends(get_settings),
) -> DeleteUserUseCase:
    """Build DeleteUserUseCase with its infrastructure dependencies."""
    return DeleteUserUseCase(
        storage=storage, codec=codec, timeout=settings.request_timeout_seconds
    )
