"""
Adapter: MongoDB user storage.

Implements UserStorage port.
Responsible for persisting and retrieving user documents in a single
collection. Documents look like::

    {"_id": ObjectId, "email": str, "username": str, "password": str}
"""

import logging
from contextlib import nullcontext
from typing import Any, Optional

import pymongo
from bson import ObjectId
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from userapi.domain.users.entities import User
from userapi.domain.users.errors import NotFoundError, StorageError
from userapi.domain.users.ports import IdentifierCodec, UserStorage
from userapi.infrastructure.users.object_ids import object_id_codec

logger = logging.getLogger(__name__)


def _deadline(timeout: Optional[float]):
    """Bound every pymongo call inside the block to ``timeout`` seconds."""
    if timeout is None:
        return nullcontext()
    return pymongo.timeout(timeout)


def _describe(exc: PyMongoError) -> str:
    if exc.timeout:
        return f"deadline exceeded: {exc}"
    return str(exc)


class MongoUserStorage(UserStorage):
    """Concrete adapter for user persistence in MongoDB.

    Implements the UserStorage port defined in the domain layer.
    """

    def __init__(
        self,
        collection: Collection,
        codec: IdentifierCodec = object_id_codec,
    ) -> None:
        self._collection = collection
        self._codec = codec

    @classmethod
    def from_database(cls, database: Database, collection_name: str) -> "MongoUserStorage":
        return cls(database[collection_name])

    def _to_user(self, document: dict[str, Any]) -> User:
        return User(
            id=self._codec.encode(document["_id"]),
            email=document.get("email", ""),
            username=document.get("username", ""),
            password_hash=document.get("password", ""),
        )

    @staticmethod
    def _to_document(user: User) -> dict[str, Any]:
        """Return the stored fields of ``user``. The id is never included."""
        return {
            "email": user.email,
            "username": user.username,
            "password": user.password_hash,
        }

    def find_all(self, timeout: Optional[float] = None) -> list[User]:
        try:
            with _deadline(timeout):
                documents = list(self._collection.find({}))
        except PyMongoError as exc:
            raise StorageError(
                f"failed to find all users. due to error: {_describe(exc)}", cause=exc
            ) from exc

        try:
            users = [self._to_user(document) for document in documents]
        except (KeyError, TypeError) as exc:
            raise StorageError("failed to read all documents from cursor", cause=exc) from exc

        logger.debug("Fetched %d users.", len(users))
        return users

    def find_one(self, user_id: str, timeout: Optional[float] = None) -> User:
        oid = self._codec.decode(user_id)
        try:
            with _deadline(timeout):
                document = self._collection.find_one({"_id": oid})
        except PyMongoError as exc:
            raise StorageError(
                f"failed to find one user by id: {user_id} due to error: {_describe(exc)}",
                cause=exc,
            ) from exc

        if document is None:
            raise NotFoundError(f"user {user_id}")

        try:
            return self._to_user(document)
        except (KeyError, TypeError) as exc:
            raise StorageError(f"failed to decode user (id:{user_id})", cause=exc) from exc

    def create(self, user: User, timeout: Optional[float] = None) -> str:
        if user.is_persisted:
            raise ValueError(f"cannot create a user that already has an id: {user.id}")

        logger.debug("create user")
        try:
            with _deadline(timeout):
                result = self._collection.insert_one(self._to_document(user))
        except PyMongoError as exc:
            raise StorageError(
                f"failed to create user due to error: {_describe(exc)}", cause=exc
            ) from exc

        inserted_id = result.inserted_id
        if not isinstance(inserted_id, ObjectId):
            raise StorageError(
                f"failed to convert inserted id to hex. probably id: {inserted_id!r}"
            )
        return self._codec.encode(inserted_id)

    def update(self, user: User, timeout: Optional[float] = None) -> None:
        oid = self._codec.decode(user.id)
        try:
            with _deadline(timeout):
                result = self._collection.update_one(
                    {"_id": oid}, {"$set": self._to_document(user)}
                )
        except PyMongoError as exc:
            raise StorageError(
                f"failed to execute update user query. error: {_describe(exc)}", cause=exc
            ) from exc

        if result.matched_count == 0:
            raise NotFoundError(f"user {user.id}")
        logger.debug(
            "Matched %d documents and Modified %d documents",
            result.matched_count,
            result.modified_count,
        )

    def delete(self, user_id: str, timeout: Optional[float] = None) -> None:
        oid = self._codec.decode(user_id)
        try:
            with _deadline(timeout):
                result = self._collection.delete_one({"_id": oid})
        except PyMongoError as exc:
            raise StorageError(
                f"failed to execute delete query. error: {_describe(exc)}", cause=exc
            ) from exc

        if result.deleted_count == 0:
            raise NotFoundError(f"user {user_id}")
        logger.debug("Deleted %d documents", result.deleted_count)
