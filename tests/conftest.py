"""
Shared fixtures for the users test suite.

Provides an in-memory UserStorage so use cases and routes can be
exercised without MongoDB.
"""

from typing import Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from userapi.domain.users.entities import User
from userapi.domain.users.errors import NotFoundError
from userapi.domain.users.ports import UserStorage
from userapi.infrastructure.users.object_ids import object_id_codec
from userapi.interfaces.users.dependencies import get_user_storage
from userapi.main import app


class InMemoryUserStorage(UserStorage):
    """Dict-backed storage honoring the UserStorage contract."""

    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self.timeouts: list[Optional[float]] = []
        self.fail_with: Optional[Exception] = None

    def _check(self, timeout: Optional[float]) -> None:
        self.timeouts.append(timeout)
        if self.fail_with is not None:
            raise self.fail_with

    def find_all(self, timeout=None):
        self._check(timeout)
        return list(self.users.values())

    def find_one(self, user_id, timeout=None):
        object_id_codec.decode(user_id)
        self._check(timeout)
        try:
            return self.users[user_id]
        except KeyError:
            raise NotFoundError(f"user {user_id}") from None

    def create(self, user, timeout=None):
        if user.id:
            raise ValueError("id must be empty")
        self._check(timeout)
        user_id = str(ObjectId())
        self.users[user_id] = User(
            id=user_id,
            email=user.email,
            username=user.username,
            password_hash=user.password_hash,
        )
        return user_id

    def update(self, user, timeout=None):
        object_id_codec.decode(user.id)
        self._check(timeout)
        if user.id not in self.users:
            raise NotFoundError(f"user {user.id}")
        self.users[user.id] = user

    def delete(self, user_id, timeout=None):
        object_id_codec.decode(user_id)
        self._check(timeout)
        if self.users.pop(user_id, None) is None:
            raise NotFoundError(f"user {user_id}")

    def seed(self, email: str, username: str, password_hash: str) -> User:
        user_id = str(ObjectId())
        user = User(id=user_id, email=email, username=username, password_hash=password_hash)
        self.users[user_id] = user
        return user


@pytest.fixture
def storage() -> InMemoryUserStorage:
    return InMemoryUserStorage()


@pytest.fixture
def client(storage: InMemoryUserStorage):
    """TestClient with MongoDB replaced by the in-memory storage."""
    app.dependency_overrides[get_user_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()
