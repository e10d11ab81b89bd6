"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class User:
    """A stored user record.

    ``id`` is assigned by the storage engine and stays empty until the
    user is persisted. ``password_hash`` holds the submitted password
    as-is.
    """

    email: str
    username: str
    password_hash: str
    id: str = ""

    @property
    def is_persisted(self) -> bool:
        return bool(self.id)

    def apply(self, changes: "UserChanges") -> "User":
        """Return a copy with every non-None change applied. The id is kept."""
        return replace(
            self,
            email=self.email if changes.email is None else changes.email,
            username=self.username if changes.username is None else changes.username,
            password_hash=(
                self.password_hash if changes.password is None else changes.password
            ),
        )


@dataclass(frozen=True)
class CreateUserInput:
    """The creation view of a user, exactly as submitted."""

    email: str
    username: str
    password: str

    def to_user(self) -> User:
        return User(
            email=self.email,
            username=self.username,
            password_hash=self.password,
        )


@dataclass(frozen=True)
class UserChanges:
    """Replacement values for a user's mutable attributes.

    ``None`` means "leave unchanged".
    """

    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    @classmethod
    def overwrite_all(cls, email: str, username: str, password: str) -> "UserChanges":
        return cls(email=email, username=username, password=password)
