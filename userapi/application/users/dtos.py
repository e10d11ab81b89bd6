"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a user.

    Attributes:
        email: Email address as submitted.
        username: Username as submitted.
        password: Password as submitted. Stored as the user's password hash.
    """

    email: str
    username: str
    password: str


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for reading one user."""

    user_id: str


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for a full or partial update.

    Attributes:
        user_id: Encoded identifier of the user to update.
        email: New email, or None to keep the stored one.
        username: New username, or None to keep the stored one.
        password: New password, or None to keep the stored one.
    """

    user_id: str
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None


@dataclass(frozen=True)
class DeleteUserCommand:
    """Input DTO for deleting a user."""

    user_id: str


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a stored user. The password hash is never exposed."""

    id: str
    email: str
    username: str


@dataclass(frozen=True)
class CreatedUserResult:
    """Output DTO echoing the creation input.

    Attributes:
        email: Email as submitted.
        username: Username as submitted.
        password: Password as submitted.
        assigned_id: Identifier assigned by storage. Not part of the HTTP body.
    """

    email: str
    username: str
    password: str
    assigned_id: str
