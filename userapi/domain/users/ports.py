"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the application layer requires from the
outside world. Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from userapi.domain.users.entities import User


class IdentifierCodec(ABC):
    """Port for converting storage-native identifiers to and from text."""

    @abstractmethod
    def decode(self, text: str) -> Any:
        """Parse an opaque string into the engine's native identifier.

        Raises:
            InvalidIdentifierError: If ``text`` is not a valid identifier.
        """
        raise NotImplementedError

    @abstractmethod
    def encode(self, native_id: Any) -> str:
        """Return the canonical string form of a native identifier. Never fails."""
        raise NotImplementedError


class UserStorage(ABC):
    """Port for persisting user records.

    Every operation accepts an optional ``timeout`` in seconds. ``None``
    leaves the call unbounded.
    """

    @abstractmethod
    def find_all(self, timeout: Optional[float] = None) -> list[User]:
        """Return every stored user. An empty collection yields an empty list.

        Raises:
            StorageError: On any driver failure.
        """
        raise NotImplementedError

    @abstractmethod
    def find_one(self, user_id: str, timeout: Optional[float] = None) -> User:
        """Return the user with the given id.

        Raises:
            NotFoundError: If no document matches.
            InvalidIdentifierError: If ``user_id`` is malformed.
            StorageError: On any other failure; the message names the id.
        """
        raise NotImplementedError

    @abstractmethod
    def create(self, user: User, timeout: Optional[float] = None) -> str:
        """Insert a new user and return the engine-assigned id as text.

        ``user.id`` must be empty.

        Raises:
            StorageError: If the insert fails or no id can be produced.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User, timeout: Optional[float] = None) -> None:
        """Replace every field of the stored user except its id.

        Raises:
            NotFoundError: If no document with ``user.id`` exists.
            StorageError: On any other failure.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: str, timeout: Optional[float] = None) -> None:
        """Remove the user with the given id.

        Raises:
            NotFoundError: If nothing was removed.
            StorageError: On any other failure.
        """
        raise NotImplementedError
