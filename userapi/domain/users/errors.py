"""
Domain-specific errors for the users bounded context.

All errors raised from the domain and application layers are defined here.
They are mapped to HTTP responses by the response mapper in
``userapi.shared.errors``. No framework imports allowed.

Every error carries a stable wire envelope::

    {"code": "...", "message": "...", "developer_message": "..."}

The underlying cause is kept for chaining and logging but is never
serialized.
"""

from enum import Enum
from typing import Iterator, Optional

SYSTEM_ERROR_CODE = "US-000000"
NOT_FOUND_CODE = "US-000003"
STORAGE_ERROR_CODE = "US-000004"

MARSHAL_ERROR_CODE = "E-0990"
CREATE_ERROR_CODE = "E-0991"
INVALID_ID_CODE = "E-0992"
UPDATE_ERROR_CODE = "E-0993"
DELETE_ERROR_CODE = "E-0994"


class ErrorKind(Enum):
    """Closed set of error classifications decided at the HTTP boundary."""

    NOT_FOUND = "not_found"
    DOMAIN = "domain"
    STORAGE = "storage"
    UNCLASSIFIED = "unclassified"


class AppError(Exception):
    """Base error for all user-facing application failures.

    Attributes:
        message: User-facing message.
        developer_message: Detail aimed at the API consumer's developer.
        code: Stable error token, e.g. ``"E-0990"``.
        cause: The wrapped failure, if any. Never serialized.
    """

    def __init__(
        self,
        message: str,
        developer_message: str = "",
        code: str = SYSTEM_ERROR_CODE,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.message = message
        self.developer_message = developer_message
        self.code = code
        self.cause = cause
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, str]:
        """Return the wire envelope for this error."""
        return {
            "code": self.code,
            "message": self.message,
            "developer_message": self.developer_message,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class NotFoundError(AppError):
    """Raised when a requested user does not exist.

    The envelope is fixed regardless of ``detail``; the detail only
    ends up in logs.
    """

    def __init__(self, detail: str = "") -> None:
        super().__init__(message="not found", code=NOT_FOUND_CODE)
        self.detail = detail

    def __str__(self) -> str:
        return f"not found: {self.detail}" if self.detail else "not found"


class InvalidIdentifierError(AppError):
    """Raised when a string cannot be decoded into a storage identifier."""

    def __init__(self, value: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(
            message=f"failed to convert user ID to ObjectId. ID={value}",
            developer_message=str(cause) if cause is not None else "",
            code=INVALID_ID_CODE,
            cause=cause,
        )
        self.value = value


class StorageError(AppError):
    """Wraps a low-level persistence failure with a descriptive message."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(
            message=message,
            developer_message=str(cause) if cause is not None else "",
            code=STORAGE_ERROR_CODE,
            cause=cause,
        )


def system_error(exc: BaseException) -> AppError:
    """Wrap an unclassified failure into the generic system error envelope."""
    return AppError(
        message="internal system error",
        developer_message=str(exc),
        code=SYSTEM_ERROR_CODE,
        cause=exc,
    )


def iter_error_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield ``exc`` followed by every error it wraps, outermost first."""
    seen: set[int] = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if isinstance(current, AppError) and current.cause is not None:
            current = current.cause
        else:
            current = current.__cause__


def classify(exc: BaseException) -> ErrorKind:
    """Classify a failure into exactly one ErrorKind.

    Order matters: a not-found anywhere under an AppError wins over the
    AppError's own kind; errors with no AppError in their chain are
    unclassified.
    """
    chain = list(iter_error_chain(exc))
    app_errors = [e for e in chain if isinstance(e, AppError)]
    if not app_errors:
        return ErrorKind.UNCLASSIFIED
    if any(isinstance(e, NotFoundError) for e in chain):
        return ErrorKind.NOT_FOUND
    if isinstance(app_errors[0], StorageError):
        return ErrorKind.STORAGE
    return ErrorKind.DOMAIN


def find_app_error(exc: BaseException) -> Optional[AppError]:
    """Return the outermost AppError in the chain, or None."""
    for error in iter_error_chain(exc):
        if isinstance(error, AppError):
            return error
    return None
