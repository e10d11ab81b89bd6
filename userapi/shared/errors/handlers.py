"""
Response mapper: centralized error-to-HTTP translation.

Wraps every request, classifies whatever the route raised and emits the
matching status and JSON envelope:

    NotFoundError anywhere under an AppError -> 404, not-found envelope
    any other AppError                       -> 400, the error's envelope
    anything else                            -> 418, system-error envelope

This is the single place that decides an HTTP status for a failure.
Every request is logged at INFO with the error value (or None). The
logged path is the route template, so path parameters such as the
password never reach the log.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Match
from starlette.types import ASGIApp

from userapi.domain.users.errors import (
    ErrorKind,
    NotFoundError,
    classify,
    find_app_error,
    system_error,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_418 = 418

JSON_CONTENT_TYPE = "application/json"
MASKED_SEGMENT = "***"
WRITE_METHODS = frozenset({"POST", "PUT", "PATCH"})

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: HTTP_404,
    ErrorKind.DOMAIN: HTTP_400,
    ErrorKind.STORAGE: HTTP_400,
    ErrorKind.UNCLASSIFIED: HTTP_418,
}


def _error_response(status_code: int, body: dict[str, str]) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content=body)


def loggable_path(request: Request) -> str:
    """Return the route template matching ``request``.

    Unmatched writes get their last segment masked instead.
    """
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match is Match.FULL:
            return getattr(route, "path", request.url.path)
    path = request.url.path
    if request.method in WRITE_METHODS and path.strip("/").count("/"):
        return path.rsplit("/", 1)[0] + "/" + MASKED_SEGMENT
    return path


def map_error(exc: Exception, legacy_error_bodies: bool = False) -> JSONResponse:
    """Translate a failure into its HTTP response.

    Args:
        exc: Whatever the route raised.
        legacy_error_bodies: Send the not-found envelope for every 400,
            reproducing the first release of the service.

    Returns:
        A JSON response with the status decided by ``classify``.
    """
    kind = classify(exc)
    status_code = STATUS_BY_KIND[kind]

    if kind is ErrorKind.NOT_FOUND:
        return _error_response(status_code, NotFoundError().to_dict())

    if kind is ErrorKind.UNCLASSIFIED:
        logger.error("Unclassified error: %s", type(exc).__name__, exc_info=exc)
        return _error_response(status_code, system_error(exc).to_dict())

    if legacy_error_bodies:
        return _error_response(status_code, NotFoundError().to_dict())
    app_error = find_app_error(exc)
    return _error_response(status_code, app_error.to_dict())


class ErrorMappingMiddleware(BaseHTTPMiddleware):
    """Middleware that turns raised errors into JSON error responses.

    Successful responses pass through untouched except that a missing
    Content-Type is set to ``application/json``.
    """

    def __init__(self, app: ASGIApp, legacy_error_bodies: bool = False) -> None:
        super().__init__(app)
        self._legacy_error_bodies = legacy_error_bodies

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Run the route and map its outcome."""
        error: Optional[Exception] = None
        try:
            response = await call_next(request)
        except Exception as exc:
            error = exc
            response = map_error(exc, self._legacy_error_bodies)

        logger.info(
            "%s %s -> %d error=%r",
            request.method,
            loggable_path(request),
            response.status_code,
            error,
        )
        if "content-type" not in response.headers:
            response.headers["Content-Type"] = JSON_CONTENT_TYPE
        return response


def register_error_handlers(app: FastAPI, legacy_error_bodies: bool = False) -> None:
    """Install the response mapper on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        legacy_error_bodies: See ``map_error``.
    """
    app.add_middleware(ErrorMappingMiddleware, legacy_error_bodies=legacy_error_bodies)
