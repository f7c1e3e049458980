# mediarank/common/errors.py
from __future__ import annotations

from http import HTTPStatus


class MediaRankError(Exception):
    """
    Base for errors raised across the service/domain boundary.
    `status_code` is what the API layer answers with; `message` is user-facing.
    """
    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Unexpected error") -> None:
        super().__init__(message)
        self.message = message


class ValidationError(MediaRankError, ValueError):
    """Bad input: rank out of range, missing required field, unsupported media type."""
    status_code = HTTPStatus.BAD_REQUEST


class AuthenticationError(MediaRankError):
    status_code = HTTPStatus.UNAUTHORIZED

    def __init__(self, message: str = "User not authenticated") -> None:
        super().__init__(message)


class PermissionDeniedError(MediaRankError):
    status_code = HTTPStatus.FORBIDDEN


class NotFoundError(MediaRankError):
    status_code = HTTPStatus.NOT_FOUND


class ConflictError(MediaRankError):
    status_code = HTTPStatus.CONFLICT


class StoreError(MediaRankError):
    """Remote read/write failure. The original cause is chained via `raise ... from`."""
    status_code = HTTPStatus.SERVICE_UNAVAILABLE


class NetworkError(MediaRankError):
    """Search provider unreachable, misconfigured, or answering non-2xx."""
    status_code = HTTPStatus.BAD_GATEWAY
