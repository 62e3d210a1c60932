# app/errors.py
"""
Application error types.

Repositories and services raise ``AppError`` subclasses carrying internal
context (ids, operation). Routers translate them into ``APIError``, which only
carries a fixed, user-facing message and an HTTP status; the exception
handlers registered in ``app.main`` render it as ``{"error": message}``.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import status

log = logging.getLogger(__name__)


class AppError(Exception):
    """Base for errors raised below the HTTP layer."""


class RepositoryError(AppError):
    """A storage operation failed."""


class RecordNotFound(AppError):
    """No row matched the (user-scoped) lookup."""


class DuplicateRecord(AppError):
    """A unique constraint rejected the write."""


class InvalidCredentials(AppError):
    """Username/password pair did not verify."""


class APIError(Exception):
    """A fixed, client-safe message plus the HTTP status to send it with."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        *,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.headers = headers


@contextmanager
def api_errors(
    message: str,
    status_code: int,
    *,
    not_found: str | None = None,
    conflict: str | None = None,
) -> Iterator[None]:
    """
    Run one service/repository call and map any AppError to an APIError.

    ``message``/``status_code`` are used for everything not covered by the
    more specific ``not_found`` (404) and ``conflict`` (400) messages.
    The internal error text is logged, never returned.
    """
    try:
        yield
    except RecordNotFound as e:
        log.info("not found: %s", e)
        if not_found is not None:
            raise APIError(not_found, status.HTTP_404_NOT_FOUND) from e
        raise APIError(message, status_code) from e
    except DuplicateRecord as e:
        log.info("conflict: %s", e)
        if conflict is not None:
            raise APIError(conflict, status.HTTP_400_BAD_REQUEST) from e
        raise APIError(message, status_code) from e
    except AppError as e:
        if status_code >= 500:
            log.error("%s (%s)", e, type(e).__name__)
        else:
            log.warning("%s (%s)", e, type(e).__name__)
        raise APIError(message, status_code) from e
