"""
Session error handling utilities.

Provides a decorator that maps the domain exception hierarchy onto
HTTP status codes for every session endpoint.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from chat_backend.core.exceptions import (
    InvalidRequestError,
    SessionNotFoundError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

NOT_FOUND_DETAIL = "Session not found"
INTERNAL_ERROR_DETAIL = "Internal Server Error"


def handle_session_errors(func: F) -> F:
    """
    Decorator to handle session errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context (session_id, cause)
    - Mapping InvalidRequestError -> 400, SessionNotFoundError -> 404,
      everything else -> 500
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except InvalidRequestError as e:
            logger.warning(
                "Invalid session request",
                extra={"field": e.field, "error": e.message},
            )
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.message,
            )

        except SessionNotFoundError as e:
            logger.warning(
                "Session not found",
                extra={"session_id": e.session_id, "cause": e.cause},
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=NOT_FOUND_DETAIL,
            )

        except StoreUnavailableError as e:
            logger.error("Session store unavailable", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_DETAIL,
            )

        except HTTPException:
            raise

        except Exception as e:
            logger.exception(
                "Unexpected failure in session operation",
                extra={"error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_DETAIL,
            )

    return wrapper  # type: ignore
