"""
Router error handling utilities.

Decorators translating domain exceptions into HTTP responses so endpoints
only contain the happy path.

Dependencies: fastapi, franchise_site.core.exceptions
System role: Uniform error mapping for the HTTP API
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from franchise_site.core.exceptions import (
    AuthenticationError,
    CaptchaError,
    ConflictError,
    FranchiseSiteException,
    ImportFileError,
    NotFoundError,
    PermissionDeniedError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

STATUS_BY_ERROR: list[tuple[type[FranchiseSiteException], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (CaptchaError, status.HTTP_400_BAD_REQUEST),
    (ImportFileError, status.HTTP_400_BAD_REQUEST),
    (StorageError, status.HTTP_502_BAD_GATEWAY),
]


def status_for(error: FranchiseSiteException) -> int:
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_admin_errors(func: F) -> F:
    """
    Decorator to handle collection errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with the endpoint name and details
    - Mapping domain exceptions to HTTP status codes
    - Hiding unexpected failures behind a generic 500
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except FranchiseSiteException as e:
            code = status_for(e)
            log = logger.error if code >= 500 else logger.warning
            log(
                "Request failed",
                extra={"endpoint": func.__name__, "status_code": code, "error": str(e)},
            )
            raise HTTPException(status_code=code, detail=e.message) from e

        except Exception as e:
            logger.exception(
                "Unexpected failure in admin operation",
                extra={"endpoint": func.__name__, "error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            ) from e

    return wrapper  # type: ignore


def _json_error_handler(fallback_message: str) -> Callable[[F], F]:
    """Build a decorator that answers errors as `{"error": message}` JSON."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except HTTPException:
                raise

            except FranchiseSiteException as e:
                code = status_for(e)
                if code >= 500:
                    logger.error(
                        "Request failed",
                        extra={"endpoint": func.__name__, "error": str(e)},
                    )
                    return JSONResponse(status_code=code, content={"error": fallback_message})
                logger.warning(
                    "Request rejected",
                    extra={"endpoint": func.__name__, "status_code": code, "error": str(e)},
                )
                return JSONResponse(status_code=code, content={"error": e.message})

            except Exception as e:
                logger.exception(
                    "Unexpected failure",
                    extra={"endpoint": func.__name__, "error": str(e)},
                )
                return JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content={"error": fallback_message},
                )

        return wrapper  # type: ignore

    return decorator


# Public form endpoints
handle_lead_errors = _json_error_handler("Failed to process request")

# CSV import endpoints
handle_import_errors = _json_error_handler("Internal server error")
