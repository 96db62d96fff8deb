"""
Error handler decorator for HTTP endpoints.

Converts AppException instances into HTTPException with the exception's
``http_status``, so endpoints need no try/except of their own.
"""

from functools import wraps
from typing import Any, Callable

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from querypage.exceptions import AppException, QueryExecutionError
from querypage.logging import logger


def handle_http_errors(func: Callable) -> Callable:
    """
    Decorator for HTTP endpoints to convert AppException to HTTPException.

    Args:
        func: The HTTP endpoint function to wrap.

    Returns:
        Wrapped function that handles exceptions.

    Example:
        ```python
        @router.get("/members")
        @handle_http_errors
        async def get_members(repo: MemberRepoDep) -> list[Member]:
            return await repo.search(MemberSearchCondition())
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except AppException as ex:
            extra = {"exception_type": type(ex).__name__}
            if isinstance(ex, QueryExecutionError):
                extra["stage"] = ex.stage
            logger.warning(
                f"AppException in {func.__name__}: {ex.message}",
                extra=extra,
            )
            raise HTTPException(
                status_code=ex.http_status,
                detail=ex.message,
            )
        except SQLAlchemyError as ex:
            logger.error(
                f"Database error in {func.__name__}: {ex}",
                exc_info=True,
            )
            raise HTTPException(
                status_code=500,
                detail="Database error occurred",
            )

    return wrapper
