"""
Error handler decorator for HTTP endpoints.

Converts pagination exceptions into FastAPI HTTP errors so endpoints do not
repeat try/except blocks. Other exceptions (including database errors from
the executor) pass through untouched.
"""

from functools import wraps
from typing import Any, Callable

from fastapi import HTTPException

from datapager.exceptions import AppException
from datapager.logging import logger


def handle_http_errors(func: Callable) -> Callable:
    """
    Decorator for HTTP endpoints to convert AppException to HTTPException.

    Args:
        func: The HTTP endpoint function to wrap.

    Returns:
        Wrapped function that handles exceptions.

    Example:
        ```python
        @router.get("/authors")
        @handle_http_errors
        async def list_authors(session: SessionDep) -> dict:
            paginator = DataPaginator(
                config, SessionExecutor(session), ModelMapper()
            )
            return (await paginator.paginate(QUERY, Author)).model_dump()
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except AppException as ex:
            logger.warning(
                f"AppException in {func.__name__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            raise HTTPException(
                status_code=ex.http_status,
                detail=ex.message,
            ) from ex

    return wrapper
