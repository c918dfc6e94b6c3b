"""
Request scope for pagination.

The parameters of the request being served live in a context variable, so
every asyncio task sees only its own request. The HTTP layer opens the scope
(see datapager.middlewares.pagination_context); code running outside of it
has no request to paginate.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from datapager.schemas.request import RequestParameters

current_request: ContextVar[RequestParameters | None] = ContextVar(
    "current_request", default=None
)


def get_request_parameters() -> RequestParameters | None:
    """
    Get the parameters of the request being served.

    Returns:
        The request parameters, or None outside of a request scope.
    """
    return current_request.get()


@contextmanager
def request_scope(params: RequestParameters) -> Iterator[RequestParameters]:
    """
    Run a block of code as part of a request.

    Args:
        params: Client parameters of the request.

    Yields:
        The same parameters.

    Example:
        >>> with request_scope(RequestParameters(query={"page": "2"})):
        ...     result = await paginator.paginate(query, Book)
    """
    token = current_request.set(params)
    try:
        yield params
    finally:
        current_request.reset(token)
