"""
Middleware opening the pagination request scope.

Every HTTP request runs inside datapager.context.request_scope, so the
paginator can read the client's pagination parameters without them being
threaded through every call.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from datapager.constants import PAGINATION_ATTRIBUTES_SCOPE_KEY
from datapager.context import request_scope
from datapager.logging import clear_log_context
from datapager.schemas.request import RequestParameters


def request_parameters(request: Request) -> RequestParameters:
    """
    Extract the pagination parameters of a request.

    Args:
        request: The incoming HTTP request.

    Returns:
        Parameters built from the query string and, when an earlier layer
        stored one, the pagination attribute bag of the ASGI scope.
    """
    attributes = request.scope.get(PAGINATION_ATTRIBUTES_SCOPE_KEY)
    return RequestParameters(
        query=dict(request.query_params),
        pagination_attributes=dict(attributes)
        if attributes is not None
        else None,
    )


class PaginationContextMiddleware(BaseHTTPMiddleware):  # type: ignore[misc]
    """
    Middleware to run each request inside a pagination request scope.

    This middleware:
    - Builds RequestParameters from the query string and scope bag
    - Opens the request scope for the downstream handlers
    - Clears the log context after the request completes
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process request inside a pagination request scope.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            Response from the endpoint.
        """
        try:
            with request_scope(request_parameters(request)):
                return await call_next(request)
        finally:
            clear_log_context()
