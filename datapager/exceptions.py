"""
Custom exception classes for pagination.

This module defines the exceptions raised while resolving, validating and
executing a paginated query. Each exception carries an http_status attribute
so HTTP surfaces can translate it without knowing the concrete type.

Failures raised by the injected query executor are never wrapped here; they
reach the caller unmodified.
"""


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for REST API responses.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class PaginationError(AppException):
    """Base class for errors raised by the pagination core."""


class InvalidParameterError(PaginationError):
    """
    Pagination parameters are invalid.

    Raised for a negative items-per-page value, a page below 1, or a page
    above 1 when items-per-page is 0. This is a client input error.

    HTTP Status: 400 Bad Request
    """

    http_status = 400


class NoRequestContextError(PaginationError):
    """
    Pagination was requested outside of a request scope.

    This is an integration error: the caller must run inside
    datapager.context.request_scope (or the PaginationContextMiddleware)
    or pass the request parameters explicitly.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500


class NotASelectStatementError(PaginationError):
    """
    The base query cannot be rewritten into a count query.

    Raised when the query is not a single SELECT statement (UNION, INSERT,
    multi-statement scripts, unparsable text).

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500


class PaginationDisabledError(PaginationError):
    """
    Pagination is disabled for this request.

    Callers should check should_paginate() before paginating.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500
