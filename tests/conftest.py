"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for pagination configuration,
request parameters and mocked query executors.
"""

from unittest.mock import AsyncMock

import pytest
from pydantic import BaseModel


class Book(BaseModel):
    """Resource used by the paginator tests."""

    id: int
    title: str


@pytest.fixture
def book_class():
    """
    Provides the Book resource class.

    Returns:
        type: Pydantic model used as paginated resource.
    """
    return Book


@pytest.fixture
def config():
    """
    Provides a pagination configuration with client overrides allowed.

    Returns:
        PaginationConfig: Defaults of 10 items per page, full pagination.
    """
    from datapager.schemas.config import PaginationConfig

    return PaginationConfig(
        enabled=True,
        client_enabled=True,
        items_per_page=10,
        client_items_per_page=True,
        partial=False,
        client_partial=True,
    )


@pytest.fixture
def book_rows():
    """
    Provides raw rows as returned by a query executor.

    Returns:
        list[dict]: Three book rows.
    """
    return [
        {"id": 1, "title": "Dune"},
        {"id": 2, "title": "Hyperion"},
        {"id": 3, "title": "Solaris"},
    ]


@pytest.fixture
def mock_executor():
    """
    Provides a mocked query executor.

    Tests configure execute.side_effect with the rows of each query.

    Returns:
        AsyncMock: Executor with an async execute method.
    """
    executor = AsyncMock()
    executor.execute = AsyncMock()
    return executor
