"""
Pagination of raw SQL queries.

This package resolves the pagination policy of a request, windows the base
query, rewrites it into a count query and assembles the paginated result.

Example:
    Using the facade function:
    ```python
    from datapager.storage.pagination import paginate

    result = await paginate(
        "SELECT * FROM author ORDER BY name",
        Author,
        "get",
        config,
        overrides,
        RequestParameters(query={"page": "2"}),
        SessionExecutor(session),
        ModelMapper(),
    )
    ```

    Using the paginator directly:
    ```python
    from datapager.storage.pagination import DataPaginator

    paginator = DataPaginator(config, SessionExecutor(session), ModelMapper())
    if paginator.should_paginate(overrides, "get"):
        result = await paginator.paginate(query, Author, "get", overrides)
    ```
"""

from datapager.storage.pagination.count import (
    build_count_query,
    parse_statement,
    to_count_statement,
)
from datapager.storage.pagination.executor import ModelMapper, SessionExecutor
from datapager.storage.pagination.paginator import DataPaginator, paginate
from datapager.storage.pagination.policy import resolve, should_paginate
from datapager.storage.pagination.protocol import QueryExecutor, RowMapper
from datapager.storage.pagination.window import clamp_items_per_page, window

__all__ = [
    "DataPaginator",
    "paginate",
    "resolve",
    "should_paginate",
    "clamp_items_per_page",
    "window",
    "parse_statement",
    "to_count_statement",
    "build_count_query",
    "QueryExecutor",
    "RowMapper",
    "SessionExecutor",
    "ModelMapper",
]
