"""
Paginated execution of raw SELECT queries.

DataPaginator ties the pieces together: it resolves the pagination policy,
windows the base query, counts the items when full pagination is requested,
runs the windowed query and maps the rows.
"""

from typing import Any, Mapping, Sequence

from datapager.constants import COUNT_ALIAS
from datapager.context import get_request_parameters
from datapager.exceptions import NoRequestContextError, PaginationDisabledError
from datapager.logging import logger, set_log_context
from datapager.schemas.config import PaginationConfig, ResourceOverrides
from datapager.schemas.request import RequestParameters
from datapager.schemas.response import FullPage, PaginatedResult, PartialPage
from datapager.storage.pagination.count import build_count_query
from datapager.storage.pagination.policy import resolve, should_paginate
from datapager.storage.pagination.protocol import QueryExecutor, RowMapper
from datapager.storage.pagination.window import clamp_items_per_page, window


class DataPaginator:
    """
    Paginate raw SQL queries of collection operations.

    Full pagination runs two queries (count, then data); partial pagination
    runs only the data query and reports an unknown total. When both are
    enabled, partial pagination wins.

    Example:
        ```python
        from datapager.settings import app_settings

        config = PaginationConfig.from_settings(app_settings)

        async with async_session() as session:
            paginator = DataPaginator(
                config, SessionExecutor(session), ModelMapper()
            )
            with request_scope(RequestParameters(query={"page": "2"})):
                result = await paginator.paginate(
                    "SELECT * FROM author ORDER BY name", Author
                )
        ```
    """

    def __init__(
        self,
        config: PaginationConfig,
        executor: QueryExecutor,
        mapper: RowMapper,
    ):
        """
        Initialize the paginator.

        Args:
            config: Process-wide pagination defaults.
            executor: Runs the count and data queries.
            mapper: Turns data rows into resource instances.
        """
        self.config = config
        self.executor = executor
        self.mapper = mapper

    def should_paginate(
        self,
        overrides: ResourceOverrides | None = None,
        operation_name: str | None = None,
        params: RequestParameters | None = None,
    ) -> bool:
        """Check whether the current request should be paginated."""
        return should_paginate(self.config, overrides, params, operation_name)

    async def paginate(
        self,
        query: str,
        resource_class: type,
        operation_name: str | None = None,
        overrides: ResourceOverrides | None = None,
        params: RequestParameters | None = None,
    ) -> PaginatedResult:
        """
        Fetch one page of the query results.

        Args:
            query: Complete SELECT query without LIMIT/OFFSET.
            resource_class: Class of the paginated resource, handed to the
                mapper.
            operation_name: Operation being served.
            overrides: Pagination overrides of the resource.
            params: Client parameters. Defaults to the current request scope.

        Returns:
            FullPage with the total item count, or PartialPage.

        Raises:
            NoRequestContextError: If there are no request parameters.
            PaginationDisabledError: If the request is not paginated.
            InvalidParameterError: If the page or page size is invalid.
            NotASelectStatementError: If the query cannot be counted.
        """
        if params is None:
            params = get_request_parameters()
        if params is None:
            raise NoRequestContextError("Not in a request")

        set_log_context(
            resource=resource_class.__name__, operation=operation_name
        )

        decision = resolve(self.config, overrides, params, operation_name)
        if not decision.should_paginate:
            raise PaginationDisabledError(
                f"Pagination is disabled for {resource_class.__name__}"
            )

        decision = clamp_items_per_page(decision)
        limits = window(decision)
        logger.debug(
            f"Paginating {resource_class.__name__}: page={decision.page} "
            f"items_per_page={decision.items_per_page} "
            f"partial={decision.partial}"
        )

        total_items = None
        if not decision.partial:
            total_items = await self.count(query)

        data_query = f"{query} LIMIT {limits.limit} OFFSET {limits.offset}"
        rows = await self.executor.execute(data_query)
        items = self.mapper.map(rows, resource_class)

        if decision.partial:
            return PartialPage(
                items=items,
                page=decision.page,
                items_per_page=decision.items_per_page,
            )
        return FullPage(
            items=items,
            page=decision.page,
            items_per_page=decision.items_per_page,
            total_items=total_items,
        )

    async def count(self, query: str) -> float:
        """
        Count the items of a base query.

        Args:
            query: Complete SELECT query.

        Returns:
            The value of the count column in the first row, 0 when the
            count query returns no rows.

        Raises:
            NotASelectStatementError: If the query is not a single SELECT.
        """
        count_query = build_count_query(query, self.config.sql_dialect)
        logger.debug(f"Count query: {count_query}")

        rows: Sequence[Mapping[str, Any]] = await self.executor.execute(
            count_query
        )
        if not rows:
            return 0.0
        return float(rows[0][COUNT_ALIAS])


async def paginate(
    base_query: str,
    resource_class: type,
    operation_name: str | None,
    config: PaginationConfig,
    overrides: ResourceOverrides | None,
    params: RequestParameters | None,
    executor: QueryExecutor,
    mapper: RowMapper,
) -> PaginatedResult:
    """
    Fetch one page of a query in a single call.

    Facade over DataPaginator for callers that do not keep a paginator
    around. See DataPaginator.paginate for arguments and errors.
    """
    paginator = DataPaginator(config, executor, mapper)
    return await paginator.paginate(
        base_query,
        resource_class,
        operation_name=operation_name,
        overrides=overrides,
        params=params,
    )
