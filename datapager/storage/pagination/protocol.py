"""
Protocol definitions for the collaborators of the paginator.

Uses Python's structural subtyping (Protocol) so any object with the right
methods can run queries or map rows, without inheriting from a base class.
"""

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class QueryExecutor(Protocol):
    """
    Protocol for running raw SQL.

    Connection pooling, transactions, retries and timeouts all belong to
    the implementation; the paginator propagates its errors unmodified.

    Example:
        ```python
        class ListExecutor:
            async def execute(self, sql: str) -> list[dict[str, Any]]:
                return [{"id": 1}]


        executor: QueryExecutor = ListExecutor()
        ```
    """

    async def execute(self, sql: str) -> Sequence[Mapping[str, Any]]:
        """
        Run a query.

        Args:
            sql: Complete query text.

        Returns:
            The result rows as column name to value mappings.
        """
        ...


@runtime_checkable
class RowMapper(Protocol):
    """Protocol for turning raw rows into domain objects."""

    def map(
        self, rows: Sequence[Mapping[str, Any]], resource_class: type
    ) -> list[Any]:
        """
        Map raw rows to instances of resource_class.

        Args:
            rows: Rows returned by the executor.
            resource_class: Class of the paginated resource.

        Returns:
            Domain objects, in row order.
        """
        ...
