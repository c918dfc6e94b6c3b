"""
SQLAlchemy and pydantic adapters for the paginator collaborators.
"""

from typing import Any, Mapping, Sequence, Type

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from datapager.schemas.generic_typing import GenericModelType


class SessionExecutor:
    """
    Run raw SQL on an SQLAlchemy (or SQLModel) async session.

    The session is owned by the caller, who also commits or rolls back.

    Example:
        ```python
        async with async_session() as session:
            executor = SessionExecutor(session)
            rows = await executor.execute("SELECT id, name FROM author")
        ```
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def execute(self, sql: str) -> Sequence[Mapping[str, Any]]:
        """
        Execute the query and return its rows as mappings.

        Raises:
            SQLAlchemyError: If the database query fails.
        """
        result = await self.session.execute(text(sql))
        return result.mappings().all()


class ModelMapper:
    """Map rows to pydantic (or SQLModel) instances with model_validate."""

    def map(
        self,
        rows: Sequence[Mapping[str, Any]],
        resource_class: Type[GenericModelType],
    ) -> list[GenericModelType]:
        return [resource_class.model_validate(dict(row)) for row in rows]
