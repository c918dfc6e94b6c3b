"""
Tests for the SQLAlchemy executor and the pydantic row mapper.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.sql.elements import TextClause
from sqlmodel import Field, SQLModel

from datapager.storage.pagination.executor import ModelMapper, SessionExecutor
from datapager.storage.pagination.protocol import QueryExecutor, RowMapper


class ExecutorTestAuthor(SQLModel, table=True):
    """Table model for mapper tests."""

    __tablename__ = "executor_test_author"

    id: int = Field(default=None, primary_key=True)
    name: str


class TestSessionExecutor:
    """Tests for SessionExecutor."""

    @pytest.mark.asyncio
    async def test_execute_returns_mappings(self):
        """Test raw SQL is wrapped in text() and rows come back as mappings."""
        rows = [{"id": 1, "name": "Ursula"}]
        mock_result = MagicMock()
        mock_result.mappings.return_value.all.return_value = rows

        mock_session = AsyncMock()
        mock_session.execute = AsyncMock(return_value=mock_result)

        executor = SessionExecutor(mock_session)
        result = await executor.execute("SELECT id, name FROM author")

        assert result == rows
        statement = mock_session.execute.await_args.args[0]
        assert isinstance(statement, TextClause)
        assert statement.text == "SELECT id, name FROM author"

    @pytest.mark.asyncio
    async def test_execute_propagates_errors(self):
        """Test database errors are not swallowed."""
        mock_session = AsyncMock()
        mock_session.execute = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError, match="boom"):
            await SessionExecutor(mock_session).execute("SELECT 1")

    def test_satisfies_protocol(self):
        """Test SessionExecutor is a QueryExecutor."""
        assert isinstance(SessionExecutor(AsyncMock()), QueryExecutor)


class TestModelMapper:
    """Tests for ModelMapper."""

    def test_maps_rows_to_sqlmodel(self):
        """Test rows become table model instances, in order."""
        rows = [{"id": 2, "name": "Iain"}, {"id": 1, "name": "Ursula"}]

        authors = ModelMapper().map(rows, ExecutorTestAuthor)

        assert [a.id for a in authors] == [2, 1]
        assert all(isinstance(a, ExecutorTestAuthor) for a in authors)

    def test_maps_rows_to_pydantic(self, book_class):
        """Test plain pydantic models are supported."""
        books = ModelMapper().map([{"id": 1, "title": "Dune"}], book_class)

        assert books[0].title == "Dune"

    def test_empty(self, book_class):
        """Test no rows map to no items."""
        assert ModelMapper().map([], book_class) == []

    def test_satisfies_protocol(self):
        """Test ModelMapper is a RowMapper."""
        assert isinstance(ModelMapper(), RowMapper)
