"""
Rewriting of SELECT statements into COUNT statements.

The rewrite works on the sqlglot syntax tree of the statement, never on its
text, so subqueries, aliases and nested expressions are left untouched.

Example:
    ```python
    from datapager.storage.pagination.count import build_count_query

    build_count_query(
        "SELECT a, b FROM t JOIN u ON t.id = u.t_id ORDER BY a"
    )
    # 'SELECT COUNT(1) AS _count FROM t JOIN u ON t.id = u.t_id GROUP BY a'
    ```
"""

import sqlglot
from sqlglot import exp
from sqlglot.errors import SqlglotError

from datapager.constants import COUNT_ALIAS, COUNT_SUBQUERY_ALIAS
from datapager.exceptions import NotASelectStatementError


def parse_statement(sql: str, dialect: str | None = None) -> exp.Select:
    """
    Parse a query that must be a single SELECT statement.

    Args:
        sql: Query text.
        dialect: sqlglot dialect name, None for the generic dialect.

    Returns:
        The parsed SELECT tree.

    Raises:
        NotASelectStatementError: If the text cannot be parsed, holds more
            than one statement, or is not a plain SELECT (UNION, INSERT...).
    """
    try:
        statements = [
            statement
            for statement in sqlglot.parse(sql, read=dialect)
            if statement is not None
        ]
    except SqlglotError as ex:
        raise NotASelectStatementError(
            f"No select statement found, can not count: {ex}"
        ) from ex

    if len(statements) != 1:
        raise NotASelectStatementError(
            f"Expected a single select statement, found {len(statements)}"
        )

    statement = statements[0]
    if not isinstance(statement, exp.Select):
        raise NotASelectStatementError(
            f"No select statement found, can not count "
            f"({type(statement).__name__} given)"
        )

    return statement


def _count_projection() -> exp.Expression:
    return exp.alias_(exp.Count(this=exp.Literal.number(1)), COUNT_ALIAS)


def _group_key(
    key: exp.Expression, projections: list[exp.Expression]
) -> exp.Expression | None:
    """
    Resolve an ORDER BY key against the projection it may refer to.

    Position numbers (ORDER BY 1) and bare projection aliases (ORDER BY n)
    only make sense next to the original SELECT list, so they are replaced
    by the projected expression itself.

    Returns:
        The expression to group on, or None when the key points at a star
        projection, an aggregate or a position that does not exist.
    """
    if isinstance(key, exp.Literal) and key.is_int:
        position = int(key.name)
        if not 1 <= position <= len(projections):
            return None
        target = projections[position - 1].unalias()
    elif isinstance(key, exp.Column) and not key.table:
        aliases = {
            projection.alias: projection.unalias()
            for projection in projections
            if isinstance(projection, exp.Alias)
        }
        target = aliases.get(key.name, key)
    else:
        target = key

    if target.is_star or target.find(exp.AggFunc):
        return None
    return target.copy()


def _count_subquery(select: exp.Select) -> exp.Select:
    # ORDER BY never changes cardinality; drop it inside the derived table
    inner = select.copy()
    inner.set("order", None)
    return exp.select(_count_projection()).from_(
        inner.subquery(COUNT_SUBQUERY_ALIAS)
    )


def to_count_statement(select: exp.Select) -> exp.Select:
    """
    Turn a SELECT statement into the matching COUNT statement.

    The projection becomes a single COUNT(1) aliased to COUNT_ALIAS. ORDER BY
    expressions, when present, become the GROUP BY list (in the same order)
    and the ORDER BY clause is dropped. Keys written as a projection alias
    or position are replaced by the projected expression. Without ORDER BY
    no grouping is added.

    A DISTINCT statement, or one ordered by a key that cannot be grouped on
    (a star projection, an aggregate), is counted as a derived table instead:
    SELECT COUNT(1) AS _count FROM (<statement>) AS _sub.

    Args:
        select: Parsed SELECT statement. It is not modified.

    Returns:
        A new COUNT statement tree.

    Raises:
        NotASelectStatementError: If select is not a SELECT tree.
    """
    if not isinstance(select, exp.Select):
        raise NotASelectStatementError(
            "No select statement found, can not count."
        )

    if select.args.get("distinct"):
        return _count_subquery(select)

    group_keys = []
    order = select.args.get("order")
    if order:
        for ordered in order.expressions:
            key = _group_key(ordered.this, select.expressions)
            if key is None:
                return _count_subquery(select)
            group_keys.append(key)

    statement = select.copy()
    statement.set("expressions", [_count_projection()])
    if group_keys:
        statement.set("group", exp.Group(expressions=group_keys))
        statement.set("order", None)

    return statement



def build_count_query(sql: str, dialect: str | None = None) -> str:
    """
    Build the COUNT query of a base SELECT query.

    Args:
        sql: Base query text.
        dialect: sqlglot dialect used to parse and serialize.

    Returns:
        COUNT query text.

    Raises:
        NotASelectStatementError: If the base query is not a single SELECT.
    """
    return to_count_statement(parse_statement(sql, dialect)).sql(
        dialect=dialect
    )
