# Path: fuzzy_query/database/column_resolver.py
"""
Column Resolver

Maps the fields callers pass to where_fuzzy / order_by_fuzzy onto column
expressions of a statement, together with a qualified key
("table.column") that identifies the field across calls.
"""

from typing import Any, Optional

from sqlalchemy import Select, literal_column

from ..core.logger import get_input_logger


logger = get_input_logger('database.column_resolver')


def qualified_key(column: Any) -> str:
    """
    Qualified name of a column expression.

    Args:
        column: Column, labelled expression or ORM attribute

    Returns:
        'table.column' when the column belongs to a named table,
        otherwise its bare name, otherwise its SQL text
    """
    if hasattr(column, '__clause_element__'):
        column = column.__clause_element__()

    name = getattr(column, 'name', None)
    table_name = getattr(getattr(column, 'table', None), 'name', None)

    if table_name and name:
        return f"{table_name}.{name}"
    if name:
        return str(name)
    return str(column)


def _find_in_froms(statement: Select, table_name: Optional[str], column_name: str) -> Optional[Any]:
    """Look a column up in the FROM clauses of a statement."""
    for from_clause in statement.get_final_froms():
        if table_name is not None and getattr(from_clause, 'name', None) != table_name:
            continue
        columns = getattr(from_clause, 'c', None)
        if columns is not None and column_name in columns:
            return columns[column_name]
    return None


def resolve_column(statement: Select, field: Any) -> tuple[str, Any]:
    """
    Resolve a field against a statement.

    - Column objects and ORM attributes are used as they are.
    - 'table.column' and 'column' strings are looked up in the FROM
      clauses of the statement (first match wins for a bare name).
    - Anything else becomes literal_column(field); the database reports
      unknown names when the statement runs.

    Args:
        statement: Statement the field belongs to
        field: Field name or column expression

    Returns:
        Tuple of (qualified key, column expression)
    """
    if not isinstance(field, str):
        return qualified_key(field), field

    table_name, _, column_name = field.rpartition('.')
    column = _find_in_froms(statement, table_name or None, column_name)
    if column is not None:
        return qualified_key(column), column

    logger.debug(f"Field {field!r} not found in statement; using it as a literal column")
    return field, literal_column(field)


__all__ = ['qualified_key', 'resolve_column']
