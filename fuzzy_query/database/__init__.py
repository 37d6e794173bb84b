# Path: fuzzy_query/database/__init__.py
"""
fuzzy_query Database Module

SQL-facing pieces of fuzzy_query.

This module provides:
- Dialect-aware SQL primitives used by the matchers
- Engine and session management
- Field to column resolution

FuzzyQuery lives in database.operations; it is not imported here because
the matchers import the primitives from this package.

Example:
    from fuzzy_query.database import initialize_engine, session_scope
    from fuzzy_query.database.operations import FuzzyQuery

    initialize_engine('sqlite:///users.db')

    with session_scope() as session:
        users = FuzzyQuery(select(User)).where_fuzzy('name', 'jd').scalars(session)
"""

from .functions import (
    escape_like,
    case_sensitive_like,
    position,
    text_length,
)
from .engine import (
    initialize_engine,
    get_engine,
    get_session,
    session_scope,
    reset_engine,
    get_database_type,
    get_connection_info,
)
from .column_resolver import qualified_key, resolve_column


__all__ = [
    # Primitives
    'escape_like',
    'case_sensitive_like',
    'position',
    'text_length',
    # Engine
    'initialize_engine',
    'get_engine',
    'get_session',
    'session_scope',
    'reset_engine',
    'get_database_type',
    'get_connection_info',
    # Resolution
    'qualified_key',
    'resolve_column',
]
