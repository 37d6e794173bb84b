# Path: fuzzy_query/database/operations/__init__.py
"""
Database Operations for fuzzy_query.

Provides the fuzzy search wrapper around SQLAlchemy statements:
- FuzzyQuery: where_fuzzy / order_by_fuzzy / with_minimum_relevance
- Page: Result of FuzzyQuery.paginate
"""

from .fuzzy_query import FuzzyQuery, Page


__all__ = [
    'FuzzyQuery',
    'Page',
]
