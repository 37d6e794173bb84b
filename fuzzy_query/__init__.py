# Path: fuzzy_query/__init__.py
"""
fuzzy_query - Relevance-Ranked Fuzzy Search for SQLAlchemy

Adds approximate text search to select() statements. Several matchers
(exact, acronym, consecutive characters, ...) each contribute a weighted
score; rows are filtered on "any matcher matched" and can be ordered or
thresholded by the total.

Example:
    from sqlalchemy import select
    from fuzzy_query import FuzzyQuery

    query = (
        FuzzyQuery(select(User))
        .where_fuzzy('name', 'jd')
        .where_fuzzy('country', 'uk', weight=2)
    )
    users = query.scalars(session)
"""

from .database.operations import FuzzyQuery, Page
from .process.matcher import (
    MatcherRegistry,
    get_default_registry,
    reset_default_registry,
    ConditionComposer,
    ComposedCondition,
    BaseMatcher,
    SearchTerm,
    ScoreExpression,
    ScoreExpressionBuilder,
    RelevanceFilter,
    RelevanceOrderer,
    FuzzyQueryError,
    InvalidWeightError,
    EmptyConditionError,
    UnknownFuzzyFieldError,
)

__version__ = '1.0.0'

__all__ = [
    'FuzzyQuery',
    'Page',
    'MatcherRegistry',
    'get_default_registry',
    'reset_default_registry',
    'ConditionComposer',
    'ComposedCondition',
    'BaseMatcher',
    'SearchTerm',
    'ScoreExpression',
    'ScoreExpressionBuilder',
    'RelevanceFilter',
    'RelevanceOrderer',
    'FuzzyQueryError',
    'InvalidWeightError',
    'EmptyConditionError',
    'UnknownFuzzyFieldError',
]
