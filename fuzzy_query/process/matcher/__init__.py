# Path: fuzzy_query/process/matcher/__init__.py
"""
Matching Engine - Fuzzy Relevance Scoring

Turns a free-text term into SQL: a boolean "is a match" condition and a
numeric relevance score, both computed by the database.

Core Components:
    - Matchers: One strategy each (exact, acronym, in-string, ...)
    - MatcherRegistry: Which matchers exist and how much each one counts
    - ScoreExpressionBuilder: One term against one column
    - ConditionComposer: Many terms joined by AND / OR
    - RelevanceFilter / RelevanceOrderer: Threshold and ORDER BY

Key Principle:
    Scoring is a static, deterministic sum of matcher outputs. Nothing is
    learned and nothing is evaluated in Python.

Example:
    from fuzzy_query.process.matcher import ConditionComposer

    composed = ConditionComposer().where_fuzzy(users.c.name, 'jd').build()
    stmt = select(users).where(composed.condition).order_by(composed.score.desc())
"""

from .engine import (
    MatcherRegistry,
    get_default_registry,
    reset_default_registry,
    ComposedCondition,
    ConditionComposer,
)
from .matchers import BaseMatcher, BUILTIN_MATCHERS
from .models import (
    FuzzyQueryError,
    InvalidWeightError,
    EmptyConditionError,
    UnknownFuzzyFieldError,
    SearchTerm,
    ScoreExpression,
    ConditionLeaf,
    ConditionGroup,
    RelevanceSpec,
)
from .scoring import ScoreExpressionBuilder, RelevanceFilter, RelevanceOrderer

__all__ = [
    'MatcherRegistry',
    'get_default_registry',
    'reset_default_registry',
    'ComposedCondition',
    'ConditionComposer',
    'BaseMatcher',
    'BUILTIN_MATCHERS',
    'FuzzyQueryError',
    'InvalidWeightError',
    'EmptyConditionError',
    'UnknownFuzzyFieldError',
    'SearchTerm',
    'ScoreExpression',
    'ConditionLeaf',
    'ConditionGroup',
    'RelevanceSpec',
    'ScoreExpressionBuilder',
    'RelevanceFilter',
    'RelevanceOrderer',
]
