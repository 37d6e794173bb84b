# Path: fuzzy_query/process/matcher/scoring/__init__.py
"""
Scoring Module

Components for turning matcher output into relevance:
- ScoreExpressionBuilder: Combines matchers into one score and condition
- RelevanceFilter: Minimum-relevance predicate
- RelevanceOrderer: ORDER BY relevance
"""

from .score_builder import ScoreExpressionBuilder
from .relevance import RelevanceFilter, RelevanceOrderer

__all__ = [
    'ScoreExpressionBuilder',
    'RelevanceFilter',
    'RelevanceOrderer',
]
