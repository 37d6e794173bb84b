# Path: fuzzy_query/process/matcher/models/__init__.py
"""
Matcher Models

Data structures shared by the matching engine:
- SearchTerm: One fuzzy search request
- ScoreExpression: Score and condition built for a SearchTerm
- ConditionLeaf / ConditionGroup: Boolean condition tree
- RelevanceSpec: Relevance filtering and ordering options
- Errors: FuzzyQueryError hierarchy
"""

from .errors import (
    FuzzyQueryError,
    InvalidWeightError,
    EmptyConditionError,
    UnknownFuzzyFieldError,
)
from .search_term import SearchTerm, normalize_term, validate_weight
from .score_expression import ScoreExpression
from .condition_node import ConditionLeaf, ConditionGroup, ConditionNode
from .relevance_spec import RelevanceSpec

__all__ = [
    'FuzzyQueryError',
    'InvalidWeightError',
    'EmptyConditionError',
    'UnknownFuzzyFieldError',
    'SearchTerm',
    'normalize_term',
    'validate_weight',
    'ScoreExpression',
    'ConditionLeaf',
    'ConditionGroup',
    'ConditionNode',
    'RelevanceSpec',
]
