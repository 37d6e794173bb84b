# Path: fuzzy_query/process/matcher/matchers/exact_matcher.py
"""
Exact Matcher

Matches values that equal the search term, ignoring case.
"""

from typing import Any

from sqlalchemy.sql.elements import ColumnElement

from ....constants import MatcherName
from .base_matcher import BaseMatcher


class ExactMatcher(BaseMatcher):
    """
    Whole-value equality, case-insensitive.

    Example:
        'john doe' matches "John Doe" but not "John Doe Jr"
    """

    @property
    def name(self) -> str:
        return MatcherName.EXACT.value

    def pattern(self, term: str) -> str:
        return term

    def condition(self, column: Any, term: str) -> ColumnElement:
        return self.lowered(column) == self.folded_pattern(term)


__all__ = ['ExactMatcher']
