# Path: fuzzy_query/process/matcher/matchers/times_in_string_matcher.py
"""
Times In String Matcher

Scores values by how many times they contain the search term.
"""

from typing import Any

from sqlalchemy import func
from sqlalchemy.sql.elements import ColumnElement

from ....constants import MatcherName
from ....database.functions import position, text_length
from .base_matcher import BaseMatcher


class TimesInStringMatcher(BaseMatcher):
    """
    Occurrence count of the term, case-insensitive.

    Uses the position primitive rather than LIKE, so the pattern is the
    plain term and needs no escaping.

    Score: (length(value) - length(value with term removed)) / len(term),
    which is the number of non-overlapping occurrences.

    Example:
        'an' against "Banana" -> 2
    """

    @property
    def name(self) -> str:
        return MatcherName.TIMES_IN_STRING.value

    def pattern(self, term: str) -> str:
        return term

    def condition(self, column: Any, term: str) -> ColumnElement:
        return position(self.lowered(column), self.folded_pattern(term)) > 0

    def score(self, column: Any, term: str) -> ColumnElement:
        haystack = self.lowered(column)
        removed = text_length(haystack) - text_length(
            func.replace(haystack, self.folded_pattern(term), '')
        )
        return removed / len(self.pattern(term))


__all__ = ['TimesInStringMatcher']
