# Path: fuzzy_query/process/matcher/matchers/start_of_string_matcher.py
"""
Start Of String Matcher

Matches values that begin with the search term.
"""

from ....constants import LIKE_WILDCARD_ANY, MatcherName
from ....database.functions import escape_like
from .base_matcher import BaseMatcher


class StartOfStringMatcher(BaseMatcher):
    """
    Prefix match, case-insensitive.

    Example:
        'joh' -> pattern 'joh%' matches "John Doe"
    """

    @property
    def name(self) -> str:
        return MatcherName.START_OF_STRING.value

    def pattern(self, term: str) -> str:
        if not term:
            return ''
        return escape_like(term) + LIKE_WILDCARD_ANY


__all__ = ['StartOfStringMatcher']
