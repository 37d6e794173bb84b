# Path: fuzzy_query/process/matcher/matchers/in_string_matcher.py
"""
In String Matcher

Matches values that contain the search term anywhere.
"""

from ....constants import LIKE_WILDCARD_ANY, MatcherName
from ....database.functions import escape_like
from .base_matcher import BaseMatcher


class InStringMatcher(BaseMatcher):
    """
    Substring match, case-insensitive.

    Example:
        'ed' -> pattern '%ed%' matches "Fred Doe"
    """

    @property
    def name(self) -> str:
        return MatcherName.IN_STRING.value

    def pattern(self, term: str) -> str:
        if not term:
            return ''
        return LIKE_WILDCARD_ANY + escape_like(term) + LIKE_WILDCARD_ANY


__all__ = ['InStringMatcher']
