# Path: fuzzy_query/process/matcher/matchers/acronym_matcher.py
"""
Acronym Matcher

Matches values whose consecutive words start with the characters of the
search term, e.g. "jd" for "John Doe" or "uk" for "United Kingdom".
"""

from ....constants import LIKE_WILDCARD_ANY, MatcherName
from ....database.functions import escape_like
from .base_matcher import BaseMatcher


class AcronymMatcher(BaseMatcher):
    """
    Each term character begins a word, in order.

    Whitespace in the term is ignored. The first character must begin the
    value itself.

    Example:
        'jd' -> pattern 'j% d%' matches "John Doe" but not "Fred Doe"
    """

    @property
    def name(self) -> str:
        return MatcherName.ACRONYM.value

    def pattern(self, term: str) -> str:
        characters = [escape_like(char) for char in term if not char.isspace()]
        if not characters:
            return ''
        return f'{LIKE_WILDCARD_ANY} '.join(characters) + LIKE_WILDCARD_ANY


__all__ = ['AcronymMatcher']
