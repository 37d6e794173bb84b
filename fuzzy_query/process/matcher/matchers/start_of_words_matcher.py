# Path: fuzzy_query/process/matcher/matchers/start_of_words_matcher.py
"""
Start Of Words Matcher

Matches values whose consecutive words start with the words of the
search term, e.g. "joh do" for "John Doe".
"""

from ....constants import LIKE_WILDCARD_ANY, MatcherName
from ....database.functions import escape_like
from .base_matcher import BaseMatcher


class StartOfWordsMatcher(BaseMatcher):
    """
    Each term word begins a word of the value, in order.

    Example:
        'joh do' -> pattern 'joh% do%' matches "John Doe"
    """

    @property
    def name(self) -> str:
        return MatcherName.START_OF_WORDS.value

    def pattern(self, term: str) -> str:
        words = [escape_like(word) for word in term.split()]
        if not words:
            return ''
        return f'{LIKE_WILDCARD_ANY} '.join(words) + LIKE_WILDCARD_ANY


__all__ = ['StartOfWordsMatcher']
