# Path: fuzzy_query/process/matcher/matchers/consecutive_characters_matcher.py
"""
Consecutive Characters Matcher

Matches values that contain every character of the search term in order,
with anything in between. The score grows with the share of the value
the term covers, so "jd" scores higher against "J Doe" than against
"John Doe".
"""

from typing import Any

from sqlalchemy import func, literal
from sqlalchemy.sql.elements import ColumnElement

from ....constants import LIKE_WILDCARD_ANY, MatcherName
from ....database.functions import escape_like, text_length
from .base_matcher import BaseMatcher


class ConsecutiveCharactersMatcher(BaseMatcher):
    """
    Term characters appear in order anywhere in the value.

    Score: len(term) / length of the value without spaces. Only evaluated
    when the condition holds, in which case the value has at least one
    non-space character, so the division is safe and the score positive.

    Example:
        'jad' -> pattern '%j%a%d%' matches "Jane Doe" (score 3/7)
    """

    @property
    def name(self) -> str:
        return MatcherName.CONSECUTIVE_CHARACTERS.value

    def pattern(self, term: str) -> str:
        characters = [escape_like(char) for char in term if not char.isspace()]
        if not characters:
            return ''
        return LIKE_WILDCARD_ANY + LIKE_WILDCARD_ANY.join(characters) + LIKE_WILDCARD_ANY

    def score(self, column: Any, term: str) -> ColumnElement:
        return literal(float(len(term))) / text_length(func.replace(column, ' ', ''))


__all__ = ['ConsecutiveCharactersMatcher']
