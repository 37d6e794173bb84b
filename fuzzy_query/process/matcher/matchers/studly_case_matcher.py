# Path: fuzzy_query/process/matcher/matchers/studly_case_matcher.py
"""
Studly Case Matcher

Matches StudlyCase values (no spaces) whose word-initial capitals spell
the search term, e.g. "jad" for "JustADemo".
"""

from typing import Any

from sqlalchemy import and_, func
from sqlalchemy.sql.elements import ColumnElement

from ....constants import LIKE_WILDCARD_ANY, MatcherName
from ....database.functions import case_sensitive_like, text_length
from .base_matcher import BaseMatcher


class StudlyCaseMatcher(BaseMatcher):
    """
    Upper-cased term characters appear in order, matched case-sensitively.

    Only values without inner spaces qualify. Non-alphanumeric term
    characters are dropped, so the pattern only ever holds letters,
    digits and the '%' wildcard.

    Example:
        'jad' -> pattern 'J%A%D%' matches "JustADemo" but not "Jane Doe"
    """

    @property
    def name(self) -> str:
        return MatcherName.STUDLY_CASE.value

    def pattern(self, term: str) -> str:
        characters = [char.upper() for char in term if char.isalnum()]
        if not characters:
            return ''
        return LIKE_WILDCARD_ANY.join(characters) + LIKE_WILDCARD_ANY

    def condition(self, column: Any, term: str) -> ColumnElement:
        trimmed = func.trim(column)
        return and_(
            text_length(trimmed) == text_length(func.replace(trimmed, ' ', '')),
            case_sensitive_like(column, self.pattern(term)),
        )


__all__ = ['StudlyCaseMatcher']
