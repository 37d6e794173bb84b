# Path: fuzzy_query/process/matcher/matchers/base_matcher.py
"""
Base Matcher

Abstract base class for all matching strategies.
Defines the interface that all matchers must implement.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from sqlalchemy import case, func, literal
from sqlalchemy.sql.elements import ColumnElement

from ....constants import DEFAULT_MATCHER_WEIGHTS, LIKE_ESCAPE_CHAR
from ....core.logger import get_process_logger
from ..models.search_term import validate_weight


class BaseMatcher(ABC):
    """
    Abstract base class for matchers.

    A matcher is a pure strategy: given a column expression and a search
    term, it produces a boolean SQL condition and a non-negative numeric
    SQL score. It never touches the database itself.

    Each matcher handles one kind of resemblance:
    - ExactMatcher: Whole value equals the term
    - StartOfStringMatcher: Value starts with the term
    - AcronymMatcher: Term characters start consecutive words
    - ConsecutiveCharactersMatcher: Term characters appear in order
    - StartOfWordsMatcher: Term words start consecutive words
    - StudlyCaseMatcher: Term characters match capitals of a StudlyCase value
    - InStringMatcher: Value contains the term
    - TimesInStringMatcher: How often the value contains the term

    Subclasses must implement name and pattern(). Patterns keep the case
    of the term; case folding happens in SQL on both sides. The default
    condition() is a case-insensitive LIKE against the pattern and the default score()
    is 1, which suits every indicator-style matcher.

    Contract:
    - pattern() is total and returns '' when the term gives it nothing to
      match on; a matcher with an empty pattern takes no part in a query.
    - score() is > 0 exactly when condition() holds.

    Example:
        matcher = InStringMatcher()
        condition = matcher.condition(users.c.name, 'doe')
        contribution = matcher.weighted_score(users.c.name, 'doe')
    """

    def __init__(self, base_weight: Optional[float] = None):
        """
        Initialize matcher.

        Args:
            base_weight: Weight multiplied into this matcher's score.
                         Defaults to the built-in weight for its name.
        """
        if base_weight is None:
            base_weight = DEFAULT_MATCHER_WEIGHTS[self.name]
        self.base_weight = validate_weight(base_weight, subject=f"matcher {self.name!r}")
        self.logger = get_process_logger(f'matcher.matchers.{self.name}')

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the unique name of this matcher."""
        pass

    @abstractmethod
    def pattern(self, term: str) -> str:
        """
        Build the match pattern for a search term.

        Args:
            term: Normalized search term

        Returns:
            Pattern string, or '' when the term cannot match
        """
        pass

    def condition(self, column: Any, term: str) -> ColumnElement:
        """
        Boolean expression that holds when the column matches the term.

        Args:
            column: Column expression to match against
            term: Normalized search term

        Returns:
            Boolean SQL expression
        """
        return self.lowered(column).like(self.folded_pattern(term), escape=LIKE_ESCAPE_CHAR)

    def score(self, column: Any, term: str) -> ColumnElement:
        """
        Unweighted score when the condition holds.

        Only evaluated for rows where condition() is true.

        Args:
            column: Column expression to match against
            term: Normalized search term

        Returns:
            Positive numeric SQL expression
        """
        return literal(1)

    def weighted_score(self, column: Any, term: str) -> ColumnElement:
        """
        Score contribution of this matcher, zero when it does not match.

        Args:
            column: Column expression to match against
            term: Normalized search term

        Returns:
            Numeric SQL expression: score * base_weight, or 0
        """
        return case(
            (self.condition(column, term), self.score(column, term)),
            else_=0,
        ) * self.base_weight

    def with_weight(self, base_weight: float) -> 'BaseMatcher':
        """Return a copy of this matcher with another base weight."""
        return type(self)(base_weight=base_weight)

    @staticmethod
    def lowered(column: Any) -> ColumnElement:
        """Lower-cased column expression for case-insensitive matching."""
        return func.lower(column)

    def folded_pattern(self, term: str) -> ColumnElement:
        """
        Pattern lower-cased by the database, like the column it is matched to.

        SQLite lower() only folds ASCII, so the term must not be folded in
        Python.
        """
        return self.lowered(literal(self.pattern(term)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_weight={self.base_weight!r})"


__all__ = ['BaseMatcher']
