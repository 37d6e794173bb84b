# Path: fuzzy_query/process/matcher/models/score_expression.py
"""
Score Expression Model

The pair of SQL expressions produced for one SearchTerm: a numeric
relevance score and the boolean "is a match" condition.
"""

from dataclasses import dataclass
from typing import Any

from sqlalchemy.sql.elements import ColumnElement

from .search_term import SearchTerm


@dataclass(frozen=True, eq=False)
class ScoreExpression:
    """
    Relevance score and match condition for one search term.

    Both expressions are built from the same matcher subset, so the
    condition holds exactly when the score is positive. The score can be
    used as a WHERE/ORDER BY/projected value and the condition as a WHERE
    predicate without either being recomputed.

    Attributes:
        term: The search term this expression was built for
        column: Column expression the term was matched against
        score: Numeric SQL expression (0 when nothing matches)
        condition: Boolean SQL expression
        matcher_names: Names of the matchers that took part, in order
    """
    term: SearchTerm
    column: Any
    score: ColumnElement
    condition: ColumnElement
    matcher_names: tuple[str, ...] = ()

    @property
    def is_vacuous(self) -> bool:
        """True when no matcher took part (score 0, condition false)."""
        return not self.matcher_names

    def to_dict(self) -> dict:
        """Convert to dictionary (expressions rendered as SQL text)."""
        return {
            'term': self.term.to_dict(),
            'column': str(self.column),
            'score': str(self.score),
            'condition': str(self.condition),
            'matcher_names': list(self.matcher_names),
        }


__all__ = ['ScoreExpression']
