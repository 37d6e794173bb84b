# Path: fuzzy_query/process/matcher/scoring/score_builder.py
"""
Score Expression Builder

Combines the outputs of the active matchers for one search term into a
single relevance score and a single match condition.
"""

from typing import Any, Iterable

from sqlalchemy import false, literal, or_

from ....core.logger import get_process_logger
from ..matchers.base_matcher import BaseMatcher
from ..models.score_expression import ScoreExpression
from ..models.search_term import SearchTerm


class ScoreExpressionBuilder:
    """
    Builds the ScoreExpression for a search term.

    score     = (sum of matcher weighted scores) * term weight
    condition = OR of matcher conditions

    Matchers whose pattern is empty for the term are left out. When no
    matcher is left (or the term itself is empty) the score is the
    literal 0 and the condition is false, so the term matches nothing.

    Example:
        builder = ScoreExpressionBuilder()
        expression = builder.build(
            term=SearchTerm('name', 'jd'),
            column=users.c.name,
            matchers=registry.resolve(),
        )
        stmt = select(users).where(expression.condition)
    """

    def __init__(self):
        """Initialize score expression builder."""
        self.logger = get_process_logger('matcher.scoring.score_builder')

    def build(
        self,
        term: SearchTerm,
        column: Any,
        matchers: Iterable[BaseMatcher],
    ) -> ScoreExpression:
        """
        Build score and condition for one term against one column.

        Args:
            term: Normalized search term
            column: Column expression to match against
            matchers: Active matchers, in registration order

        Returns:
            ScoreExpression (never cached; build again for each use)
        """
        if term.is_empty:
            return self._vacuous(term, column)

        active = [matcher for matcher in matchers if matcher.pattern(term.term)]
        if not active:
            self.logger.debug(f"No matcher applies to {term.term!r} on {term.field!r}")
            return self._vacuous(term, column)

        total = active[0].weighted_score(column, term.term)
        for matcher in active[1:]:
            total = total + matcher.weighted_score(column, term.term)

        condition = or_(*(matcher.condition(column, term.term) for matcher in active))

        names = tuple(matcher.name for matcher in active)
        self.logger.debug(
            f"Built score for {term.field!r} ~ {term.term!r} "
            f"(weight {term.weight}) from {len(names)} matchers: {', '.join(names)}"
        )

        return ScoreExpression(
            term=term,
            column=column,
            score=total * term.weight,
            condition=condition,
            matcher_names=names,
        )

    def _vacuous(self, term: SearchTerm, column: Any) -> ScoreExpression:
        """Expression for a term that can never match."""
        return ScoreExpression(
            term=term,
            column=column,
            score=literal(0),
            condition=false(),
        )


__all__ = ['ScoreExpressionBuilder']
