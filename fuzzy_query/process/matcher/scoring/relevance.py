# Path: fuzzy_query/process/matcher/scoring/relevance.py
"""
Relevance Filter and Orderer

Attach relevance-based clauses to a statement:
- RelevanceFilter: keep only rows whose score reaches a threshold
- RelevanceOrderer: sort rows by one or more scores, highest first
"""

from typing import Any, Iterable

from sqlalchemy import Select

from ....core.logger import get_process_logger


class RelevanceFilter:
    """
    Adds a minimum-relevance predicate to a statement.

    The predicate is a plain WHERE on the score expression. Nothing is
    aggregated, so it selects the same rows a HAVING clause would while
    staying portable to SQLite releases that reject HAVING without
    GROUP BY.

    Example:
        stmt = RelevanceFilter().apply(stmt, composed.score, 70)
    """

    def __init__(self):
        """Initialize relevance filter."""
        self.logger = get_process_logger('matcher.scoring.relevance_filter')

    def apply(self, statement: Select, score: Any, threshold: float) -> Select:
        """
        Keep rows whose score is at least threshold.

        Args:
            statement: Statement to filter
            score: Numeric score expression
            threshold: Minimum score (inclusive)

        Returns:
            New statement with the predicate added
        """
        self.logger.debug(f"Filtering on relevance >= {threshold}")
        return statement.where(score >= threshold)


class RelevanceOrderer:
    """
    Appends descending ORDER BY terms for score expressions.

    Scores are applied in sequence order, so the first one is the primary
    sort key. Existing ORDER BY terms on the statement stay in front.
    """

    def __init__(self):
        """Initialize relevance orderer."""
        self.logger = get_process_logger('matcher.scoring.relevance_orderer')

    def apply(self, statement: Select, scores: Iterable[Any]) -> Select:
        """
        Order by each score, descending.

        Args:
            statement: Statement to order
            scores: Score expressions, primary key first

        Returns:
            New statement with the ORDER BY terms added
        """
        scores = list(scores)
        if not scores:
            return statement

        self.logger.debug(f"Ordering by {len(scores)} relevance expressions")
        return statement.order_by(*(score.desc() for score in scores))


__all__ = ['RelevanceFilter', 'RelevanceOrderer']
