# Path: fuzzy_query/process/matcher/models/condition_node.py
"""
Condition Tree Models

Immutable boolean tree of fuzzy conditions:
- ConditionLeaf: one search term with its score expression
- ConditionGroup: AND / OR over child nodes

Trees are built bottom-up by the ConditionComposer and discarded once they
have been translated into SQL.
"""

from dataclasses import dataclass
from typing import Iterator, Union

from ....constants import BooleanOperator
from .score_expression import ScoreExpression
from .search_term import SearchTerm


@dataclass(frozen=True, eq=False)
class ConditionLeaf:
    """
    A single fuzzy condition.

    Attributes:
        expression: Score/condition pair for the term
        enable_ordering: Whether this leaf asks for relevance ordering
    """
    expression: ScoreExpression
    enable_ordering: bool = True

    @property
    def term(self) -> SearchTerm:
        """Search term of this leaf."""
        return self.expression.term

    def leaves(self) -> Iterator['ConditionLeaf']:
        """Yield this leaf."""
        yield self

    def depth(self) -> int:
        """Leaves have depth 0."""
        return 0


@dataclass(frozen=True, eq=False)
class ConditionGroup:
    """
    AND / OR combination of child nodes.

    Attributes:
        operator: How children are combined
        children: Child nodes in caller order
    """
    operator: BooleanOperator
    children: tuple['ConditionNode', ...]

    def leaves(self) -> Iterator[ConditionLeaf]:
        """Yield every leaf reachable from this group, left to right."""
        for child in self.children:
            yield from child.leaves()

    def depth(self) -> int:
        """Nesting depth of the deepest leaf."""
        return 1 + max((child.depth() for child in self.children), default=0)


ConditionNode = Union[ConditionLeaf, ConditionGroup]


__all__ = ['ConditionLeaf', 'ConditionGroup', 'ConditionNode']
