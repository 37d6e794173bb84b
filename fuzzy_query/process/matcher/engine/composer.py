# Path: fuzzy_query/process/matcher/engine/composer.py
"""
Condition Composer

Accumulates fuzzy search terms joined by AND / OR, including nested
groups, and turns them into one boolean condition plus one aggregate
relevance score.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from sqlalchemy import and_, literal_column, or_
from sqlalchemy.sql.elements import ClauseElement, ColumnElement

from ....constants import (
    BooleanOperator,
    DEFAULT_ENABLE_ORDERING,
    DEFAULT_TERM_WEIGHT,
)
from ....core.logger import get_process_logger
from ..models.condition_node import ConditionGroup, ConditionLeaf, ConditionNode
from ..models.errors import EmptyConditionError
from ..models.search_term import SearchTerm
from ..scoring.score_builder import ScoreExpressionBuilder
from .registry import MatcherRegistry, get_default_registry


# field -> (qualified key, column expression)
ColumnResolver = Callable[[Any], tuple[str, Any]]


def default_column_resolver(field: Any) -> tuple[str, Any]:
    """
    Resolve a field without any statement context.

    Strings become literal columns, anything else is used as-is.
    """
    if isinstance(field, str):
        return field, literal_column(field)
    return str(field), field


def is_group_callback(value: Any) -> bool:
    """True when value is a group callback rather than a field."""
    if isinstance(value, (str, ClauseElement)) or hasattr(value, '__clause_element__'):
        return False
    return callable(value)


@dataclass(frozen=True, eq=False)
class ComposedCondition:
    """
    Result of composing fuzzy terms.

    Attributes:
        condition: Boolean SQL expression for the WHERE clause
        score: Sum of every leaf score
        should_order: True when any leaf asked for relevance ordering
        root: Condition tree the expressions were rendered from
    """
    condition: ColumnElement
    score: ColumnElement
    should_order: bool
    root: ConditionNode

    @property
    def leaves(self) -> tuple[ConditionLeaf, ...]:
        """Leaves in caller order."""
        return tuple(self.root.leaves())


class ConditionComposer:
    """
    Builds a fuzzy condition tree from successive calls.

    Each call records a connective and a node. On build(), siblings are
    combined with SQL precedence: AND binds tighter than OR, so
    "A or B and C" becomes A OR (B AND C). Groups are always kept
    together as one parenthesised node.

    Example:
        composer = ConditionComposer()
        composer.where_fuzzy(users.c.name, 'jd')
        composer.or_where_fuzzy(lambda group: group
            .where_fuzzy(users.c.country, 'uk')
            .where_fuzzy(users.c.nickname, 'jndoe'))
        composed = composer.build()

        stmt = select(users).where(composed.condition)
    """

    def __init__(
        self,
        column_resolver: Optional[ColumnResolver] = None,
        registry: Optional[MatcherRegistry] = None,
        default_enable_ordering: Optional[bool] = None,
        score_builder: Optional[ScoreExpressionBuilder] = None,
    ):
        """
        Initialize composer.

        Args:
            column_resolver: Maps a field to (qualified key, column)
            registry: Matcher registry (defaults to the process-wide one)
            default_enable_ordering: enable_ordering used when a term leaves
                                     it unset
            score_builder: Builder for leaf expressions
        """
        self.logger = get_process_logger('matcher.composer')
        self.column_resolver = column_resolver or default_column_resolver
        self.registry = registry if registry is not None else get_default_registry()
        self.default_enable_ordering = (
            DEFAULT_ENABLE_ORDERING if default_enable_ordering is None
            else default_enable_ordering
        )
        self.score_builder = score_builder or ScoreExpressionBuilder()

        self._entries: list[tuple[BooleanOperator, ConditionNode]] = []
        self._terms: dict[str, SearchTerm] = {}

    # ==========================================================================
    # Term entry
    # ==========================================================================

    def add_term(
        self,
        field: Any,
        term: Any,
        weight: float = DEFAULT_TERM_WEIGHT,
        enable_ordering: Optional[bool] = None,
        excluded_matchers: Iterable[str] = (),
        boolean: BooleanOperator = BooleanOperator.AND,
    ) -> 'ConditionComposer':
        """
        Add one fuzzy term.

        Args:
            field: Field name or column expression
            term: Search text (None counts as empty)
            weight: Score multiplier for this term
            enable_ordering: Whether the term asks for relevance ordering
            excluded_matchers: Matcher names to disable for this term
            boolean: Connective to the previous entry

        Returns:
            self

        Raises:
            InvalidWeightError: If weight is not a positive number
        """
        key, column = self.column_resolver(field)
        search_term = SearchTerm.create(key, term, weight, excluded_matchers)
        if enable_ordering is None:
            enable_ordering = self.default_enable_ordering

        matchers = self.registry.resolve(search_term.excluded_matchers)
        expression = self.score_builder.build(search_term, column, matchers)

        self._entries.append((
            BooleanOperator(boolean),
            ConditionLeaf(expression=expression, enable_ordering=bool(enable_ordering)),
        ))
        self._terms[key] = search_term
        return self

    def where_fuzzy(
        self,
        field: Any,
        term: Any = None,
        weight: float = DEFAULT_TERM_WEIGHT,
        enable_ordering: Optional[bool] = None,
        excluded_matchers: Iterable[str] = (),
    ) -> 'ConditionComposer':
        """AND a term, or a group when field is a callback."""
        if is_group_callback(field):
            return self.group(BooleanOperator.AND, field)
        return self.add_term(
            field, term, weight, enable_ordering, excluded_matchers,
            boolean=BooleanOperator.AND,
        )

    def or_where_fuzzy(
        self,
        field: Any,
        term: Any = None,
        weight: float = DEFAULT_TERM_WEIGHT,
        enable_ordering: Optional[bool] = None,
        excluded_matchers: Iterable[str] = (),
    ) -> 'ConditionComposer':
        """OR a term, or a group when field is a callback."""
        if is_group_callback(field):
            return self.group(BooleanOperator.OR, field)
        return self.add_term(
            field, term, weight, enable_ordering, excluded_matchers,
            boolean=BooleanOperator.OR,
        )

    def group(
        self,
        boolean: BooleanOperator,
        callback: Callable[['ConditionComposer'], Optional['ConditionComposer']],
    ) -> 'ConditionComposer':
        """
        Add a parenthesised group.

        The callback receives a fresh composer sharing this composer's
        resolver, registry and defaults. A group with no terms is dropped.

        Args:
            boolean: Connective to the previous entry
            callback: Fills the sub-composer (its return value is ignored
                      unless it is another composer)

        Returns:
            self
        """
        sub = ConditionComposer(
            column_resolver=self.column_resolver,
            registry=self.registry,
            default_enable_ordering=self.default_enable_ordering,
            score_builder=self.score_builder,
        )
        result = callback(sub)
        if isinstance(result, ConditionComposer):
            sub = result

        if not sub._entries:
            self.logger.debug("Ignoring empty fuzzy group")
            return self

        self._entries.append((BooleanOperator(boolean), sub._tree()))
        self._terms.update(sub._terms)
        return self

    # ==========================================================================
    # Inspection
    # ==========================================================================

    @property
    def is_empty(self) -> bool:
        """True when no term has been added."""
        return not self._entries

    def terms_by_field(self) -> dict[str, SearchTerm]:
        """Latest search term per qualified field key, groups included."""
        return dict(self._terms)

    # ==========================================================================
    # Build
    # ==========================================================================

    def build(self) -> ComposedCondition:
        """
        Render the accumulated terms.

        Returns:
            ComposedCondition with condition, total score and ordering flag

        Raises:
            EmptyConditionError: If no term was added
        """
        if not self._entries:
            raise EmptyConditionError("No fuzzy terms to compose")

        root = self._tree()
        condition = self._render_condition(root)

        leaves = list(root.leaves())
        score = leaves[0].expression.score
        for leaf in leaves[1:]:
            score = score + leaf.expression.score

        should_order = any(leaf.enable_ordering for leaf in leaves)

        self.logger.debug(
            f"Composed {len(leaves)} fuzzy terms, depth {root.depth()}, "
            f"ordering {'on' if should_order else 'off'}"
        )
        return ComposedCondition(
            condition=condition,
            score=score,
            should_order=should_order,
            root=root,
        )

    def _tree(self) -> ConditionNode:
        """Fold entries into a tree, AND binding tighter than OR."""
        runs: list[list[ConditionNode]] = []
        for index, (boolean, node) in enumerate(self._entries):
            if index == 0 or boolean == BooleanOperator.OR:
                runs.append([node])
            else:
                runs[-1].append(node)

        conjunctions = [
            run[0] if len(run) == 1 else ConditionGroup(BooleanOperator.AND, tuple(run))
            for run in runs
        ]
        if len(conjunctions) == 1:
            return conjunctions[0]
        return ConditionGroup(BooleanOperator.OR, tuple(conjunctions))

    def _render_condition(self, node: ConditionNode) -> ColumnElement:
        """Render a node to a boolean SQL expression."""
        if isinstance(node, ConditionLeaf):
            return node.expression.condition

        children = [self._render_condition(child) for child in node.children]
        if node.operator == BooleanOperator.OR:
            return or_(*children)
        return and_(*children)


__all__ = [
    'ColumnResolver',
    'ComposedCondition',
    'ConditionComposer',
    'default_column_resolver',
    'is_group_callback',
]
