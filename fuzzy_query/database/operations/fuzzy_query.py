# Path: fuzzy_query/database/operations/fuzzy_query.py
"""
Fuzzy Query

Fluent wrapper around a SQLAlchemy Select that adds fuzzy search:
where_fuzzy / or_where_fuzzy, order_by_fuzzy and with_minimum_relevance,
plus helpers to render or execute the composed statement.
"""

import math
from dataclasses import dataclass
from functools import partial
from numbers import Real
from typing import Any, Iterable, Optional, Union

from sqlalchemy import Select, func, select
from sqlalchemy.engine import Connection, Dialect, Engine, make_url
from sqlalchemy.orm import Session

from ...config_loader import ConfigLoader
from ...constants import DEFAULT_PER_PAGE, DEFAULT_TERM_WEIGHT
from ...core.logger import get_output_logger
from ...process.matcher.engine.composer import ConditionComposer
from ...process.matcher.engine.registry import MatcherRegistry, get_default_registry
from ...process.matcher.models.errors import UnknownFuzzyFieldError
from ...process.matcher.models.relevance_spec import RelevanceSpec
from ...process.matcher.scoring.relevance import RelevanceFilter, RelevanceOrderer
from ...process.matcher.scoring.score_builder import ScoreExpressionBuilder
from ..column_resolver import resolve_column


logger = get_output_logger('database.fuzzy_query')

Executor = Union[Session, Connection]


@dataclass(frozen=True)
class Page:
    """
    One page of fuzzy query results.

    Attributes:
        items: Rows (or scalars) on this page
        total: Number of matching rows over all pages
        page: 1-based page number
        per_page: Page size
    """
    items: list
    total: int
    page: int
    per_page: int

    @property
    def pages(self) -> int:
        """Number of pages (0 when nothing matched)."""
        return math.ceil(self.total / self.per_page)

    @property
    def has_next(self) -> bool:
        """True when a later page exists."""
        return self.page < self.pages

    @property
    def has_previous(self) -> bool:
        """True when an earlier page exists."""
        return self.page > 1


def _validate_positive_int(value: Any, name: str) -> int:
    """Reject anything but a positive int."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


class FuzzyQuery:
    """
    Fuzzy search over a Core or ORM select().

    Terms are combined into one WHERE predicate and one total relevance
    score. When any term asks for ordering, the total is projected as a
    labelled column and rows come back highest score first, with primary
    keys breaking ties.

    Example:
        query = (
            FuzzyQuery(select(User))
            .where_fuzzy('name', 'jd')
            .or_where_fuzzy(lambda q: q
                .where_fuzzy('nickname', 'jndoe')
                .where_fuzzy('country', 'uk'))
            .with_minimum_relevance(40)
        )

        with session_scope() as session:
            users = query.scalars(session)

        print(query.to_sql('postgresql'))
    """

    def __init__(
        self,
        statement: Select,
        registry: Optional[MatcherRegistry] = None,
        relevance_label: Optional[str] = None,
        default_enable_ordering: Optional[bool] = None,
    ):
        """
        Initialize fuzzy query.

        Args:
            statement: Statement to search (select(User), select(users), ...)
            registry: Matcher registry (defaults to the process-wide one)
            relevance_label: Name of the projected relevance column
            default_enable_ordering: enable_ordering for terms that leave it unset
        """
        config = ConfigLoader()

        self._base = statement
        self.registry = registry if registry is not None else get_default_registry()
        self.relevance_label = relevance_label or config.get('relevance_label')
        if default_enable_ordering is None:
            default_enable_ordering = config.get('default_enable_ordering')

        self._resolve = partial(resolve_column, statement)
        self._score_builder = ScoreExpressionBuilder()
        self._composer = ConditionComposer(
            column_resolver=self._resolve,
            registry=self.registry,
            default_enable_ordering=default_enable_ordering,
            score_builder=self._score_builder,
        )
        self._relevance = RelevanceSpec()
        self._order_columns: dict[str, Any] = {}

        self._filter = RelevanceFilter()
        self._orderer = RelevanceOrderer()

    # ==========================================================================
    # Fluent API
    # ==========================================================================

    def where_fuzzy(
        self,
        field: Any,
        term: Any = None,
        weight: float = DEFAULT_TERM_WEIGHT,
        enable_ordering: Optional[bool] = None,
        excluded_matchers: Iterable[str] = (),
    ) -> 'FuzzyQuery':
        """
        AND a fuzzy condition.

        Args:
            field: Field name, column, ORM attribute, or a callback that
                   receives a composer to fill a parenthesised group
            term: Search text
            weight: Score multiplier (must be > 0)
            enable_ordering: Ask for ORDER BY relevance (default from config)
            excluded_matchers: Matcher names to disable for this term

        Returns:
            self

        Raises:
            InvalidWeightError: If weight is not a positive number
        """
        self._composer.where_fuzzy(field, term, weight, enable_ordering, excluded_matchers)
        return self

    def or_where_fuzzy(
        self,
        field: Any,
        term: Any = None,
        weight: float = DEFAULT_TERM_WEIGHT,
        enable_ordering: Optional[bool] = None,
        excluded_matchers: Iterable[str] = (),
    ) -> 'FuzzyQuery':
        """OR a fuzzy condition with the previous one. Same arguments as where_fuzzy."""
        self._composer.or_where_fuzzy(field, term, weight, enable_ordering, excluded_matchers)
        return self

    def order_by_fuzzy(self, fields: Any) -> 'FuzzyQuery':
        """
        Order by the relevance of specific fields, in the given order.

        These sort keys replace the total relevance; ties fall back to
        primary keys.

        Args:
            fields: One field or a list of fields already searched in
                    this query

        Returns:
            self

        Raises:
            UnknownFuzzyFieldError: If a field has no fuzzy term
        """
        if isinstance(fields, (list, tuple)):
            fields = list(fields)
        else:
            fields = [fields]

        terms = self._composer.terms_by_field()
        for field in fields:
            key, column = self._resolve(field)
            if key not in terms:
                raise UnknownFuzzyFieldError(key)
            self._order_columns[key] = column
            self._relevance = self._relevance.with_order_fields(key)

        return self

    def with_minimum_relevance(self, threshold: float) -> 'FuzzyQuery':
        """
        Keep only rows whose total relevance is at least threshold.

        Args:
            threshold: Minimum total score (inclusive)

        Returns:
            self

        Raises:
            ValueError: If threshold is not a number
        """
        if isinstance(threshold, bool) or not isinstance(threshold, Real):
            raise ValueError(f"Minimum relevance must be a number, got {threshold!r}")
        self._relevance = self._relevance.with_minimum(threshold)
        return self

    # ==========================================================================
    # Rendering
    # ==========================================================================

    @property
    def statement(self) -> Select:
        """
        The composed statement.

        Clause order: fuzzy WHERE, minimum relevance, ORDER BY
        order_by_fuzzy fields (or the total relevance when no field was
        named), ORDER BY primary keys. Rebuilt on every access.
        """
        if self._composer.is_empty:
            if self._relevance.minimum_score is not None:
                logger.debug("Minimum relevance ignored: no fuzzy terms")
            return self._base

        composed = self._composer.build()
        relevance = self._relevance.with_order_clause(composed.should_order)

        statement = self._base.where(composed.condition)

        if relevance.minimum_score is not None:
            statement = self._filter.apply(statement, composed.score, relevance.minimum_score)

        scores = [self._field_score(key) for key in relevance.order_fields]

        if relevance.emit_order_clause:
            total = composed.score.label(self.relevance_label)
            statement = statement.add_columns(total)
            # explicit field ordering replaces the total as sort key
            if not scores:
                scores.append(total)

        statement = self._orderer.apply(statement, scores)

        if relevance.has_ordering:
            statement = statement.order_by(*self._tiebreak_columns())

        return statement

    def _field_score(self, key: str) -> Any:
        """Fresh score expression for one searched field."""
        term = self._composer.terms_by_field()[key]
        matchers = self.registry.resolve(term.excluded_matchers)
        return self._score_builder.build(term, self._order_columns[key], matchers).score

    def _tiebreak_columns(self) -> list:
        """Primary key columns of the FROM tables, ascending."""
        columns = []
        for from_clause in self._base.get_final_froms():
            for column in getattr(from_clause, 'primary_key', ()):
                columns.append(column.asc())
        return columns

    def to_sql(
        self,
        dialect: Union[str, Dialect, Engine, Connection, None] = None,
        literal_binds: bool = True,
    ) -> str:
        """
        Render the statement as SQL text, for debugging.

        Args:
            dialect: Dialect name ('sqlite', 'postgresql', 'mysql'), a
                     Dialect, or an Engine/Connection to take it from.
                     None uses SQLAlchemy's generic dialect.
            literal_binds: Inline parameter values

        Returns:
            SQL string
        """
        if isinstance(dialect, str):
            dialect = make_url(f"{dialect}://").get_dialect()()
        elif isinstance(dialect, (Engine, Connection)):
            dialect = dialect.dialect

        compiled = self.statement.compile(
            dialect=dialect,
            compile_kwargs={'literal_binds': literal_binds},
        )
        sql = str(compiled)
        logger.debug(f"Rendered fuzzy query: {sql}")
        return sql

    # ==========================================================================
    # Execution
    # ==========================================================================

    def all(self, executor: Executor) -> list:
        """Execute and return all rows."""
        rows = executor.execute(self.statement).all()
        logger.info(f"Fuzzy query returned {len(rows)} rows")
        return rows

    def scalars(self, executor: Executor) -> list:
        """Execute and return the first column of every row (ORM entities for select(Model))."""
        items = executor.execute(self.statement).scalars().all()
        logger.info(f"Fuzzy query returned {len(items)} rows")
        return items

    def first(self, executor: Executor) -> Optional[Any]:
        """Execute and return the best row, or None."""
        return executor.execute(self.statement.limit(1)).first()

    def count(self, executor: Executor) -> int:
        """Number of matching rows."""
        subquery = self.statement.order_by(None).subquery()
        return executor.execute(select(func.count()).select_from(subquery)).scalar_one()

    def paginate(
        self,
        executor: Executor,
        per_page: int = DEFAULT_PER_PAGE,
        page: int = 1,
        scalars: bool = False,
    ) -> Page:
        """
        Execute one page of the query.

        Args:
            executor: Session or Connection
            per_page: Page size
            page: 1-based page number
            scalars: Return the first column of each row instead of rows

        Returns:
            Page with items and totals

        Raises:
            ValueError: If per_page or page is not a positive integer
        """
        per_page = _validate_positive_int(per_page, 'per_page')
        page = _validate_positive_int(page, 'page')

        total = self.count(executor)
        result = executor.execute(
            self.statement.limit(per_page).offset((page - 1) * per_page)
        )
        items = result.scalars().all() if scalars else result.all()

        logger.info(f"Fuzzy query page {page}: {len(items)} of {total} rows")
        return Page(items=list(items), total=total, page=page, per_page=per_page)


__all__ = ['FuzzyQuery', 'Page']
