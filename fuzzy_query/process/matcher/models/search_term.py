# Path: fuzzy_query/process/matcher/models/search_term.py
"""
Search Term Model

One (field, term, weight, exclusions) request made by a single
where_fuzzy() call.
"""

import math
import numbers
import re
from dataclasses import dataclass
from typing import Iterable

from ....constants import DEFAULT_TERM_WEIGHT
from ....core.logger import get_input_logger
from .errors import InvalidWeightError


logger = get_input_logger('search_term')

_WHITESPACE_RE = re.compile(r'\s+')


def normalize_term(term: object) -> str:
    """
    Normalize a raw search value.

    Strips surrounding whitespace and collapses inner whitespace runs to a
    single space. None becomes the empty string.

    Args:
        term: Raw value passed by the caller

    Returns:
        Normalized term string
    """
    if term is None:
        return ''
    return _WHITESPACE_RE.sub(' ', str(term)).strip()


def validate_weight(weight: object, subject: str = 'term') -> float:
    """
    Check that a weight is a finite, strictly positive real number.

    Args:
        weight: Candidate weight
        subject: What the weight belongs to, for the error message

    Returns:
        The weight unchanged

    Raises:
        InvalidWeightError: If weight is not a finite real number or is <= 0
    """
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise InvalidWeightError(weight, subject)
    if not math.isfinite(weight) or not weight > 0:
        raise InvalidWeightError(weight, subject)
    return weight


@dataclass(frozen=True)
class SearchTerm:
    """
    A single fuzzy search request against one field.

    Immutable once built. The term is normalized and the weight validated
    on construction.

    Attributes:
        field: Field name as given by the caller ("users.name" or "name")
        term: Normalized search text
        weight: Multiplier applied to the field's aggregate score (> 0)
        excluded_matchers: Matcher names disabled for this term only

    Example:
        term = SearchTerm(field='name', term='  jad ', weight=2)
        term.term       # 'jad'
        term.is_empty   # False
    """
    field: str
    term: str
    weight: float = DEFAULT_TERM_WEIGHT
    excluded_matchers: frozenset[str] = frozenset()

    def __post_init__(self):
        validate_weight(self.weight)

        normalized = normalize_term(self.term)
        if normalized != self.term:
            object.__setattr__(self, 'term', normalized)

        if not isinstance(self.excluded_matchers, frozenset):
            object.__setattr__(
                self, 'excluded_matchers', frozenset(self.excluded_matchers)
            )

        if not normalized:
            logger.debug(f"Empty search term for field {self.field!r}; it will never match")

    @classmethod
    def create(
        cls,
        field: str,
        term: object,
        weight: float = DEFAULT_TERM_WEIGHT,
        excluded_matchers: Iterable[str] = (),
    ) -> 'SearchTerm':
        """
        Build a SearchTerm from loosely typed caller input.

        Args:
            field: Field name
            term: Raw search value (None and non-strings are accepted)
            weight: Score multiplier
            excluded_matchers: Iterable of matcher names to disable

        Returns:
            SearchTerm instance
        """
        if isinstance(excluded_matchers, str):
            excluded_matchers = (excluded_matchers,)
        return cls(
            field=field,
            term=normalize_term(term),
            weight=weight,
            excluded_matchers=frozenset(excluded_matchers or ()),
        )

    @property
    def is_empty(self) -> bool:
        """True when the term has no searchable text."""
        return not self.term

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'field': self.field,
            'term': self.term,
            'weight': self.weight,
            'excluded_matchers': sorted(self.excluded_matchers),
        }


__all__ = ['SearchTerm', 'normalize_term', 'validate_weight']
