# Path: fuzzy_query/constants.py
"""
System-Wide Constants for fuzzy_query

Central repository for constant values used across the package.
Module code refers to these names instead of repeating literals.

Constants are organized by category:
- Boolean Operators
- Matcher Names and Default Weights
- Search Term Defaults
- Relevance Defaults
- Environment Keys
"""

from enum import Enum
from typing import Final


# ==============================================================================
# BOOLEAN OPERATORS
# ==============================================================================

class BooleanOperator(str, Enum):
    """
    Connective joining a fuzzy condition to its preceding sibling.

    AND binds tighter than OR, as in SQL.
    """
    AND = 'and'
    OR = 'or'


# ==============================================================================
# MATCHER NAMES
# ==============================================================================

class MatcherName(str, Enum):
    """
    Names of the built-in matchers.

    Listed in registration order, which is also the order in which their
    fragments appear in generated SQL.
    """
    EXACT = 'exact'
    START_OF_STRING = 'start_of_string'
    ACRONYM = 'acronym'
    CONSECUTIVE_CHARACTERS = 'consecutive_characters'
    START_OF_WORDS = 'start_of_words'
    STUDLY_CASE = 'studly_case'
    IN_STRING = 'in_string'
    TIMES_IN_STRING = 'times_in_string'


# Default base weights: more specific matches contribute more
DEFAULT_MATCHER_WEIGHTS: Final[dict[str, float]] = {
    MatcherName.EXACT.value: 100,
    MatcherName.START_OF_STRING.value: 50,
    MatcherName.ACRONYM.value: 42,
    MatcherName.CONSECUTIVE_CHARACTERS.value: 40,
    MatcherName.START_OF_WORDS.value: 35,
    MatcherName.STUDLY_CASE.value: 32,
    MatcherName.IN_STRING.value: 30,
    MatcherName.TIMES_IN_STRING.value: 8,
}


# ==============================================================================
# SEARCH TERM DEFAULTS
# ==============================================================================

DEFAULT_TERM_WEIGHT: Final[float] = 1
DEFAULT_ENABLE_ORDERING: Final[bool] = True

# LIKE wildcards and the escape character used for them
LIKE_ESCAPE_CHAR: Final[str] = '\\'
LIKE_WILDCARD_ANY: Final[str] = '%'
LIKE_WILDCARD_ONE: Final[str] = '_'


# ==============================================================================
# RELEVANCE DEFAULTS
# ==============================================================================

DEFAULT_RELEVANCE_LABEL: Final[str] = '_fuzzy_relevance_'
DEFAULT_PER_PAGE: Final[int] = 15


# ==============================================================================
# ENVIRONMENT KEYS
# ==============================================================================

ENV_PREFIX: Final[str] = 'FUZZY_QUERY_'
LOGGER_ROOT: Final[str] = 'fuzzy_query'


# ==============================================================================
# CLI STATUS MARKERS
# ==============================================================================

STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_INFO: Final[str] = '[INFO]'


__all__ = [
    'BooleanOperator',
    'MatcherName',
    'DEFAULT_MATCHER_WEIGHTS',
    'DEFAULT_TERM_WEIGHT',
    'DEFAULT_ENABLE_ORDERING',
    'LIKE_ESCAPE_CHAR',
    'LIKE_WILDCARD_ANY',
    'LIKE_WILDCARD_ONE',
    'DEFAULT_RELEVANCE_LABEL',
    'DEFAULT_PER_PAGE',
    'ENV_PREFIX',
    'LOGGER_ROOT',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_INFO',
]
