# Path: fuzzy_query/process/matcher/matchers/__init__.py
"""
Matchers

Each matcher handles one kind of textual resemblance and contributes a
weighted score to a term's relevance.

Matchers (registration order):
- ExactMatcher
- StartOfStringMatcher
- AcronymMatcher
- ConsecutiveCharactersMatcher
- StartOfWordsMatcher
- StudlyCaseMatcher
- InStringMatcher
- TimesInStringMatcher
"""

from .base_matcher import BaseMatcher
from .exact_matcher import ExactMatcher
from .start_of_string_matcher import StartOfStringMatcher
from .acronym_matcher import AcronymMatcher
from .consecutive_characters_matcher import ConsecutiveCharactersMatcher
from .start_of_words_matcher import StartOfWordsMatcher
from .studly_case_matcher import StudlyCaseMatcher
from .in_string_matcher import InStringMatcher
from .times_in_string_matcher import TimesInStringMatcher

BUILTIN_MATCHERS = (
    ExactMatcher,
    StartOfStringMatcher,
    AcronymMatcher,
    ConsecutiveCharactersMatcher,
    StartOfWordsMatcher,
    StudlyCaseMatcher,
    InStringMatcher,
    TimesInStringMatcher,
)

__all__ = [
    'BaseMatcher',
    'ExactMatcher',
    'StartOfStringMatcher',
    'AcronymMatcher',
    'ConsecutiveCharactersMatcher',
    'StartOfWordsMatcher',
    'StudlyCaseMatcher',
    'InStringMatcher',
    'TimesInStringMatcher',
    'BUILTIN_MATCHERS',
]
