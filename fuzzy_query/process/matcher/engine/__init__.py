# Path: fuzzy_query/process/matcher/engine/__init__.py
"""
Matching Engine Core

Core components of the matching engine:
- MatcherRegistry: Available matchers and their base weights
- ConditionComposer: Builds AND / OR trees of fuzzy terms
"""

from .registry import MatcherRegistry, get_default_registry, reset_default_registry
from .composer import ComposedCondition, ConditionComposer

__all__ = [
    'MatcherRegistry',
    'get_default_registry',
    'reset_default_registry',
    'ComposedCondition',
    'ConditionComposer',
]
