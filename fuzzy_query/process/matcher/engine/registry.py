# Path: fuzzy_query/process/matcher/engine/registry.py
"""
Matcher Registry

Enumerates the available matchers with their base weights and resolves
the active subset for a search term.

The registry is immutable: per-call variation (exclusions, term weights)
is passed explicitly, and weight overrides produce a new registry.
"""

import threading
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Optional

import yaml

from ....config_loader import ConfigLoader
from ....core.logger import get_process_logger
from ..matchers import BUILTIN_MATCHERS, BaseMatcher
from ..models.search_term import validate_weight


logger = get_process_logger('matcher.registry')

_default_registry: Optional['MatcherRegistry'] = None
_default_registry_lock = threading.Lock()


class MatcherRegistry:
    """
    Ordered, read-only collection of matchers.

    Registration order is fixed, which keeps generated SQL stable and
    therefore reproducible across runs.

    Example:
        registry = MatcherRegistry.default()
        active = registry.resolve({'studly_case'})
        [m.name for m in active]   # every built-in except studly_case

        heavier = registry.with_weights({'exact': 150})
    """

    def __init__(self, matchers: Iterable[BaseMatcher]):
        """
        Initialize registry.

        Args:
            matchers: Matcher instances in registration order

        Raises:
            ValueError: If two matchers share a name
        """
        matchers = tuple(matchers)
        names = [matcher.name for matcher in matchers]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate matcher names: {', '.join(duplicates)}")

        self._matchers = matchers
        self._by_name = {matcher.name: matcher for matcher in matchers}

    @classmethod
    def default(cls) -> 'MatcherRegistry':
        """Registry of all built-in matchers with their default weights."""
        return cls(matcher_class() for matcher_class in BUILTIN_MATCHERS)

    @classmethod
    def from_yaml(cls, path: Path, base: Optional['MatcherRegistry'] = None) -> 'MatcherRegistry':
        """
        Load weight overrides from a YAML file.

        File format:
            matchers:
              exact: 120
              in_string: 20

        Args:
            path: Path to the YAML file
            base: Registry to override (defaults to the built-ins)

        Returns:
            New registry with the overrides applied

        Raises:
            ValueError: If the file is not a mapping of names to weights
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        weights = data.get('matchers', {}) if isinstance(data, dict) else None
        if not isinstance(weights, dict):
            raise ValueError(f"Matcher config {path} must contain a 'matchers' mapping")

        logger.info(f"Loaded {len(weights)} matcher weight overrides from {path}")
        registry = base if base is not None else cls.default()
        return registry.with_weights(weights)

    @property
    def names(self) -> tuple[str, ...]:
        """Matcher names in registration order."""
        return tuple(matcher.name for matcher in self._matchers)

    def get(self, name: str) -> Optional[BaseMatcher]:
        """Get a matcher by name, or None."""
        return self._by_name.get(name)

    def resolve(self, excluded: Iterable[str] = ()) -> tuple[BaseMatcher, ...]:
        """
        Resolve the active matchers for one search term.

        Names in excluded that are not registered are ignored.

        Args:
            excluded: Matcher names to leave out

        Returns:
            Remaining matchers in registration order
        """
        if isinstance(excluded, str):
            excluded = (excluded,)
        excluded = frozenset(excluded)
        unknown = excluded.difference(self._by_name)
        if unknown:
            logger.debug(f"Ignoring unknown excluded matchers: {sorted(unknown)}")

        return tuple(
            matcher for matcher in self._matchers
            if matcher.name not in excluded
        )

    def with_weights(self, overrides: Mapping[str, float]) -> 'MatcherRegistry':
        """
        Build a new registry with some base weights replaced.

        Args:
            overrides: Mapping of matcher name to new base weight

        Returns:
            New MatcherRegistry; this one is unchanged

        Raises:
            ValueError: If a name is not registered
            InvalidWeightError: If a weight is not positive
        """
        unknown = sorted(set(overrides).difference(self._by_name))
        if unknown:
            raise ValueError(f"Unknown matchers in weight overrides: {', '.join(unknown)}")

        for name, weight in overrides.items():
            validate_weight(weight, subject=f"matcher {name!r}")

        return MatcherRegistry(
            matcher.with_weight(overrides[matcher.name])
            if matcher.name in overrides else matcher
            for matcher in self._matchers
        )

    def weights(self) -> dict[str, float]:
        """Base weight per matcher name, in registration order."""
        return {matcher.name: matcher.base_weight for matcher in self._matchers}

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[BaseMatcher]:
        return iter(self._matchers)

    def __len__(self) -> int:
        return len(self._matchers)

    def __repr__(self) -> str:
        return f"MatcherRegistry({list(self.names)!r})"


def get_default_registry() -> MatcherRegistry:
    """
    Get the process-wide matcher registry.

    Built once, on first use, from the built-ins plus any overrides in the
    configuration (FUZZY_QUERY_MATCHER_CONFIG, then
    FUZZY_QUERY_MATCHER_WEIGHTS). Read-only afterwards.

    Returns:
        Shared MatcherRegistry
    """
    global _default_registry

    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = _build_configured_registry()
    return _default_registry


def reset_default_registry() -> None:
    """
    Drop the process-wide registry so the next call rebuilds it.

    Used primarily for testing.
    """
    global _default_registry
    with _default_registry_lock:
        _default_registry = None


def _build_configured_registry() -> MatcherRegistry:
    """Build the default registry with configured overrides applied."""
    config = ConfigLoader()
    registry = MatcherRegistry.default()

    config_path = config.get('matcher_config_path')
    if config_path is not None:
        registry = MatcherRegistry.from_yaml(config_path, base=registry)

    weights = config.get('matcher_weights', {})
    if weights:
        registry = registry.with_weights(weights)
        logger.info(f"Applied matcher weight overrides: {weights}")

    logger.debug(f"Default matcher registry: {registry.weights()}")
    return registry


__all__ = [
    'MatcherRegistry',
    'get_default_registry',
    'reset_default_registry',
]
