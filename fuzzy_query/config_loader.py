# Path: fuzzy_query/config_loader.py
"""
Configuration Loader for fuzzy_query

Loads configuration from a .env file and FUZZY_QUERY_* environment
variables. Singleton pattern ensures consistent configuration across all
components.

Nothing here is required: every key has a default, so the package works
without any environment at all.
"""

import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .core.logger import get_input_logger
from .constants import (
    DEFAULT_ENABLE_ORDERING,
    DEFAULT_RELEVANCE_LABEL,
    ENV_PREFIX,
)


logger = get_input_logger('config_loader')


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'

# Database Pool Defaults
DEFAULT_DB_POOL_SIZE: int = 5
DEFAULT_DB_POOL_MAX_OVERFLOW: int = 10
DEFAULT_DB_POOL_TIMEOUT: int = 30
DEFAULT_DB_POOL_RECYCLE: int = 3600


class ConfigLoader:
    """
    Singleton configuration loader for fuzzy_query.

    Loads configuration from environment variables with type conversion
    and sensible defaults.

    Example:
        config = ConfigLoader()
        label = config.get('relevance_label')        # '_fuzzy_relevance_'
        weights = config.get('matcher_weights')      # {'exact': 120.0}
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env from the
        current working directory when one exists. Variables already set
        in the environment win over the file.
        """
        if ConfigLoader._initialized:
            return

        env_path = Path.cwd() / '.env'
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('ENVIRONMENT', 'development'),
            'debug': self._get_bool('DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_level': self._get_env('LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_dir': self._get_path('LOG_DIR'),
            'log_console': self._get_bool('LOG_CONSOLE', True),

            # ================================================================
            # DATABASE CONFIGURATION
            # ================================================================
            'database_url': self._get_env('DATABASE_URL', ''),
            'db_pool_size': self._get_int('DB_POOL_SIZE', DEFAULT_DB_POOL_SIZE),
            'db_pool_max_overflow': self._get_int(
                'DB_POOL_MAX_OVERFLOW', DEFAULT_DB_POOL_MAX_OVERFLOW
            ),
            'db_pool_timeout': self._get_int('DB_POOL_TIMEOUT', DEFAULT_DB_POOL_TIMEOUT),
            'db_pool_recycle': self._get_int('DB_POOL_RECYCLE', DEFAULT_DB_POOL_RECYCLE),

            # ================================================================
            # RELEVANCE CONFIGURATION
            # ================================================================
            'relevance_label': self._get_env('RELEVANCE_LABEL', DEFAULT_RELEVANCE_LABEL),
            'default_enable_ordering': self._get_bool(
                'DEFAULT_ENABLE_ORDERING', DEFAULT_ENABLE_ORDERING
            ),

            # ================================================================
            # MATCHER CONFIGURATION
            # ================================================================
            'matcher_weights': self._get_weights('MATCHER_WEIGHTS'),
            'matcher_config_path': self._get_path('MATCHER_CONFIG'),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self._config.get(key)
        return default if value is None else value

    def _get_path(self, key: str) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name without prefix

        Returns:
            Path object or None
        """
        value = os.getenv(ENV_PREFIX + key)
        if not value:
            return None

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def _get_weights(self, key: str) -> dict[str, float]:
        """
        Get matcher weight overrides from a comma-separated variable.

        Format: "exact=120,in_string=20". Malformed pairs are skipped
        with a warning.

        Args:
            key: Environment variable name without prefix

        Returns:
            Mapping of matcher name to weight (empty when unset)
        """
        value = os.getenv(ENV_PREFIX + key)
        if not value:
            return {}

        weights: dict[str, float] = {}
        for pair in value.split(','):
            pair = pair.strip()
            if not pair:
                continue
            name, sep, raw_weight = pair.partition('=')
            try:
                if not sep:
                    raise ValueError(pair)
                weights[name.strip()] = float(raw_weight)
            except ValueError:
                logger.warning(f"Ignoring malformed matcher weight: {pair!r}")

        return weights


__all__ = ['ConfigLoader']
