# Path: tests/unit/test_config_loader.py
"""
Unit Tests for ConfigLoader

Tests the configuration loading functionality including:
- Environment variable parsing
- Type conversion methods
- Singleton pattern
- Default value handling
"""

import os
from pathlib import Path
from unittest.mock import patch

from fuzzy_query.config_loader import ConfigLoader


class TestConfigLoaderBasics:
    """Test basic ConfigLoader functionality."""

    def test_singleton_pattern(self, mock_env_vars, reset_singletons):
        """ConfigLoader should return same instance."""
        config1 = ConfigLoader()
        config2 = ConfigLoader()

        assert config1 is config2

    def test_get_returns_value(self, mock_env_vars, reset_singletons):
        """get() should return configured value."""
        assert ConfigLoader().get('environment') == 'test'

    def test_get_returns_default_for_missing(self, mock_env_vars, reset_singletons):
        """get() should return default for missing keys."""
        assert ConfigLoader().get('nonexistent_key', 'default_value') == 'default_value'

    def test_get_returns_none_for_missing_no_default(self, mock_env_vars, reset_singletons):
        """get() should return None for missing keys without default."""
        assert ConfigLoader().get('nonexistent_key') is None


class TestConfigLoaderDefaults:
    """Test values without any environment."""

    def test_defaults(self, reset_singletons):
        """Every key has a usable default."""
        with patch.dict(os.environ, {}, clear=True):
            config = ConfigLoader()

            assert config.get('log_level') == 'INFO'
            assert config.get('database_url') == ''
            assert config.get('relevance_label') == '_fuzzy_relevance_'
            assert config.get('default_enable_ordering') is True
            assert config.get('matcher_weights') == {}
            assert config.get('matcher_config_path') is None
            assert config.get('db_pool_size') == 5


class TestConfigLoaderTypeConversion:
    """Test type conversion methods."""

    def test_get_int_converts_string(self, mock_env_vars, reset_singletons):
        """Integer values should be converted from string."""
        assert ConfigLoader().get('db_pool_size') == 7

    def test_get_int_falls_back_on_garbage(self, reset_singletons):
        """Malformed integers use the default."""
        with patch.dict(os.environ, {'FUZZY_QUERY_DB_POOL_SIZE': 'many'}):
            assert ConfigLoader().get('db_pool_size') == 5

    def test_get_bool_converts_true(self, mock_env_vars, reset_singletons):
        """Boolean 'true' should be converted."""
        assert ConfigLoader().get('debug') is True

    def test_get_bool_converts_false(self, mock_env_vars, reset_singletons):
        """Boolean 'false' should be converted."""
        assert ConfigLoader().get('default_enable_ordering') is False

    def test_get_path_returns_path_object(self, reset_singletons):
        """Path values should be converted to Path objects."""
        with patch.dict(os.environ, {'FUZZY_QUERY_LOG_DIR': '/tmp/fuzzy_logs'}):
            assert ConfigLoader().get('log_dir') == Path('/tmp/fuzzy_logs')


class TestMatcherWeights:
    """Test FUZZY_QUERY_MATCHER_WEIGHTS parsing."""

    def test_weights_parsed(self, mock_env_vars, reset_singletons):
        """name=weight pairs become floats."""
        assert ConfigLoader().get('matcher_weights') == {'exact': 120.0, 'in_string': 20.0}

    def test_malformed_pairs_skipped(self, reset_singletons):
        """Malformed pairs are dropped, good ones kept."""
        env = {'FUZZY_QUERY_MATCHER_WEIGHTS': 'exact=120, acronym, in_string=abc,,studly_case=5'}
        with patch.dict(os.environ, env):
            assert ConfigLoader().get('matcher_weights') == {'exact': 120.0, 'studly_case': 5.0}


class TestDotenv:
    """Test .env loading."""

    def test_env_file_in_working_directory(self, temp_dir, reset_singletons, monkeypatch):
        """A .env file in the working directory is read."""
        (temp_dir / '.env').write_text('FUZZY_QUERY_RELEVANCE_LABEL=from_dotenv\n')
        monkeypatch.chdir(temp_dir)

        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop('FUZZY_QUERY_RELEVANCE_LABEL', None)
            assert ConfigLoader().get('relevance_label') == 'from_dotenv'
