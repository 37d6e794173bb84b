# Path: tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for fuzzy_query

Provides common test fixtures used across all test modules:
- In-memory SQLite database seeded with the four-user dataset
- ORM User model and Core users table
- Environment mocks and singleton resets
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from sqlalchemy import Integer, String, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column
from sqlalchemy.pool import StaticPool

# Add project root and tests directory to path for imports
TESTS_ROOT = Path(__file__).parent
PROJECT_ROOT = TESTS_ROOT.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(TESTS_ROOT))

from fixtures.sample_data import SAMPLE_USERS  # noqa: E402


# ==============================================================================
# MODELS
# ==============================================================================

class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = 'users'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    nickname: Mapped[str] = mapped_column(String(100))
    country: Mapped[str] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r})"


users_table = User.__table__


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest.fixture
def engine():
    """In-memory SQLite engine with the sample users loaded."""
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(User(**row) for row in SAMPLE_USERS)
        session.commit()

    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """ORM session bound to the sample database."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def connection(engine):
    """Core connection bound to the sample database."""
    with engine.connect() as connection:
        yield connection


@pytest.fixture
def users():
    """Core users table."""
    return users_table


@pytest.fixture
def user_model():
    """ORM User model."""
    return User


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'FUZZY_QUERY_ENVIRONMENT': 'test',
        'FUZZY_QUERY_DEBUG': 'true',
        'FUZZY_QUERY_LOG_LEVEL': 'DEBUG',
        'FUZZY_QUERY_DATABASE_URL': 'sqlite:///:memory:',
        'FUZZY_QUERY_DB_POOL_SIZE': '7',
        'FUZZY_QUERY_RELEVANCE_LABEL': 'score',
        'FUZZY_QUERY_DEFAULT_ENABLE_ORDERING': 'false',
        'FUZZY_QUERY_MATCHER_WEIGHTS': 'exact=120,in_string=20',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

def _reset_all() -> None:
    from fuzzy_query.config_loader import ConfigLoader
    from fuzzy_query.database.engine import reset_engine
    from fuzzy_query.process.matcher.engine.registry import reset_default_registry

    ConfigLoader._instance = None
    ConfigLoader._initialized = False
    reset_default_registry()
    reset_engine()


@pytest.fixture
def reset_singletons():
    """Reset ConfigLoader, the default matcher registry and the engine."""
    _reset_all()
    yield
    _reset_all()
