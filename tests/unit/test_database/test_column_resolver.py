# Path: tests/unit/test_database/test_column_resolver.py
"""
Unit tests for field to column resolution.
"""

from sqlalchemy import literal_column, select

from fuzzy_query.database.column_resolver import qualified_key, resolve_column


class TestQualifiedKey:
    """Tests for qualified_key."""

    def test_table_column(self, users):
        """Table columns are table.column."""
        assert qualified_key(users.c.name) == 'users.name'

    def test_orm_attribute(self, user_model):
        """ORM attributes resolve to their table column."""
        assert qualified_key(user_model.name) == 'users.name'

    def test_literal_column(self):
        """Columns without a table keep their name."""
        assert qualified_key(literal_column('score')) == 'score'


class TestResolveColumn:
    """Tests for resolve_column."""

    def test_bare_name(self, users):
        """A bare name is looked up in the FROM clause."""
        key, column = resolve_column(select(users), 'country')

        assert key == 'users.country'
        assert column is users.c.country

    def test_qualified_name(self, users):
        """table.column picks the named table."""
        key, column = resolve_column(select(users), 'users.nickname')

        assert key == 'users.nickname'
        assert column is users.c.nickname

    def test_orm_statement(self, user_model, users):
        """ORM selects expose their mapped table."""
        key, column = resolve_column(select(user_model), 'name')

        assert key == 'users.name'
        assert column is users.c.name

    def test_column_object_passes_through(self, users):
        """Column objects are used as they are."""
        key, column = resolve_column(select(users), users.c.name)

        assert key == 'users.name'
        assert column is users.c.name

    def test_orm_attribute_passes_through(self, user_model):
        """ORM attributes are used as they are."""
        key, column = resolve_column(select(user_model), user_model.country)

        assert key == 'users.country'
        assert column is user_model.country

    def test_unknown_name_becomes_literal(self, users):
        """Unknown fields are left for the database to report."""
        key, column = resolve_column(select(users), 'missing')

        assert key == 'missing'
        assert str(column) == 'missing'

    def test_unknown_table_becomes_literal(self, users):
        """A table that is not selected from is not searched."""
        key, column = resolve_column(select(users), 'orders.name')

        assert key == 'orders.name'
        assert str(column) == 'orders.name'
