# Path: tests/integration/test_fuzzy_search_scenarios.py
"""
Integration Tests for fuzzy search

End-to-end searches over the four sample users on SQLite, through both
Core select(users) and ORM select(User).

Expected scores follow from the default weights, e.g. 'jd' on
"John Doe" = acronym 42 + consecutive characters 40 * 2/7.
"""

import pytest
from sqlalchemy import insert, select

from fuzzy_query.database.operations import FuzzyQuery
from fuzzy_query.process.matcher.engine.registry import MatcherRegistry


@pytest.fixture
def registry():
    """Built-in matchers with default weights."""
    return MatcherRegistry.default()


@pytest.fixture
def core_query(users, registry):
    """Fuzzy query factory over the Core table."""
    def make(**kwargs):
        return FuzzyQuery(select(users), registry=registry, **kwargs)
    return make


@pytest.fixture
def orm_query(user_model, registry):
    """Fuzzy query factory over the ORM model."""
    def make(**kwargs):
        return FuzzyQuery(select(user_model), registry=registry, **kwargs)
    return make


def names(rows):
    return [row.name for row in rows]


def relevance(row):
    return float(row._mapping["_fuzzy_relevance_"])


class TestSingleField:
    """Searches on one field."""

    def test_consecutive_characters_only(self, orm_query, session):
        """'jad' only matches Jane Doe."""
        users = orm_query().where_fuzzy('name', 'jad').scalars(session)
        assert names(users) == ['Jane Doe']

    def test_acronym_tie_broken_by_key(self, core_query, connection):
        """'jd' scores John and Jane equally; John has the lower id."""
        rows = core_query().where_fuzzy('name', 'jd').all(connection)

        assert names(rows) == ['John Doe', 'Jane Doe']
        expected = 42 + 40 * 2 / 7
        assert relevance(rows[0]) == pytest.approx(expected)
        assert relevance(rows[1]) == pytest.approx(expected)

    def test_shorter_value_scores_higher(self, core_query, connection):
        """'un' prefers United States (12 letters) over United Kingdom (13)."""
        rows = core_query().where_fuzzy('country', 'un').all(connection)

        assert [row.country for row in rows] == ['United States', 'United Kingdom']
        assert relevance(rows[0]) == pytest.approx(123 + 40 * 2 / 12)
        assert relevance(rows[1]) == pytest.approx(123 + 40 * 2 / 13)

    def test_empty_term_matches_nothing(self, core_query, connection):
        """An empty term never matches."""
        assert core_query().where_fuzzy('name', '   ').all(connection) == []

    def test_none_term_matches_nothing(self, core_query, connection):
        """None is an empty term."""
        assert core_query().where_fuzzy('name', None).count(connection) == 0

    def test_wildcards_are_literal(self, core_query, connection):
        """'%' does not match everything."""
        assert core_query().where_fuzzy('name', '%').all(connection) == []

    def test_excluded_matchers(self, core_query, connection):
        """Excluding the matching strategies removes the rows."""
        query = core_query().where_fuzzy(
            'name', 'jd', excluded_matchers=['acronym', 'consecutive_characters'],
        )
        assert query.all(connection) == []

    def test_unknown_exclusion_ignored(self, core_query, connection):
        """Unknown matcher names change nothing."""
        rows = core_query().where_fuzzy('name', 'jd', excluded_matchers=['soundex']).all(connection)
        assert names(rows) == ['John Doe', 'Jane Doe']


class TestMultipleFields:
    """Searches combining fields."""

    def test_and_narrows(self, orm_query, session):
        """'jd' on name AND 'uk' on country is Jane only."""
        users = (
            orm_query()
            .where_fuzzy('name', 'jd')
            .where_fuzzy('country', 'uk')
            .scalars(session)
        )
        assert names(users) == ['Jane Doe']

    def test_or_with_weights(self, core_query, connection):
        """'ed' x30 on name OR 'Italy' x10 on country."""
        rows = (
            core_query()
            .where_fuzzy('name', 'ed', weight=30)
            .or_where_fuzzy('country', 'Italy', weight=10)
            .all(connection)
        )

        assert names(rows) == ['William Doe', 'Fred Doe', 'Jane Doe']
        assert relevance(rows[0]) == pytest.approx(2630)
        assert relevance(rows[1]) == pytest.approx((30 + 40 * 2 / 7 + 8) * 30)
        assert relevance(rows[2]) == pytest.approx(40 * 2 / 7 * 30)

    def test_or_across_two_fields_ties(self, core_query, connection):
        """'jndoe' on name OR nickname: John and Jane tie, John first."""
        rows = (
            core_query()
            .where_fuzzy('name', 'jndoe')
            .or_where_fuzzy('nickname', 'jndoe')
            .all(connection)
        )

        assert names(rows) == ['John Doe', 'Jane Doe']
        assert relevance(rows[0]) == pytest.approx(263 + 40 * 5 / 7)

    def test_group(self, orm_query, session):
        """nickname 'fredrick' OR (name 'jd' AND country 'uk')."""
        users = (
            orm_query()
            .where_fuzzy('nickname', 'fredrick')
            .or_where_fuzzy(lambda group: group
                .where_fuzzy('name', 'jd')
                .where_fuzzy('country', 'uk'))
            .scalars(session)
        )
        assert sorted(names(users)) == ['Fred Doe', 'Jane Doe']

    def test_caller_filters_still_apply(self, users, registry, connection):
        """Fuzzy conditions AND with the base statement's WHERE."""
        query = FuzzyQuery(select(users).where(users.c.id != 1), registry=registry)
        rows = query.where_fuzzy('name', 'jd').all(connection)

        assert names(rows) == ['Jane Doe']


class TestMinimumRelevance:
    """Relevance floor."""

    def test_floor_keeps_strong_match(self, orm_query, session):
        """'joh Do' scores 40*6/7 + 35 on John Doe."""
        users = orm_query().where_fuzzy('name', 'joh Do').with_minimum_relevance(65).scalars(session)
        assert names(users) == ['John Doe']

    def test_floor_drops_weak_match(self, orm_query, session):
        """The same search with a floor of 70 returns nothing."""
        users = orm_query().where_fuzzy('name', 'joh Do').with_minimum_relevance(70).scalars(session)
        assert users == []

    def test_floor_is_inclusive(self, core_query, connection):
        """A row scoring exactly the floor is kept."""
        rows = (
            core_query()
            .where_fuzzy('country', 'italy', excluded_matchers=['consecutive_characters'])
            .with_minimum_relevance(223)
            .all(connection)
        )
        assert [row.country for row in rows] == ['Italy']


class TestOrdering:
    """ORDER BY behaviour."""

    def test_order_by_field_first(self, core_query, connection):
        """Field relevance decides before the total."""
        rows = (
            core_query()
            .where_fuzzy('name', 'jad')
            .or_where_fuzzy('nickname', 'jndoe')
            .order_by_fuzzy('name')
            .all(connection)
        )
        assert names(rows) == ['Jane Doe', 'John Doe']

    def test_order_by_several_fields(self, core_query, connection):
        """Fields sort in the order given."""
        rows = (
            core_query()
            .where_fuzzy('nickname', 'jndoe')
            .where_fuzzy('country', 'united')
            .order_by_fuzzy(['nickname', 'country'])
            .all(connection)
        )
        assert [row.country for row in rows] == ['United States', 'United Kingdom']

    def test_ordering_disabled_has_no_relevance_column(self, core_query, connection):
        """Without ordering the projection is unchanged."""
        rows = core_query().where_fuzzy('name', 'jd', enable_ordering=False).all(connection)

        assert sorted(names(rows)) == ['Jane Doe', 'John Doe']
        assert '_fuzzy_relevance_' not in rows[0]._fields

    def test_custom_relevance_label(self, core_query, connection):
        """The projected column name is configurable."""
        rows = core_query(relevance_label='score').where_fuzzy('name', 'jd').all(connection)
        assert 'score' in rows[0]._fields

    def test_heavier_matcher_weights(self, users, connection):
        """Registry weights change the ranking."""
        registry = MatcherRegistry.default().with_weights({'times_in_string': 1000})
        rows = (
            FuzzyQuery(select(users), registry=registry)
            .where_fuzzy('name', 'o')
            .all(connection)
        )
        assert names(rows)[0] == 'John Doe'


class TestExecutionHelpers:
    """first, count and paginate."""

    def test_first(self, core_query, connection):
        """first() returns the best row."""
        row = core_query().where_fuzzy('country', 'un').first(connection)
        assert row.country == 'United States'

    def test_first_without_match(self, core_query, connection):
        """first() returns None when nothing matches."""
        assert core_query().where_fuzzy('name', 'zzz').first(connection) is None

    def test_count(self, core_query, connection):
        """count() ignores ordering and projection."""
        assert core_query().where_fuzzy('name', 'doe').count(connection) == 4

    def test_paginate(self, orm_query, session):
        """Pages are 1-based and keep relevance order."""
        query = orm_query().where_fuzzy('name', 'doe')

        first = query.paginate(session, per_page=3, page=1, scalars=True)
        second = query.paginate(session, per_page=3, page=2, scalars=True)

        assert first.total == 4
        assert first.pages == 2
        assert len(first.items) == 3
        assert len(second.items) == 1
        assert second.has_next is False
        assert {user.id for user in first.items + second.items} == {1, 2, 3, 4}

    def test_paginate_past_the_end(self, core_query, connection):
        """A page after the last one is empty."""
        page = core_query().where_fuzzy('name', 'doe').paginate(connection, per_page=10, page=5)

        assert page.items == []
        assert page.total == 4

    def test_orm_attributes_as_fields(self, orm_query, user_model, session):
        """ORM attributes work wherever names do."""
        users = (
            orm_query()
            .where_fuzzy(user_model.name, 'jad')
            .order_by_fuzzy(user_model.name)
            .scalars(session)
        )
        assert names(users) == ['Jane Doe']


class TestNonAsciiValues:
    """Accented capitals."""

    def test_identical_term_finds_row(self, users, core_query, connection):
        """A term spelled like the stored value finds it."""
        connection.execute(insert(users).values(
            id=5, name='Émile Zola', nickname='zola', country='France',
        ))

        rows = core_query().where_fuzzy('name', 'Émile Zola').all(connection)
        assert names(rows) == ['Émile Zola']

    def test_partial_term_finds_row(self, users, core_query, connection):
        """Prefix matching keeps the accented capital."""
        connection.execute(insert(users).values(
            id=5, name='Émile Zola', nickname='zola', country='France',
        ))

        rows = core_query().where_fuzzy('name', 'Émi').all(connection)
        assert names(rows) == ['Émile Zola']


class TestFieldOrderingTies:
    """order_by_fuzzy ties fall back to row order."""

    def test_tie_ignores_unnamed_terms(self, core_query, connection):
        """John and Jane tie on name; Jane's country match does not reorder them."""
        rows = (
            core_query()
            .where_fuzzy('name', 'jd')
            .or_where_fuzzy('country', 'kingdom')
            .order_by_fuzzy('name')
            .all(connection)
        )

        assert names(rows) == ['John Doe', 'Jane Doe']
        assert relevance(rows[1]) > relevance(rows[0])

    def test_matches_manual_sort(self, users, registry, core_query, connection):
        """Two named fields sort like (score1 desc, score2 desc, id asc)."""
        rows = (
            core_query()
            .where_fuzzy('name', 'doe')
            .or_where_fuzzy('country', 'united')
            .order_by_fuzzy(['country', 'name'])
            .all(connection)
        )

        def field_score(field, term):
            query = FuzzyQuery(select(users.c.id), registry=registry).where_fuzzy(field, term)
            return {row.id: relevance(row) for row in query.all(connection)}

        country = field_score('country', 'united')
        name = field_score('name', 'doe')
        expected = sorted(
            (row.id for row in rows),
            key=lambda user_id: (-country.get(user_id, 0), -name.get(user_id, 0), user_id),
        )

        assert [row.id for row in rows] == expected


class TestScoringProperties:
    """Order and floor properties over the sample data."""

    def test_sibling_order_keeps_totals(self, core_query, connection):
        """Swapping OR siblings changes no row's total."""
        forward = (
            core_query()
            .where_fuzzy('name', 'ed')
            .or_where_fuzzy('country', 'italy')
            .all(connection)
        )
        backward = (
            core_query()
            .where_fuzzy('country', 'italy')
            .or_where_fuzzy('name', 'ed')
            .all(connection)
        )

        assert {row.id: relevance(row) for row in forward} == pytest.approx(
            {row.id: relevance(row) for row in backward}
        )

    def test_count_never_grows_with_threshold(self, core_query, connection):
        """Raising the floor can only drop rows."""
        counts = [
            core_query()
            .where_fuzzy('name', 'doe')
            .or_where_fuzzy('country', 'un')
            .with_minimum_relevance(threshold)
            .count(connection)
            for threshold in (0, 10, 40, 80, 120, 160, 200, 400)
        ]

        assert counts[0] == 4
        assert all(later <= earlier for earlier, later in zip(counts, counts[1:]))
        assert counts[-1] == 0
