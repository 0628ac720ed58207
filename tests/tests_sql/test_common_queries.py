"""
===============================================
Pytest suite for sql/common_queries.py
===============================================

Sections:
---------
1. Unit tests - select_builder and pagination_builder
2. Integration tests - Pagination feeding select_builder
3. Edge case tests - Invalid pagination input

Available markers:
------------------
unit, integration, edge_case

How to Execute:
---------------
All tests:          pytest tests/tests_sql/test_common_queries.py -v
"""

import pytest

from sql.common_queries import pagination_builder, select_builder
from sql.dialects import Dialect
from sql.query_builder import QueryBuilder

# ===============
# 1. UNIT TESTS
# ===============

@pytest.mark.unit
def test_select_builder_minimal():
    assert select_builder(dialect='mariadb', table='users') == "SELECT * FROM users"


@pytest.mark.unit
def test_select_builder_matches_chained_builder(any_dialect):
    """Keyword form renders the same text as the equivalent chain."""
    sql = select_builder(
        dialect=any_dialect,
        table='users',
        columns=['id', 'name', 'DATE'],
        distinct=True,
        index='idx_users_name',
        joins=[{'table': 'orders', 'on': 'users.id = orders.user_id'}],
        placeholder_conditions=[('join_date', '?joindate')],
        values={'?joindate': 'SYSDATE'},
        order_by='name',
        limit=10,
        offset=5
    )

    expected = (
        QueryBuilder(any_dialect)
        .select_columns(['id', 'name', 'DATE'])
        .distinct()
        .from_table('users')
        .use_index('idx_users_name')
        .inner_join('orders', 'users.id = orders.user_id')
        .where_with_placeholder([('join_date', '?joindate')])
        .set_value('?joindate', 'SYSDATE')
        .order_by('name')
        .limit(10)
        .offset(5)
        .render()
    )
    assert sql == expected


@pytest.mark.unit
def test_select_builder_where_kinds_order():
    sql = select_builder(
        dialect=Dialect.ORACLE,
        table='events',
        where_conditions={'kind': "'login'"},
        datetime_conditions=[('created', '2024-01-01 00:00:00')],
        placeholder_conditions=[('USER', ':uid')],
        values={':uid': 42}
    )

    assert sql == (
        "SELECT * FROM events WHERE kind = 'login'"
        " AND created = TO_TIMESTAMP('2024-01-01 00:00:00', 'YYYY-MM-DD HH24:MI:SS')"
        " AND \"USER\" = 42"
    )


@pytest.mark.unit
def test_select_builder_descending():
    sql = select_builder(dialect='mariadb', table='t', order_by='ORDER', descending=True)

    assert sql == "SELECT * FROM t ORDER BY `ORDER` DESC"


@pytest.mark.unit
@pytest.mark.parametrize("page, page_size, expected", [
    (1, 25, {'limit': 25, 'offset': 0}),
    (3, 25, {'limit': 25, 'offset': 50}),
    (2, 0, {'limit': 0, 'offset': 0}),
])
def test_pagination_builder(page, page_size, expected):
    assert pagination_builder(page, page_size) == expected


# ======================
# 2. INTEGRATION TESTS
# ======================

@pytest.mark.integration
def test_pagination_into_select_builder():
    page = pagination_builder(page=3, page_size=20)

    mariadb_sql = select_builder(dialect='mariadb', table='users', **page)
    oracle_sql = select_builder(dialect='oracle', table='users', **page)

    assert mariadb_sql == "SELECT * FROM users LIMIT 20 OFFSET 40"
    assert oracle_sql == "SELECT * FROM users FETCH FIRST 20 ROWS ONLY"


# ======================
# 3. EDGE CASE TESTS
# ======================

@pytest.mark.edge_case
@pytest.mark.parametrize("page, page_size", [(0, 10), (-1, 10), (1, -1)])
def test_pagination_builder_rejects_invalid(page, page_size):
    with pytest.raises(ValueError):
        pagination_builder(page, page_size)


@pytest.mark.edge_case
def test_select_builder_zero_limit_emitted():
    assert select_builder(dialect='mariadb', table='t', limit=0) == "SELECT * FROM t LIMIT 0"
