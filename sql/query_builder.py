"""
============================
Fluent SELECT query builder.
============================

This module provides QueryBuilder, an accumulator that records the parts of
a SELECT statement through chained method calls and renders them into a
single SQL string for one dialect.

The builder is a text assembler only. It does not parse, validate or execute
SQL, and it performs no quoting beyond reserved keyword escaping.

Clause Methods:
- select_columns: Add columns to the select list (cumulative)
- from_table: Set the target table
- distinct: Emit DISTINCT before the column list
- where: Add "column = value" conditions, optionally as date literals
- where_with_placeholder: Add conditions whose value is a placeholder token
- set_value: Register the text substituted for a placeholder token
- inner_join: Add an INNER JOIN clause
- order_by: Set the single ORDER BY column
- use_index: Set an index hint
- limit / offset: Set pagination values
- render: Produce the SQL text

Usage:
    from sql.dialects import Dialect
    from sql.query_builder import QueryBuilder

    sql = (
        QueryBuilder(Dialect.MARIADB)
        .select_columns(['id', 'name', 'DATE'])
        .distinct()
        .from_table('users')
        .use_index('idx_users_name')
        .where_with_placeholder([('join_date', '?joindate')])
        .set_value('?joindate', 'SYSDATE')
        .inner_join('orders', 'users.id = orders.user_id')
        .order_by('name')
        .limit(10)
        .offset(5)
        .render()
    )
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from core.logger import get_logger
from sql.dialects import (
    RESERVED_KEYWORDS,
    Dialect,
    escape_identifier,
    format_datetime,
    to_sql_text,
)

logger = get_logger(__name__)

Conditions = Union[Sequence[Tuple[str, Any]], Mapping[str, Any]]


def _condition_pairs(conditions: Conditions) -> List[Tuple[str, Any]]:
    """Normalize a mapping or sequence of pairs into an ordered list of pairs."""
    if isinstance(conditions, Mapping):
        return list(conditions.items())
    return list(conditions)


class QueryBuilder:
    """Accumulate SELECT clauses and render them for one SQL dialect.

    Every clause method returns the builder itself so calls can be chained.
    Clause fragments are rendered when the method is called; only
    placeholder substitution is deferred until render().

    Attributes:
        dialect: Dialect fixed at construction
        selected_columns: Escaped column tokens in call order
        table_name: Target table ('' until from_table is called)
        is_distinct: Whether DISTINCT is emitted
        where_clauses: Rendered "column = value" fragments
        join_clauses: Rendered INNER JOIN fragments
        order_by_clause: Rendered "column ASC|DESC" or None
        index_hint: Index name or None
        limit_value: Row limit, negative means no limit
        offset_value: Row offset, only values above zero are emitted
        placeholder_values: Placeholder token to substitution text
        reserved_keywords: Identifiers quoted when selected or filtered on

    Example:
        >>> builder = QueryBuilder(Dialect.MARIADB)
        >>> builder.select_columns(['id', 'name']).from_table('users').render()
        'SELECT id, name FROM users'
    """

    def __init__(self, dialect: Union[Dialect, str]):
        """
        Initialize an empty builder.

        Args:
            dialect: Dialect member or dialect name (e.g. 'oracle')

        Raises:
            DialectError: If a dialect name cannot be resolved
        """
        self._dialect = Dialect.from_name(dialect)
        self.reserved_keywords = RESERVED_KEYWORDS

        self.selected_columns: List[str] = []
        self.table_name = ''
        self.is_distinct = False
        self.where_clauses: List[str] = []
        self.join_clauses: List[str] = []
        self.order_by_clause: Optional[str] = None
        self.index_hint: Optional[str] = None
        self.limit_value = -1
        self.offset_value = -1
        self.placeholder_values: Dict[str, str] = {}

        logger.debug(f"Created {self._dialect.value} query builder")

    @property
    def dialect(self) -> Dialect:
        """Get the dialect this builder renders for."""
        return self._dialect

    def _escape(self, name: str) -> str:
        return escape_identifier(name, self._dialect)

    # =================
    # Clause methods
    # =================

    def select_columns(self, columns: Sequence[str]) -> 'QueryBuilder':
        """
        Append columns to the select list.

        Args:
            columns: Column names; reserved keywords are quoted

        Returns:
            This builder
        """
        for column in columns:
            self.selected_columns.append(self._escape(column))
        return self

    def from_table(self, name: str) -> 'QueryBuilder':
        """Set the target table, used verbatim."""
        self.table_name = name
        return self

    def distinct(self) -> 'QueryBuilder':
        """Emit DISTINCT before the column list."""
        self.is_distinct = True
        return self

    def where(self, conditions: Conditions, is_datetime: bool = False) -> 'QueryBuilder':
        """
        Add equality conditions joined later with AND.

        Args:
            conditions: (column, value) pairs or a column -> value mapping
            is_datetime: If True, wrap each value as a dialect date literal;
                otherwise values are used verbatim

        Returns:
            This builder

        Example:
            >>> QueryBuilder('oracle').where(
            ...     [('event_time', '2024-01-01 10:00:00')], is_datetime=True
            ... ).where_clauses
            ["event_time = TO_TIMESTAMP('2024-01-01 10:00:00', 'YYYY-MM-DD HH24:MI:SS')"]
        """
        for column, value in _condition_pairs(conditions):
            if is_datetime:
                formatted = format_datetime(value, self._dialect)
            else:
                formatted = value if isinstance(value, str) else str(value)
            self.where_clauses.append(f"{self._escape(column)} = {formatted}")
        return self

    def where_with_placeholder(self, conditions: Conditions) -> 'QueryBuilder':
        """
        Add conditions whose value is a placeholder token.

        The token is stored as-is and replaced at render time by the text
        registered with set_value(). Tokens without a value stay verbatim.

        Args:
            conditions: (column, placeholder) pairs or a mapping

        Returns:
            This builder
        """
        for column, placeholder in _condition_pairs(conditions):
            self.where_clauses.append(f"{self._escape(column)} = {placeholder}")
        return self

    def set_value(
        self,
        placeholder: str,
        value: Any,
        formatter: Optional[Callable[[Any], str]] = None
    ) -> 'QueryBuilder':
        """
        Register the substitution text for a placeholder token.

        Args:
            placeholder: Token used in where_with_placeholder()
            value: Value to substitute
            formatter: Optional callable converting value to text; str() if omitted

        Returns:
            This builder
        """
        self.placeholder_values[placeholder] = to_sql_text(value, formatter)
        return self

    def inner_join(self, table: str, on_condition: str) -> 'QueryBuilder':
        """Add an INNER JOIN clause; table and condition are used verbatim."""
        self.join_clauses.append(f"INNER JOIN {table} ON {on_condition}")
        return self

    def order_by(self, column: str, ascending: bool = True) -> 'QueryBuilder':
        """
        Set the ORDER BY column, replacing any previous one.

        Args:
            column: Column name; reserved keywords are quoted
            ascending: ASC if True, DESC otherwise

        Returns:
            This builder
        """
        direction = 'ASC' if ascending else 'DESC'
        self.order_by_clause = f"{self._escape(column)} {direction}"
        return self

    def use_index(self, index_name: str) -> 'QueryBuilder':
        """Set the index hint, replacing any previous one."""
        self.index_hint = index_name
        return self

    def limit(self, n: int) -> 'QueryBuilder':
        """Set the row limit. Negative values render no limit."""
        self.limit_value = n
        return self

    def offset(self, n: int) -> 'QueryBuilder':
        """Set the row offset. Only emitted for MariaDB with a limit."""
        self.offset_value = n
        return self

    # =================
    # Rendering
    # =================

    def _render_where(self) -> str:
        # First occurrence of each token only, one pass per token
        where_clause = " AND ".join(self.where_clauses)
        for placeholder, value in self.placeholder_values.items():
            if placeholder in where_clause:
                where_clause = where_clause.replace(placeholder, value, 1)
        return where_clause

    def _render_pagination(self) -> str:
        if self.limit_value < 0:
            return ''

        if self._dialect is Dialect.MARIADB:
            sql = f" LIMIT {self.limit_value}"
            if self.offset_value > 0:
                sql += f" OFFSET {self.offset_value}"
            return sql

        return f" FETCH FIRST {self.limit_value} ROWS ONLY"

    def render(self) -> str:
        """
        Render the accumulated state as SQL text.

        Does not modify the builder; repeated calls return the same string.

        Returns:
            SELECT statement text (no trailing semicolon)
        """
        sql = "SELECT "

        if self._dialect is Dialect.ORACLE and self.index_hint:
            sql += f" /*+ INDEX({self.table_name}, {self.index_hint}) */ "

        if not self.selected_columns:
            sql += "*"
        else:
            if self.is_distinct:
                sql += " DISTINCT  "
            sql += ", ".join(self.selected_columns)

        sql += f" FROM {self.table_name}"

        if self._dialect is Dialect.MARIADB and self.index_hint:
            sql += f" FORCE INDEX({self.index_hint}) "

        for join in self.join_clauses:
            sql += f" {join}"

        if self.where_clauses:
            sql += f" WHERE {self._render_where()}"

        if self.order_by_clause:
            sql += f" ORDER BY {self.order_by_clause}"

        sql += self._render_pagination()

        logger.debug(f"Rendered {self._dialect.value} query: {sql}")
        return sql

    def to_text_clause(self) -> TextClause:
        """
        Wrap the rendered SQL in a SQLAlchemy TextClause.

        Nothing is executed; the clause is handed to a connection by the caller.

        Returns:
            sqlalchemy TextClause over render()

        Example:
            >>> clause = QueryBuilder('mariadb').from_table('users').to_text_clause()
            >>> # with engine.connect() as conn: conn.execute(clause)
        """
        return text(self.render())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"QueryBuilder(dialect={self._dialect.value!r}, table={self.table_name!r})"
