"""
=======================================
SQL query construction package.
=======================================

This package assembles SQL SELECT statement text for a MariaDB-like and an
Oracle-like dialect. It builds strings only; executing them is left to the
caller's database driver.

The package follows a clear organization:
    - dialects.py: Dialect enum, reserved keywords, quoting and date literals
    - query_builder.py: QueryBuilder fluent accumulator
    - common_queries.py: Keyword-argument builders (_builder suffix)

Architecture:
    - common_queries.py imports from query_builder.py (not vice versa)
    - query_builder.py imports from dialects.py (not vice versa)
    - Rendering is pure (no side effects besides debug logging)

Example:
    >>> from sql import Dialect, QueryBuilder
    >>>
    >>> query = (
    ...     QueryBuilder(Dialect.ORACLE)
    ...     .select_columns(['id', 'USER'])
    ...     .from_table('accounts')
    ...     .limit(10)
    ...     .render()
    ... )
    >>> query
    'SELECT id, "USER" FROM accounts FETCH FIRST 10 ROWS ONLY'
"""

__version__ = "1.0.0"
__all__ = [
    # Dialects
    'Dialect', 'DialectError', 'RESERVED_KEYWORDS',
    'escape_identifier', 'format_datetime',
    # Builders
    'QueryBuilder', 'select_builder', 'pagination_builder'
]

from .common_queries import pagination_builder, select_builder
from .dialects import (
    RESERVED_KEYWORDS,
    Dialect,
    DialectError,
    escape_identifier,
    format_datetime,
)
from .query_builder import QueryBuilder
