"""
==========================
Common SQL Query Patterns.
==========================

This module provides keyword-argument entry points on top of QueryBuilder
for callers that describe a whole query at once instead of chaining calls.

Pattern Functions:
- select_builder: Build a complete SELECT statement from keyword arguments
- pagination_builder: Calculate LIMIT and OFFSET values for a page

Usage:
    from sql.common_queries import pagination_builder, select_builder

    page = pagination_builder(page=3, page_size=25)
    query = select_builder(
        dialect='mariadb',
        table='customers',
        columns=['customer_id', 'customer_name'],
        where_conditions=[('status', "'active'")],
        order_by='customer_name',
        **page
    )
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from sql.dialects import Dialect
from sql.query_builder import Conditions, QueryBuilder


def select_builder(
    dialect: Union[Dialect, str],
    table: str,
    columns: Optional[Sequence[str]] = None,
    where_conditions: Optional[Conditions] = None,
    datetime_conditions: Optional[Conditions] = None,
    placeholder_conditions: Optional[Conditions] = None,
    values: Optional[Mapping[str, Any]] = None,
    joins: Optional[List[Dict[str, str]]] = None,
    order_by: Optional[str] = None,
    descending: bool = False,
    index: Optional[str] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    distinct: bool = False
) -> str:
    """
    Build a SELECT statement in one call.

    Args:
        dialect: Dialect member or name
        table: Table name
        columns: Columns to select; all columns if omitted
        where_conditions: (column, value) pairs used verbatim
        datetime_conditions: (column, value) pairs rendered as date literals
        placeholder_conditions: (column, placeholder) pairs
        values: Placeholder token -> substitution value
        joins: List of INNER JOIN definitions
            - table: Joined table
            - on: Join condition
        order_by: ORDER BY column
        descending: Sort descending instead of ascending
        index: Index hint name
        limit: Row limit
        offset: Row offset (MariaDB only)
        distinct: Use SELECT DISTINCT

    Returns:
        SQL SELECT statement
    """
    builder = QueryBuilder(dialect)

    if columns:
        builder.select_columns(columns)
    if distinct:
        builder.distinct()

    builder.from_table(table)

    if index:
        builder.use_index(index)

    for join in joins or []:
        builder.inner_join(join['table'], join['on'])

    if where_conditions:
        builder.where(where_conditions)
    if datetime_conditions:
        builder.where(datetime_conditions, is_datetime=True)
    if placeholder_conditions:
        builder.where_with_placeholder(placeholder_conditions)

    for placeholder, value in (values or {}).items():
        builder.set_value(placeholder, value)

    if order_by:
        builder.order_by(order_by, ascending=not descending)

    if limit is not None:
        builder.limit(limit)
    if offset is not None:
        builder.offset(offset)

    return builder.render()


def pagination_builder(page: int, page_size: int) -> Dict[str, int]:
    """
    Calculate LIMIT and OFFSET for pagination.

    Args:
        page: Page number (1-based)
        page_size: Number of records per page

    Returns:
        Dictionary with limit and offset values

    Raises:
        ValueError: If page is below 1 or page_size is negative
    """
    if page < 1:
        raise ValueError(f"page must be 1 or greater, got {page}")
    if page_size < 0:
        raise ValueError(f"page_size must not be negative, got {page_size}")

    offset = (page - 1) * page_size
    return {
        'limit': page_size,
        'offset': offset
    }
