"""
=========================================================
Command-line entry point for the SQL query builder.
=========================================================

Builds one SELECT statement from command-line options and prints it. This is
a thin wrapper over sql.query_builder.QueryBuilder: every option maps to one
builder call and the rendered text is written to stdout.

Architecture:
    1. Configuration (core.config) - default dialect, logging settings
    2. Application Logging (core.logger)
    3. Query Assembly (sql.query_builder)

Usage:
    # MariaDB query with index hint, placeholder and pagination
    python main.py --dialect mariadb --select id name DATE --distinct \\
        --from users --index idx_users_name \\
        --where-placeholder join_date=?joindate --set ?joindate=SYSDATE \\
        --join "orders:users.id = orders.user_id" \\
        --order-by name --limit 10 --offset 5

    # Oracle query with a timestamp filter
    python main.py --dialect oracle --from events \\
        --where "event_time=2024-01-01 10:00:00" --datetime

Example:
    >>> from main import main
    >>> exit_code = main(['--from', 'users', '--select', 'id', 'name'])
    Generated Query: SELECT id, name FROM users
"""

import argparse
import sys
from typing import Optional, Sequence, Tuple

from core.config import config
from core.logger import get_logger, setup_logging
from sql.dialects import Dialect, DialectError
from sql.query_builder import QueryBuilder

logger = get_logger(__name__)


class QueryBuilderCLIError(Exception):
    """Exception raised for malformed command-line query options."""
    pass


def parse_pair(text: str, separator: str, option: str) -> Tuple[str, str]:
    """
    Split an option value into two parts at the first separator.

    Args:
        text: Raw option value (e.g. 'status=active')
        separator: Separator character ('=' or ':')
        option: Option name used in error messages

    Returns:
        Tuple of (left, right) parts, left stripped of whitespace

    Raises:
        QueryBuilderCLIError: If the separator is missing or the left part is empty
    """
    left, sep, right = text.partition(separator)
    left = left.strip()
    if not sep or not left:
        raise QueryBuilderCLIError(
            f"{option} expects 'name{separator}value', got '{text}'"
        )
    return left, right


def build_query(args: argparse.Namespace) -> str:
    """
    Translate parsed options into builder calls and render the query.

    Args:
        args: Namespace produced by create_parser()

    Returns:
        Rendered SQL text

    Raises:
        DialectError: If the dialect name is unknown
        QueryBuilderCLIError: If a pair option is malformed
    """
    dialect = Dialect.from_name(args.dialect) if args.dialect else config.default_dialect
    builder = QueryBuilder(dialect)

    if args.select:
        builder.select_columns(args.select)
    if args.distinct:
        builder.distinct()

    if not args.table:
        logger.warning("⚠️  No table given (--from); query will render 'FROM ' with no name")
    builder.from_table(args.table or '')

    if args.index:
        builder.use_index(args.index)

    if args.where:
        conditions = [parse_pair(item, '=', '--where') for item in args.where]
        builder.where(conditions, is_datetime=args.datetime)

    if args.where_placeholder:
        conditions = [parse_pair(item, '=', '--where-placeholder') for item in args.where_placeholder]
        builder.where_with_placeholder(conditions)

    for item in args.set or []:
        placeholder, value = parse_pair(item, '=', '--set')
        builder.set_value(placeholder, value)

    for item in args.join or []:
        table, on_condition = parse_pair(item, ':', '--join')
        builder.inner_join(table, on_condition.strip())

    if args.order_by:
        builder.order_by(args.order_by, ascending=not args.desc)

    if args.limit is not None:
        builder.limit(args.limit)
    if args.offset is not None:
        builder.offset(args.offset)

    logger.debug(f"Built {dialect.value} query for table '{args.table}'")
    return builder.render()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the query builder CLI."""
    parser = argparse.ArgumentParser(
        description="SQL Query Builder - render a SELECT statement for MariaDB or Oracle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Simple select
  python main.py --from users --select id name

  # Oracle with index hint and row limit
  python main.py --dialect oracle --from users --index idx_users_name --limit 10

  # Placeholder resolved at render time
  python main.py --from users --where-placeholder join_date=?jd --set ?jd=SYSDATE

Notes:
  - Column names DATE, USER, ORDER, GROUP and INDEX are quoted automatically
  - Oracle output never includes an offset
        """
    )

    parser.add_argument(
        '--dialect',
        type=str,
        default=None,
        help='SQL dialect: mariadb, mysql or oracle (default: QUERY_DIALECT or mariadb)'
    )
    parser.add_argument(
        '--from',
        dest='table',
        type=str,
        default=None,
        help='Table to select from'
    )
    parser.add_argument(
        '--select',
        nargs='+',
        metavar='COLUMN',
        help='Columns to select (default: *)'
    )
    parser.add_argument(
        '--distinct',
        action='store_true',
        help='Select distinct rows'
    )
    parser.add_argument(
        '--where',
        nargs='+',
        metavar='COLUMN=VALUE',
        help='Equality conditions, values used verbatim'
    )
    parser.add_argument(
        '--datetime',
        action='store_true',
        help='Render --where values as date/time literals'
    )
    parser.add_argument(
        '--where-placeholder',
        nargs='+',
        metavar='COLUMN=TOKEN',
        help='Equality conditions against placeholder tokens'
    )
    parser.add_argument(
        '--set',
        nargs='+',
        metavar='TOKEN=VALUE',
        help='Substitution values for placeholder tokens'
    )
    parser.add_argument(
        '--join',
        action='append',
        metavar='TABLE:CONDITION',
        help='INNER JOIN clause (repeatable)'
    )
    parser.add_argument(
        '--order-by',
        type=str,
        metavar='COLUMN',
        help='ORDER BY column'
    )
    parser.add_argument(
        '--desc',
        action='store_true',
        help='Sort descending'
    )
    parser.add_argument(
        '--index',
        type=str,
        metavar='NAME',
        help='Index hint'
    )
    parser.add_argument(
        '--limit',
        type=int,
        help='Maximum number of rows'
    )
    parser.add_argument(
        '--offset',
        type=int,
        help='Rows to skip (MariaDB only)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging (DEBUG level)'
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Command-line interface for the query builder.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code: 0 success, 1 error, 130 user interrupt
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(
        log_level='DEBUG' if args.verbose else config.log_level,
        log_file=config.log_file,
        log_dir=config.log_dir,
        use_colors=config.use_colors
    )

    try:
        query = build_query(args)
        print(f"Generated Query: {query}")
        return 0

    except (DialectError, QueryBuilderCLIError) as e:
        logger.error(f"❌ Invalid query options: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("⚠️  Operation interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"❌ Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
