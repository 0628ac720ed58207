"""
===================================
SQL dialect rules for query output.
===================================

This module holds every per-dialect formatting rule used by the query
builder. Two dialects are supported: a MariaDB-like dialect and an
Oracle-like dialect.

Dialect Differences:
    MariaDB:
        - Reserved identifiers quoted with back-ticks
        - Date literals rendered as plain quoted strings
        - FORCE INDEX(...) after the table name
        - LIMIT / OFFSET pagination

    Oracle:
        - Reserved identifiers quoted with double quotes
        - Date literals wrapped in TO_TIMESTAMP(...)
        - /*+ INDEX(...) */ optimizer hint after SELECT
        - FETCH FIRST n ROWS ONLY pagination (no offset)

Example:
    >>> from sql.dialects import Dialect, escape_identifier, format_datetime
    >>>
    >>> escape_identifier('DATE', Dialect.ORACLE)
    '"DATE"'
    >>> format_datetime('2024-01-01 10:00:00', Dialect.MARIADB)
    "'2024-01-01 10:00:00'"
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Optional, Union

# Identifiers that must be quoted when used as column names
RESERVED_KEYWORDS = frozenset({'DATE', 'USER', 'ORDER', 'GROUP', 'INDEX'})

# Text pattern used for date/time values before dialect wrapping
DATETIME_FORMAT = '%Y-%m-%d %H:%M:%S'
ORACLE_TIMESTAMP_MASK = 'YYYY-MM-DD HH24:MI:SS'


class DialectError(ValueError):
    """Exception raised when a dialect name cannot be resolved."""
    pass


class Dialect(Enum):
    """Supported SQL dialects.

    The enum value is the canonical lower-case dialect name.
    """

    MARIADB = 'mariadb'
    ORACLE = 'oracle'

    @property
    def quote_char(self) -> str:
        """Get the identifier quote character for this dialect."""
        return '`' if self is Dialect.MARIADB else '"'

    @classmethod
    def from_name(cls, name: Union[str, 'Dialect']) -> 'Dialect':
        """Resolve a dialect from its name or a known alias.

        Args:
            name: Dialect name (case-insensitive) or a Dialect member

        Returns:
            Matching Dialect member

        Raises:
            DialectError: If the name is not a known dialect

        Example:
            >>> Dialect.from_name('MySQL')
            <Dialect.MARIADB: 'mariadb'>
        """
        if isinstance(name, cls):
            return name

        key = (name or '').strip().lower()
        if key not in _DIALECT_ALIASES:
            available = ', '.join(sorted(_DIALECT_ALIASES))
            raise DialectError(f"Unknown dialect '{name}'. Available: {available}")
        return _DIALECT_ALIASES[key]


_DIALECT_ALIASES = {
    'mariadb': Dialect.MARIADB,
    'mysql': Dialect.MARIADB,
    'oracle': Dialect.ORACLE,
}


def escape_identifier(name: str, dialect: Dialect) -> str:
    """Quote an identifier if it is a reserved keyword.

    Matching is exact and case-sensitive, so 'date' and 'DATE_ID' are
    returned unchanged.

    Args:
        name: Column or identifier token
        dialect: Target dialect

    Returns:
        Quoted identifier for reserved keywords, otherwise the name unchanged
    """
    if name in RESERVED_KEYWORDS:
        return f"{dialect.quote_char}{name}{dialect.quote_char}"
    return name


def format_datetime(value: Union[str, date, datetime], dialect: Dialect) -> str:
    """Wrap a date/time value as a dialect-specific literal.

    Strings are wrapped verbatim with no validation of their format.
    date and datetime objects are first rendered as 'YYYY-MM-DD HH:MM:SS'.

    Args:
        value: Date/time text or a date/datetime object
        dialect: Target dialect

    Returns:
        SQL date literal

    Example:
        >>> format_datetime('2024-01-01 10:00:00', Dialect.ORACLE)
        "TO_TIMESTAMP('2024-01-01 10:00:00', 'YYYY-MM-DD HH24:MI:SS')"
    """
    if isinstance(value, datetime):
        text = value.strftime(DATETIME_FORMAT)
    elif isinstance(value, date):
        text = datetime(value.year, value.month, value.day).strftime(DATETIME_FORMAT)
    else:
        text = value

    if dialect is Dialect.MARIADB:
        return f"'{text}'"
    return f"TO_TIMESTAMP('{text}', '{ORACLE_TIMESTAMP_MASK}')"


def to_sql_text(value: Any, formatter: Optional[Callable[[Any], str]] = None) -> str:
    """Convert a substitution value to its SQL text.

    Args:
        value: Any value
        formatter: Optional callable producing the text; defaults to str()

    Returns:
        Text inserted in place of a placeholder
    """
    if formatter is not None:
        return formatter(value)
    return str(value)
