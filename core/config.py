"""
==========================================
Configuration management for query tools.
==========================================

Loads all configuration from environment variables (.env file) and provides
a centralized Config singleton for application-wide access.

The configuration system covers:
- Default SQL dialect for the command line
- Log level, log file and console colour settings

Example:
    >>> from core.config import config
    >>>
    >>> dialect = config.default_dialect
    >>> print(f"Rendering for {dialect.value}, log level {config.log_level}")
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from sql.dialects import Dialect

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


@dataclass
class BuilderConfig:
    """Query builder settings.

    Attributes:
        dialect_name: Default dialect name (mariadb, mysql or oracle)
    """

    dialect_name: str

    def get_dialect(self) -> Dialect:
        """Resolve the configured dialect name.

        Returns:
            Dialect member

        Raises:
            DialectError: If the configured name is unknown
        """
        return Dialect.from_name(self.dialect_name)


@dataclass
class LoggingConfig:
    """Logging settings.

    Attributes:
        level: Root log level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        log_file: Optional log file name
        log_dir: Directory for the log file
        use_colors: Coloured console output
    """

    level: str
    log_file: Optional[str]
    log_dir: str
    use_colors: bool


class Config:
    """Centralized configuration manager.

    Attributes:
        builder: BuilderConfig instance
        logging: LoggingConfig instance

    Properties:
        default_dialect: Resolved default Dialect
        log_level: Root log level name
        log_file: Optional log file name
        log_dir: Log directory
        use_colors: Coloured console output flag
    """

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.builder = BuilderConfig(
            dialect_name=os.getenv('QUERY_DIALECT', 'mariadb')
        )

        self.logging = LoggingConfig(
            level=os.getenv('LOG_LEVEL', 'INFO').upper(),
            log_file=os.getenv('LOG_FILE') or None,
            log_dir=os.getenv('LOG_DIR', 'logs'),
            use_colors=os.getenv('LOG_COLORS', 'true').strip().lower() in _TRUE_VALUES
        )

    @property
    def default_dialect(self) -> Dialect:
        """Get the default dialect (raises DialectError if misconfigured)."""
        return self.builder.get_dialect()

    @property
    def log_level(self) -> str:
        """Get root log level name."""
        return self.logging.level

    @property
    def log_file(self) -> Optional[str]:
        """Get optional log file name."""
        return self.logging.log_file

    @property
    def log_dir(self) -> str:
        """Get log directory."""
        return self.logging.log_dir

    @property
    def use_colors(self) -> bool:
        """Get coloured console output flag."""
        return self.logging.use_colors


# Global configuration instance
config = Config()
