"""
===================================================
Core infrastructure package for the query builder.
===================================================

This package provides centralized configuration management and logging
infrastructure used by the SQL package and the command line.

Modules:
    config: Configuration management from environment variables
    logger: Centralized logging configuration and utilities

Example:
    >>> from core.config import config
    >>> from core.logger import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info(f"Default dialect: {config.default_dialect.value}")
"""

__version__ = "0.1.0"
__all__ = ['get_logger', 'setup_logging', 'get_module_logger', 'config', 'Config']

from core.logger import get_logger, get_module_logger, setup_logging
from core.config import Config, config
