"""
===============================================
Pytest suite for core/logger.py
===============================================

Sections:
---------
1. Unit tests - Logger retrieval and formatter output
2. Integration tests - Root logger handler setup

Available markers:
------------------
unit, integration

How to Execute:
---------------
All tests:          pytest tests/tests_core/test_logger.py -v
"""

import logging

import pytest

from core.logger import ColoredFormatter, get_logger, get_module_logger, setup_logging

# ====================
# Fixtures
# ====================

@pytest.fixture
def restore_root_logger():
    """Restore root logger level and handlers after a test reconfigures them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers.clear()
    root.handlers.extend(handlers)
    root.setLevel(level)


def _record(level=logging.INFO, msg="hello"):
    return logging.LogRecord('sql.query_builder', level, __file__, 1, msg, None, None)


# ===============
# 1. UNIT TESTS
# ===============

@pytest.mark.unit
def test_get_logger_with_level():
    logger = get_logger('tests.level_override', level='warning')

    assert logger.name == 'tests.level_override'
    assert logger.level == logging.WARNING


@pytest.mark.unit
def test_get_module_logger():
    assert get_module_logger('tests.module') is logging.getLogger('tests.module')


@pytest.mark.unit
def test_colored_formatter_adds_color_and_emoji():
    formatter = ColoredFormatter('%(emoji)s %(levelname)s %(message)s')

    output = formatter.format(_record(logging.ERROR, "boom"))

    assert output == "❌ \033[31mERROR\033[0m boom"


@pytest.mark.unit
def test_colored_formatter_leaves_record_untouched():
    """Other handlers still see the plain level name."""
    record = _record(logging.WARNING)

    ColoredFormatter('%(emoji)s %(levelname)s %(message)s').format(record)

    assert record.levelname == 'WARNING'
    assert not hasattr(record, 'emoji')


# ======================
# 2. INTEGRATION TESTS
# ======================

@pytest.mark.integration
def test_setup_logging_console_only(restore_root_logger):
    setup_logging(log_level='DEBUG', use_colors=False)

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)
    assert not isinstance(root.handlers[0].formatter, ColoredFormatter)


@pytest.mark.integration
def test_setup_logging_with_file(restore_root_logger, tmp_path):
    setup_logging(log_level='INFO', log_file='queries.log', log_dir=str(tmp_path / 'logs'))

    root = restore_root_logger
    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert isinstance(root.handlers[0].formatter, ColoredFormatter)

    logging.getLogger('tests.file').info("written to file")
    file_handlers[0].flush()
    file_handlers[0].close()

    content = (tmp_path / 'logs' / 'queries.log').read_text(encoding='utf-8')
    assert "tests.file - INFO - written to file" in content


@pytest.mark.integration
def test_setup_logging_no_console(restore_root_logger):
    setup_logging(console_output=False)

    assert restore_root_logger.handlers == []
