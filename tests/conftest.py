"""
Pytest configuration for the reactive-unwrap test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- A loguru capture fixture for diagnostics
- Helpers to parse snippets and run the migration in memory
"""

import os
import shutil
import tempfile
from pathlib import Path

# Must be set before reactive_unwrap configures logging on import
os.environ.setdefault("REACTIVE_UNWRAP_MACHINE_MODE", "1")

import pytest
from loguru import logger

from reactive_unwrap.logging_config import setup_logging
from reactive_unwrap.migration import (
    MigrationResult,
    NameRegistry,
    UniqueNameGenerator,
    find_binding_element_references,
    migrate_binding_element_references,
)
from reactive_unwrap.mutation import apply_replacements
from reactive_unwrap.parser import parse_source

PROJECT_ROOT = "/project"
FILE_PATH = "/project/src/app.ts"


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Configure pytest for quiet operation."""
    os.environ.setdefault("REACTIVE_UNWRAP_MACHINE_MODE", "1")


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, force=True)


@pytest.fixture
def log_messages():
    """
    Collect loguru messages emitted during a test.

    Usage:
        def test_something(log_messages):
            run()
            assert any("skipped" in m for m in log_messages)
    """
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


# ============================================================================
# TEMPORARY DIRECTORY FIXTURES
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory that's cleaned up after the test."""
    tmp = Path(tempfile.mkdtemp(prefix="reactive_unwrap_test_"))
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


# ============================================================================
# MIGRATION HELPERS
# ============================================================================

def run_migration(text, names, file_path=FILE_PATH, generator=None):
    """
    Parse ``text``, migrate references to ``names`` and apply the edits.

    Returns:
        (modified_text, result, skipped)
    """
    source = parse_source(text, file_path)
    references = find_binding_element_references(source, names)
    result = MigrationResult()
    skipped = migrate_binding_element_references(
        references,
        PROJECT_ROOT,
        generator or UniqueNameGenerator(NameRegistry()),
        result,
    )
    return apply_replacements(text, result.replacements), result, skipped


@pytest.fixture
def migrate():
    """Fixture form of ``run_migration``."""
    return run_migration
