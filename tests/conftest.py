"""Shared pytest fixtures for the ENG test-suite."""

import logging
import textwrap
from pathlib import Path

import pytest


def pytest_configure(config):
    """Register markers for pytest."""
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def _reset_englang_logger():
    """The CLI installs a handler and disables propagation; undo that between tests."""
    logger = logging.getLogger("englang")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_source(tmp_path: Path):
    """Write dedented source text to ``tmp_path / name`` and return the path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text).lstrip("\n"), encoding="utf-8")
        return path

    return _write
