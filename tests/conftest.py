"""
Shared pytest fixtures for cargo2port tests.

These fixtures provide sample lockfiles, loggers, and fake HTTP responses
so that no test touches the network.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tests.fixtures import (
    MockLogger,
    make_response,
    SAMPLE_LOCKFILE_OTHER,
    SAMPLE_LOCKFILE_V1,
    SAMPLE_LOCKFILE_V3,
)


# =============================================================================
# Logger Fixtures
# =============================================================================

@pytest.fixture
def mock_logger():
    """
    Create a logger that captures messages per level.

    Usage:
        def test_something(mock_logger):
            some_function(logger=mock_logger)
            mock_logger.assert_logged('debug', 'expected')
    """
    return MockLogger()


# =============================================================================
# Lockfile Fixtures
# =============================================================================

@pytest.fixture
def lockfile_path(tmp_path) -> Path:
    """Write the v3 sample lockfile and return its path."""
    path = tmp_path / "grepper" / "Cargo.lock"
    path.parent.mkdir()
    path.write_text(SAMPLE_LOCKFILE_V3)
    return path


@pytest.fixture
def other_lockfile_path(tmp_path) -> Path:
    """Write the second sample lockfile and return its path."""
    path = tmp_path / "tool" / "Cargo.lock"
    path.parent.mkdir()
    path.write_text(SAMPLE_LOCKFILE_OTHER)
    return path


@pytest.fixture
def v1_lockfile_path(tmp_path) -> Path:
    """Write the format v1 sample lockfile and return its path."""
    path = tmp_path / "legacy" / "Cargo.lock"
    path.parent.mkdir()
    path.write_text(SAMPLE_LOCKFILE_V1)
    return path


# =============================================================================
# HTTP Fixtures
# =============================================================================

@pytest.fixture
def fake_session():
    """
    Create a requests session mock whose get() returns a configurable response.

    Usage:
        def test_download(fake_session):
            fake_session.get.return_value = make_response(b"...")
    """
    session = MagicMock()
    session.get.return_value = make_response()
    return session


@pytest.fixture
def non_interactive(monkeypatch):
    """Force the non-interactive progress path."""
    monkeypatch.setattr("cargo2port.progress.is_interactive_terminal", lambda: False)
