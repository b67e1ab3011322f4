"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Mock settings/configuration
- Sample inputs and salts
- Reference digests computed directly with hashlib
"""

import hashlib
import os

import pytest
import structlog

from digest_hasher.config import Settings
from digest_hasher.hashing.hasher import DigestHasher


@pytest.fixture
def mock_settings() -> Settings:
    """
    Create mock settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        log_level="DEBUG",
        log_json=False,  # Easier to read in tests
        default_salt_bytes=16,
    )


@pytest.fixture
def hasher() -> DigestHasher:
    """
    Provide a DigestHasher using the default SHA-1 engine.

    Returns:
        DigestHasher instance
    """
    return DigestHasher()


@pytest.fixture
def sample_input() -> bytes:
    """
    Provide sample input bytes.

    Returns:
        Non-ASCII UTF-8 encoded text
    """
    return "password per l'utente città".encode("utf-8")


@pytest.fixture
def test_salt() -> bytes:
    """
    Provide a fixed salt for deterministic hashing tests.

    Returns:
        8 fixed salt bytes (NOT for production)
    """
    return bytes.fromhex("0f1e2d3c4b5a6978")


@pytest.fixture
def reference_sha1():
    """
    Provide a helper computing SHA-1 directly with hashlib.

    Returns:
        Callable taking bytes and returning the raw SHA-1 digest
    """

    def _sha1(data: bytes) -> bytes:
        return hashlib.sha1(data).digest()

    return _sha1


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_structlog():
    """
    Restore structlog defaults after each test.

    Tests calling setup_logging() would otherwise leave cached loggers behind.
    """
    yield
    structlog.reset_defaults()


def pytest_configure(config):
    """
    Configure pytest with custom markers and settings.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (API, end-to-end)"
    )
    config.addinivalue_line(
        "markers", "slow: Slow tests that may take longer to run"
    )
