"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

import json
import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from template_renderers.template_engine import RenderContext


@pytest.fixture
def project_root() -> Path:
    """
    Return the project root directory.

    Returns:
        Path: Absolute path to the project root directory.
    """
    return Path(__file__).parent.parent


@pytest.fixture
def fixtures_dir() -> Path:
    """
    Return the test fixtures directory path.

    Returns:
        Path: Absolute path to the test fixtures directory.
    """
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def utc_context() -> RenderContext:
    """
    Return a render context pinned to UTC and US English.

    Returns:
        RenderContext: Context with deterministic zone and locale.
    """
    return RenderContext(locale="en_US", timezone="UTC")


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """
    Create a valid temporary configuration file.

    Args:
        tmp_path: Pytest's temporary directory fixture.

    Returns:
        Path: Path to the temporary configuration file.
    """
    config_file = tmp_path / "config.json"
    config_file.write_text(
        json.dumps(
            {
                "rendering": {"locale": "en_US", "timezone": "UTC"},
                "logging": {"level": "INFO", "log_file": str(tmp_path / "app.log")},
            }
        )
    )
    return config_file


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """Restore root logger handlers replaced by configure_logging()."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove TEMPLATE_RENDERERS_* variables so tests see file values only."""
    for suffix in (
        "LOCALE",
        "TIMEZONE",
        "QR_CODE_URL",
        "SHORTEN_URL",
        "USER_AGENT",
        "LOG_LEVEL",
        "LOG_FILE",
        "REDACT_CARD_NUMBERS",
    ):
        monkeypatch.delenv(f"TEMPLATE_RENDERERS_{suffix}", raising=False)


def make_response(status_code: int = 200, content: bytes = b"") -> MagicMock:
    """Build a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    return response


@pytest.fixture
def mock_response():
    """
    Return a factory for mock HTTP responses.

    Returns:
        Callable building a MagicMock with status_code and content.
    """
    return make_response
