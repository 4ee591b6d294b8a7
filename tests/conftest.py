"""Shared test fixtures."""

from pathlib import Path

import pytest
from pagewiki.config import Config, ServerConfig, WikiConfig


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    """Create an empty pages directory."""
    pages = tmp_path / "pages"
    pages.mkdir()
    return pages


@pytest.fixture
def test_config(pages_dir: Path) -> Config:
    """Create a test configuration storing pages under tmp_path.

    Uses the bundled templates.
    """
    return Config(
        server=ServerConfig(),
        wiki=WikiConfig(pages_dir=pages_dir),
    )
