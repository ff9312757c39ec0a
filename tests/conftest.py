"""Pytest configuration and shared fixtures for headinglinks tests."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from headinglinks.config.loader import ENV_VAR_MAP


@pytest.fixture
def isolated_env() -> Iterator[dict[str, str]]:
    """Provide isolated environment variables for testing.

    Removes every HEADINGLINKS_* variable and restores the original
    environment after the test.

    Yields:
        Dictionary of original environment variables
    """
    original_env = os.environ.copy()
    for name in ENV_VAR_MAP.values():
        os.environ.pop(name, None)
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def sample_document() -> str:
    """A post body with duplicate, pre-identified and nested headings."""
    return (
        "<h1>Field Guide</h1>"
        "<p>[link_to_headings]</p>"
        "<h2>Getting Started</h2>"
        "<p>Install the tools.</p>"
        '<h2 id="custom-config">Configuration</h2>'
        "<h3>Getting started!</h3>"
        "<h2>FAQ</h2>"
    )


@pytest.fixture
def sample_fields() -> dict[str, object]:
    """Field data whose labels reference the sample document headings."""
    return {
        "link_to_headings": [
            {"blog_page_headings": "Getting Started"},
            {"blog_page_headings": "configuration"},
            {"blog_page_headings": "   "},
            {"blog_page_headings": "Troubleshooting"},
        ]
    }


@pytest.fixture
def write_file(tmp_path: Path):
    """Return a helper that writes text into tmp_path and returns the path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
