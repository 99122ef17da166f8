"""pytest plugin for selectorkit.

Provides fixtures:
    css_config: Builder configuration (override in conftest.py)
    css: CssSelectorBuilder facade

Configuration (pytest.ini or pyproject.toml):
    css_strict_combinators: Reject unknown combinators (default: true)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from selectorkit.presentation.pytest_plugin.fixtures import css, css_config

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = ["css", "css_config"]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "css_strict_combinators",
        "Reject combinators other than ' ', '+', '~', '>' (default: true)",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "css: mark test as selector construction test",
    )
