"""pytest fixtures for selector construction.

User overrides css_config in their conftest.py.
"""

from __future__ import annotations

import pytest

from selectorkit.domain.model.configuration import BuilderConfig
from selectorkit.presentation.api.facade import CssSelectorBuilder

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_ini_bool(config: pytest.Config, name: str, default: bool) -> bool:
    """Get boolean ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        Parsed boolean

    Raises:
        pytest.UsageError: If value is not a recognized boolean
    """
    value = config.getini(name)
    if not value:
        return default
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise pytest.UsageError(f"{name} must be a boolean, got {value!r}")


@pytest.fixture(scope="session")
def css_config(request: pytest.FixtureRequest) -> BuilderConfig:
    """Builder configuration.

    Reads css_strict_combinators from pytest.ini (default: true).
    User overrides this fixture in their conftest.py.

    Returns:
        BuilderConfig
    """
    strict = _get_ini_bool(request.config, "css_strict_combinators", default=True)
    return BuilderConfig(strict_combinators=strict)


@pytest.fixture(scope="session")
def css(css_config: BuilderConfig) -> CssSelectorBuilder:
    """Selector builder facade configured by css_config.

    Returns:
        CssSelectorBuilder instance
    """
    return CssSelectorBuilder(css_config)
