"""pytest plugin for tagfilter.

Provides fixtures:
    tag_filter_config: Declared require/exclude tags (override in conftest.py)
    tag_filters: TagFilter per configured side

Configuration (pytest.ini or pyproject.toml):
    tagfilter_require: Required tags, one per line
    tagfilter_exclude: Excluded tags, one per line

The plugin does not deselect items: applying the filters to descriptors
is up to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from tagfilter.presentation.pytest_plugin.fixtures import (
    EXCLUDE_INI,
    REQUIRE_INI,
    config_from_ini,
    tag_filter_config,
    tag_filters,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "config_from_ini",
    "tag_filter_config",
    "tag_filters",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options for declared tags."""
    parser.addini(REQUIRE_INI, "Tags a test must carry at least one of", type="linelist", default=[])
    parser.addini(EXCLUDE_INI, "Tags a test must carry none of", type="linelist", default=[])
