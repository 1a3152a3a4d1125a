"""pytest fixtures for tag filtering.

Provides filters built from ini configuration.
User overrides tag_filter_config in their conftest.py.
"""

from __future__ import annotations

import pytest

from tagfilter.domain.model.configuration import TagFilterConfig
from tagfilter.infrastructure.filters.tag import TagFilter

REQUIRE_INI = "tagfilter_require"
EXCLUDE_INI = "tagfilter_exclude"


def _get_ini_tags(config: pytest.Config, name: str) -> tuple[str, ...]:
    """Get linelist ini value as tuple, skipping blank lines.

    Args:
        config: pytest Config object
        name: ini option name

    Returns:
        Declared tags in file order. Empty if not set.
    """
    value = config.getini(name)
    if not value:
        return ()
    return tuple(str(line) for line in value if str(line).strip())


def config_from_ini(config: pytest.Config) -> TagFilterConfig:
    """Build TagFilterConfig from pytest ini options.

    Args:
        config: pytest Config object

    Returns:
        TagFilterConfig with declared require/exclude tags
    """
    return TagFilterConfig(
        require=_get_ini_tags(config, REQUIRE_INI),
        exclude=_get_ini_tags(config, EXCLUDE_INI),
    )


@pytest.fixture(scope="session")
def tag_filter_config(request: pytest.FixtureRequest) -> TagFilterConfig:
    """Tag filter configuration from pytest.ini or pyproject.toml.

    User overrides this fixture in their conftest.py to provide
    custom configuration.

    Returns:
        TagFilterConfig read from tagfilter_require / tagfilter_exclude
    """
    return config_from_ini(request.config)


@pytest.fixture(scope="session")
def tag_filters(tag_filter_config: TagFilterConfig) -> tuple[TagFilter, ...]:
    """Filters for each configured side, require first.

    Returns:
        Tuple of TagFilter. Empty if nothing is configured.
    """
    return tag_filter_config.filters()
