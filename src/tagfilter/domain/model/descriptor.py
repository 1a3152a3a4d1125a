"""Test descriptor port.

The discovery engine owns descriptors. tagfilter only reads their tags.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Set as AbstractSet

    from tagfilter.domain.model.test_tag import TestTag


@runtime_checkable
class TestDescriptor(Protocol):
    """Discovered test or container node.

    Read-only for tagfilter: filters never mutate a descriptor.

    Attributes:
        display_name: Human-readable name, used by reporters.
        tags: Tags declared on the node.
    """

    @property
    def display_name(self) -> str: ...

    @property
    def tags(self) -> AbstractSet[TestTag]: ...
