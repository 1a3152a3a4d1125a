"""tagfilter domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, collections.abc
"""

from tagfilter.domain.exceptions import InvalidTagsError, TagFilterError
from tagfilter.domain.model import (
    FilterResult,
    TagFilterConfig,
    TagFilterMode,
    TestDescriptor,
    TestTag,
)

__all__ = [
    # Exceptions
    "TagFilterError",
    "InvalidTagsError",
    # Enums
    "TagFilterMode",
    # Value objects
    "TestTag",
    "FilterResult",
    "TagFilterConfig",
    # Ports
    "TestDescriptor",
]
