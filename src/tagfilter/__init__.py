"""tagfilter - require/exclude tag filters for test discovery."""

__version__ = "0.1.0"

from tagfilter.domain.exceptions import InvalidTagsError, TagFilterError
from tagfilter.domain.model import FilterResult, TagFilterConfig, TagFilterMode, TestDescriptor, TestTag
from tagfilter.infrastructure.filters import PostDiscoveryFilter, TagFilter, exclude_tags, require_tags

__all__ = [
    "FilterResult",
    "InvalidTagsError",
    "PostDiscoveryFilter",
    "TagFilter",
    "TagFilterConfig",
    "TagFilterError",
    "TagFilterMode",
    "TestDescriptor",
    "TestTag",
    "__version__",
    "exclude_tags",
    "require_tags",
]
