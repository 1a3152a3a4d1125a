"""Infrastructure layer: tag filters.

Filters are immutable values, callable as PostDiscoveryFilter:
PostDiscoveryFilter = Callable[[TestDescriptor], FilterResult]

Usage:
    from tagfilter.infrastructure.filters import exclude_tags, require_tags

    flt = require_tags("fast", "unit")
    result = flt.apply(descriptor)
    if result.included:
        ...

Combining several filters is left to the caller.
"""

from tagfilter.infrastructure.filters.tag import TagFilter, exclude_tags, require_tags
from tagfilter.infrastructure.filters.types import PostDiscoveryFilter

__all__ = [
    "PostDiscoveryFilter",
    "TagFilter",
    "exclude_tags",
    "require_tags",
]
