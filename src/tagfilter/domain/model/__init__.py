"""Domain model entities."""

from tagfilter.domain.model.configuration import TagFilterConfig
from tagfilter.domain.model.descriptor import TestDescriptor
from tagfilter.domain.model.enums import TagFilterMode
from tagfilter.domain.model.filter_result import FilterResult
from tagfilter.domain.model.test_tag import TestTag

__all__ = [
    "FilterResult",
    "TagFilterConfig",
    "TagFilterMode",
    "TestDescriptor",
    "TestTag",
]
