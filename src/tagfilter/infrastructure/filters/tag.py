"""Tag filters.

Include or exclude descriptors by the tags declared on them.
Descriptor tag names are trimmed before comparison; filter tags are
compared exactly as supplied.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tagfilter.domain.exceptions import InvalidTagsError
from tagfilter.domain.model.enums import TagFilterMode
from tagfilter.domain.model.filter_result import FilterResult

if TYPE_CHECKING:
    from tagfilter.domain.model.descriptor import TestDescriptor

logger = logging.getLogger(__name__)

_REASONS: dict[TagFilterMode, tuple[str, str]] = {
    # (reason when included, reason when excluded)
    TagFilterMode.REQUIRE: (
        "descriptor tagged with one of the required tags",
        "descriptor not tagged with any required tag",
    ),
    TagFilterMode.EXCLUDE: (
        "descriptor not tagged with any excluded tag",
        "descriptor tagged with one of the excluded tags",
    ),
}


@dataclass(frozen=True, slots=True)
class TagFilter:
    """Require or exclude filter over descriptor tags.

    Immutable and stateless: one instance can be applied to any number
    of descriptors, from any number of threads.

    Attributes:
        tags: Filter tags, in the order supplied. Never empty.
        mode: REQUIRE = include on match, EXCLUDE = exclude on match.
    """

    tags: tuple[str, ...]
    mode: TagFilterMode

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.tags, tuple):
            raise TypeError(f"tags must be tuple, got {type(self.tags).__name__}")
        if not self.tags:
            raise InvalidTagsError("tags must not be null or empty")
        for tag in self.tags:
            if not isinstance(tag, str):
                raise TypeError(f"tags entries must be str, got {type(tag).__name__}")
        if not isinstance(self.mode, TagFilterMode):
            raise TypeError(f"mode must be TagFilterMode, got {type(self.mode).__name__}")

    @classmethod
    def require(cls, tags: Iterable[str] | None) -> TagFilter:
        """Create a require filter from a tag collection."""
        return cls(tags=_freeze(tags), mode=TagFilterMode.REQUIRE)

    @classmethod
    def exclude(cls, tags: Iterable[str] | None) -> TagFilter:
        """Create an exclude filter from a tag collection."""
        return cls(tags=_freeze(tags), mode=TagFilterMode.EXCLUDE)

    def matches(self, descriptor: TestDescriptor) -> bool:
        """Check if any trimmed descriptor tag equals a filter tag.

        Short-circuits at the first match.
        """
        return any(name in self.tags for name in _trimmed_tags_of(descriptor))

    def apply(self, descriptor: TestDescriptor) -> FilterResult:
        """Decide whether the descriptor is included.

        Args:
            descriptor: Discovered test or container. Not mutated.

        Returns:
            Decisive FilterResult with a reason. Never raises.
        """
        matched = self.matches(descriptor)
        included_reason, excluded_reason = _REASONS[self.mode]
        if self.mode is TagFilterMode.REQUIRE:
            return FilterResult.included_if(matched, included_reason, excluded_reason)
        return FilterResult.included_if(not matched, included_reason, excluded_reason)

    def __call__(self, descriptor: TestDescriptor) -> FilterResult:
        """Apply filter. Makes TagFilter usable as PostDiscoveryFilter."""
        return self.apply(descriptor)

    def __str__(self) -> str:
        """Format as mode and tags, e.g. require[fast, unit]."""
        return f"{self.mode.name.lower()}[{', '.join(self.tags)}]"


def require_tags(*tags: str | Iterable[str] | None) -> TagFilter:
    """Create a require filter.

    Containers and tests are only executed if they are tagged with at
    least one of the supplied tags.

    Accepts varargs or a single collection:
        require_tags("fast", "unit")
        require_tags(["fast", "unit"])

    Args:
        *tags: Required tags. Never None or empty.

    Returns:
        TagFilter in REQUIRE mode.

    Raises:
        InvalidTagsError: tags is None or empty.
    """
    flt = TagFilter.require(_unpack(tags))
    logger.debug("Created tag filter %s", flt)
    return flt


def exclude_tags(*tags: str | Iterable[str] | None) -> TagFilter:
    """Create an exclude filter.

    Containers and tests are only executed if they are NOT tagged with
    any of the supplied tags.

    Accepts varargs or a single collection:
        exclude_tags("slow")
        exclude_tags(["slow", "flaky"])

    Args:
        *tags: Excluded tags. Never None or empty.

    Returns:
        TagFilter in EXCLUDE mode.

    Raises:
        InvalidTagsError: tags is None or empty.
    """
    flt = TagFilter.exclude(_unpack(tags))
    logger.debug("Created tag filter %s", flt)
    return flt


def _unpack(args: tuple[str | Iterable[str] | None, ...]) -> Iterable[str] | None:
    """Resolve varargs vs single-collection call forms."""
    if len(args) == 1 and not isinstance(args[0], str):
        return args[0]
    return args  # type: ignore[return-value]


def _freeze(tags: Iterable[str] | None) -> tuple[str, ...]:
    """Copy tags into a tuple. FAIL-FIRST on None."""
    if tags is None:
        raise InvalidTagsError("tags must not be None")
    if isinstance(tags, str):
        return (tags,)
    return tuple(tags)


def _trimmed_tags_of(descriptor: TestDescriptor) -> Iterator[str]:
    """Lazily yield trimmed tag names in the tag set's iteration order."""
    return (tag.trimmed for tag in descriptor.tags)
