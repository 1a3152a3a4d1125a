"""Tag filter configuration (user config).

Empty tuple = side not configured, value = build a filter for that side.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tagfilter.infrastructure.filters.tag import TagFilter


@dataclass(frozen=True, slots=True)
class TagFilterConfig:
    """Declared require/exclude tags.

    Immutable configuration object with FAIL-FIRST validation.
    Filters are built on demand and returned separately: combining
    them is the caller's decision.

    Attributes:
        require: Tags a descriptor must carry at least one of.
        exclude: Tags a descriptor must carry none of.
    """

    require: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for field_name in ("require", "exclude"):
            value = getattr(self, field_name)
            if not isinstance(value, tuple):
                raise TypeError(f"{field_name} must be tuple, got {type(value).__name__}")
            for tag in value:
                if not isinstance(tag, str):
                    raise TypeError(f"{field_name} entries must be str, got {type(tag).__name__}")

    @property
    def is_empty(self) -> bool:
        """Check if neither side is configured."""
        return not self.require and not self.exclude

    def filters(self) -> tuple[TagFilter, ...]:
        """Build one filter per configured side, require first."""
        from tagfilter.infrastructure.filters.tag import TagFilter

        result: list[TagFilter] = []
        if self.require:
            result.append(TagFilter.require(self.require))
        if self.exclude:
            result.append(TagFilter.exclude(self.exclude))
        return tuple(result)
