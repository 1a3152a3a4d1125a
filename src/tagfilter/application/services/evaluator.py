"""Filter evaluation over discovered descriptors.

Applies one filter to a sequence of descriptors and keeps each decision
next to its descriptor, for reporting or for the caller to act on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tagfilter.domain.model.descriptor import TestDescriptor
    from tagfilter.domain.model.filter_result import FilterResult
    from tagfilter.infrastructure.filters.types import PostDiscoveryFilter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FilterDecision:
    """Descriptor paired with the decision made for it.

    Attributes:
        descriptor: Evaluated descriptor.
        result: Filter decision.
    """

    descriptor: TestDescriptor
    result: FilterResult

    @property
    def included(self) -> bool:
        """Check if the descriptor was included."""
        return self.result.included


def evaluate(
    flt: PostDiscoveryFilter,
    descriptors: Iterable[TestDescriptor],
) -> tuple[FilterDecision, ...]:
    """Apply filter to every descriptor, preserving order.

    Args:
        flt: Filter to apply.
        descriptors: Descriptors to decide on.

    Returns:
        One decision per descriptor, in input order.
    """
    decisions = tuple(FilterDecision(descriptor=d, result=flt(d)) for d in descriptors)
    included_count = sum(1 for d in decisions if d.included)
    logger.debug(
        "Evaluated %s: %d included, %d excluded",
        flt,
        included_count,
        len(decisions) - included_count,
    )
    return decisions


def included(decisions: Iterable[FilterDecision]) -> tuple[FilterDecision, ...]:
    """Select decisions that include their descriptor."""
    return tuple(d for d in decisions if d.included)


def excluded(decisions: Iterable[FilterDecision]) -> tuple[FilterDecision, ...]:
    """Select decisions that exclude their descriptor."""
    return tuple(d for d in decisions if not d.included)
