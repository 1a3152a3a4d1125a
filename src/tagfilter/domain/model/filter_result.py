"""Filter decision value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FilterResult:
    """Decision of a filter for one descriptor.

    Always decisive: a descriptor is either included or excluded.

    Attributes:
        included: True if the descriptor takes part in the run.
        reason: Human-readable explanation. None = no reason given.
    """

    included: bool
    reason: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.included, bool):
            raise TypeError(f"included must be bool, got {type(self.included).__name__}")
        if self.reason is not None and not self.reason:
            raise ValueError("reason must be None or non-empty")

    @property
    def excluded(self) -> bool:
        """Check if the descriptor is excluded."""
        return not self.included

    @classmethod
    def include(cls, reason: str | None = None) -> FilterResult:
        """Create an inclusion decision."""
        return cls(included=True, reason=reason)

    @classmethod
    def exclude(cls, reason: str | None = None) -> FilterResult:
        """Create an exclusion decision."""
        return cls(included=False, reason=reason)

    @classmethod
    def included_if(
        cls,
        predicate: bool,
        included_reason: str | None = None,
        excluded_reason: str | None = None,
    ) -> FilterResult:
        """Create a decision from a boolean predicate.

        Args:
            predicate: True = include.
            included_reason: Reason attached when included.
            excluded_reason: Reason attached when excluded.

        Returns:
            Inclusion or exclusion decision with the matching reason.
        """
        if predicate:
            return cls.include(included_reason)
        return cls.exclude(excluded_reason)

    def __str__(self) -> str:
        """Format as decision with optional reason."""
        decision = "included" if self.included else "excluded"
        if self.reason is None:
            return decision
        return f"{decision}: {self.reason}"
