"""Application services for filter evaluation."""

from tagfilter.application.services.evaluator import (
    FilterDecision,
    evaluate,
    excluded,
    included,
)

__all__ = [
    "FilterDecision",
    "evaluate",
    "excluded",
    "included",
]
