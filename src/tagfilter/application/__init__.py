"""Application layer for tag filtering.

Components:
- services: Filter evaluation over descriptors (evaluate, FilterDecision)
- reporters: Output formatting (ConsoleReporter)
"""

from tagfilter.application.reporters import ConsoleConfig, ConsoleReporter
from tagfilter.application.services import FilterDecision, evaluate, excluded, included

__all__ = [
    # Services
    "FilterDecision",
    "evaluate",
    "excluded",
    "included",
    # Reporters
    "ConsoleConfig",
    "ConsoleReporter",
]
