"""Reporters for filter decisions.

Output is str: callers decide where it goes.
"""

from tagfilter.application.reporters.console import ConsoleConfig, ConsoleReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
]
