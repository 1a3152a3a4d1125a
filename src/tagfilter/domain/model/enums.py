"""Domain enumerations."""

from enum import Enum, auto


class TagFilterMode(Enum):
    """Polarity of a tag filter's match test."""

    REQUIRE = auto()  # include on match
    EXCLUDE = auto()  # exclude on match
