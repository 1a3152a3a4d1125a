"""Domain exceptions: all public errors of tagfilter.

All exceptions visible to users are defined in the domain layer.
Infrastructure and presentation raise these, not their own public errors.
"""


class TagFilterError(Exception):
    """Base for all tagfilter error exceptions.

    Allows: except TagFilterError to catch all library errors.
    """


class InvalidTagsError(TagFilterError, ValueError):
    """Tag collection for a filter is None or empty.

    FAIL-FIRST: raised at filter construction, never during evaluation.
    Inherits ValueError for semantic correctness (invalid argument).

    Attributes:
        reason: Why the tag collection was rejected.
    """

    def __init__(self, reason: str) -> None:
        """Initialize with rejection reason."""
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(reason)
