"""Permission action enum for handling permission errors during directory traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when encountering permission errors during directory traversal.

    Values:
        IGNORE: Log a warning and skip the contents of the inaccessible directory (default behavior)
        RAISE: Re-raise the PermissionError to the caller of the walk
    """

    IGNORE = "ignore"
    RAISE = "raise"
