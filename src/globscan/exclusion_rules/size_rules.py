"""Size-based exclusion rules for filtering files by size."""

from typing import Optional, Union

from humanfriendly import InvalidSize, parse_size

from globscan.file_system.entries import FileEntry, FileSystemEntry

from .base_rules import BaseExclusionRules


def parse_file_size(size_str: str) -> int:
    """Parse human-readable file size to bytes.

    Args:
        size_str: Size string like '1GB', '500MB', '2.5K', or just '1024'

    Returns:
        Size in bytes

    Raises:
        ValueError: If size_str is not a valid size format

    Example:
        >>> parse_file_size("2KB")
        2000
        >>> parse_file_size("1KiB")
        1024
    """
    try:
        return int(parse_size(size_str))
    except InvalidSize as e:
        raise ValueError(f"Invalid size format '{size_str}': {e}")


class SizeExclusionRules(BaseExclusionRules):
    """Exclusion rules based on file size limits.

    Files whose length exceeds the configured limit are excluded. The size limit can be
    specified in human-readable format (e.g., '1GB', '500MB') or as raw bytes. The length
    comes from the FileEntry supplied by the filesystem, so the rule never touches the
    disk. Directories, and checks made without an entry, are never excluded.

    Attributes:
        max_size_bytes (int): Maximum allowed file size in bytes.

    Example:
        >>> rules = SizeExclusionRules("1MB")  # 1 megabyte limit
        >>> rules.max_size_bytes
        1000000
        >>> rules.exclude("big.bin", FileEntry("/work/big.bin", length=2_000_000))
        True
        >>> rules.exclude("small.txt", FileEntry("/work/small.txt", length=10))
        False
    """

    def __init__(self, max_size: Union[str, int]):
        """Initialize size exclusion rules.

        Args:
            max_size: Maximum file size. Can be:
                - String in human-readable format ('1GB', '500MB', '2.5K')
                - Integer representing bytes

        Raises:
            ValueError: If max_size format is invalid or negative
        """
        if isinstance(max_size, bool):
            raise ValueError(f"max_size must be string or int, got {type(max_size)}")
        if isinstance(max_size, str):
            self.max_size_bytes = parse_file_size(max_size)
        elif isinstance(max_size, int):
            if max_size < 0:
                raise ValueError("Size cannot be negative")
            self.max_size_bytes = max_size
        else:
            raise ValueError(f"max_size must be string or int, got {type(max_size)}")

    def exclude(self, path: str, entry: Optional[FileSystemEntry] = None) -> bool:
        """Check if a file should be excluded based on size.

        Returns:
            True if entry is a file longer than the limit, False otherwise.
        """
        if not isinstance(entry, FileEntry):
            return False
        return entry.length > self.max_size_bytes

    def has_rules(self) -> bool:
        """Size rules always apply; even a limit of 0 excludes every non-empty file."""
        return True
