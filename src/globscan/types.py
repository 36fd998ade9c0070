from enum import Enum
from os import PathLike
from typing import Callable, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Decision functions consumed by the traversal core. The concrete entry types live in
# globscan.file_system.entries; predicates are typed loosely here to avoid an import cycle.
DirectoryPredicate = Callable[..., bool]
FilePredicate = Callable[..., bool]


class FileType(str, Enum):
    """Enumeration of entry types encountered during traversal.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"
