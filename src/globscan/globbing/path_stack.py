"""Stack of path segments describing the directory currently being visited."""

from typing import Iterator, List, Tuple

from globscan.exceptions import PathStackUnderflowError

CURRENT_DIRECTORY = "./"


class PathSegmentStack:
    """Ordered sequence of directory names from the traversal root to the current position.

    The stack mirrors the walker's recursion: a segment is pushed when entering a
    directory and popped when leaving it. The joined path is recomputed on every push
    and pop so reading it is free.

    Attributes:
        path (str): The segments joined with "/", or "./" when the stack is empty.

    Example:
        >>> stack = PathSegmentStack()
        >>> stack.path
        './'
        >>> stack.push("src")
        >>> stack.push("lib")
        >>> stack.path
        'src/lib'
        >>> stack.pop()
        'lib'
        >>> stack.path
        'src'
    """

    def __init__(self) -> None:
        self._segments: List[str] = []
        self._path = CURRENT_DIRECTORY

    @property
    def path(self) -> str:
        return self._path

    @property
    def segments(self) -> Tuple[str, ...]:
        return tuple(self._segments)

    def push(self, segment: str) -> None:
        """Append a segment as the new deepest element.

        Args:
            segment: A single path component. Its content is not validated.
        """
        self._segments.append(segment)
        self._path = self._join()

    def pop(self) -> str:
        """Remove and return the deepest segment.

        Returns:
            The segment pushed most recently.

        Raises:
            PathStackUnderflowError: If the stack is empty.
        """
        if not self._segments:
            raise PathStackUnderflowError()
        segment = self._segments.pop()
        self._path = self._join()
        return segment

    def _join(self) -> str:
        path = "/".join(self._segments)
        if not path.strip():
            return CURRENT_DIRECTORY
        return path

    def __len__(self) -> int:
        return len(self._segments)

    def __bool__(self) -> bool:
        return bool(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._segments))

    def __repr__(self) -> str:
        return f"PathSegmentStack(path={self._path!r})"
