class PathStackUnderflowError(IndexError):
    """
    Exception raised when a segment is popped from an empty path stack.

    Every pop must be matched by an earlier push made while descending into a directory.
    Popping below the traversal root therefore signals a defect in the calling walker
    rather than a condition to recover from.

    Example:
        >>> error = PathStackUnderflowError()
        >>> str(error)
        'Cannot pop from an empty path stack: push/pop calls are unbalanced.'
        >>> isinstance(error, IndexError)
        True
    """

    def __init__(self, message: str = "Cannot pop from an empty path stack: push/pop calls are unbalanced.") -> None:
        self.message = message
        super().__init__(self.message)
