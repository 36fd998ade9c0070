"""Logging setup for globscan.

Modules log through ``logging.getLogger(__name__)``; this module only decides how
chatty the ``globscan`` logger is and where its output goes.
"""

import logging
from enum import Enum
from typing import Optional, TextIO, Union

PACKAGE_LOGGER = "globscan"

_HANDLER_NAME = "globscan-console"


class Verbosity(str, Enum):
    """How much output a build run produces.

    Values:
        QUIET: Errors only
        MINIMAL: Warnings and errors
        NORMAL: Informational output, including service messages (default)
        VERBOSE: Debug output
        DIAGNOSTIC: Everything
    """

    QUIET = "quiet"
    MINIMAL = "minimal"
    NORMAL = "normal"
    VERBOSE = "verbose"
    DIAGNOSTIC = "diagnostic"


_LEVELS = {
    Verbosity.QUIET: logging.ERROR,
    Verbosity.MINIMAL: logging.WARNING,
    Verbosity.NORMAL: logging.INFO,
    Verbosity.VERBOSE: logging.DEBUG,
    Verbosity.DIAGNOSTIC: logging.DEBUG,
}


def verbosity_to_level(verbosity: Union[str, Verbosity]) -> int:
    """Map a verbosity to a logging level.

    Example:
        >>> verbosity_to_level("minimal") == logging.WARNING
        True

    Raises:
        ValueError: If verbosity is not a recognised value.
    """
    if isinstance(verbosity, str) and not isinstance(verbosity, Verbosity):
        try:
            verbosity = Verbosity(verbosity.lower())
        except ValueError:
            raise ValueError(
                f"Invalid verbosity: {verbosity}. Must be one of: {', '.join(v.value for v in Verbosity)}"
            )
    elif not isinstance(verbosity, Verbosity):
        raise ValueError(
            f"Invalid verbosity: {verbosity!r}. Must be one of: {', '.join(v.value for v in Verbosity)}"
        )
    return _LEVELS[verbosity]


def configure_logging(
    verbosity: Union[str, Verbosity] = Verbosity.NORMAL, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach a console handler to the package logger.

    Messages are written bare (``%(message)s``) so that service messages reach the build
    server unchanged. Calling this again replaces the handler installed previously.

    Args:
        verbosity: How much to output.
        stream: Where to write. Defaults to sys.stderr.

    Returns:
        The configured package logger.
    """
    level = verbosity_to_level(verbosity)
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
