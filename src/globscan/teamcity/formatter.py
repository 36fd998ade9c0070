"""TeamCity service message formatting.

Service messages are single lines of the form::

    ##teamcity[messageName key='value' other='value']

Every value is escaped so that the characters TeamCity treats as delimiters cannot end
an attribute or the message early.
"""

import logging
from typing import Mapping

MESSAGE_PREFIX = "##teamcity["
MESSAGE_POSTFIX = "]"

# "|" must be escaped first so that the escapes added afterwards are left alone.
_SANITIZATION_TOKENS = (
    ("|", "||"),
    ("'", "|'"),
    ("\n", "|n"),
    ("\r", "|r"),
    ("[", "|["),
    ("]", "|]"),
)


def sanitize(source: str) -> str:
    """Escape the characters TeamCity reserves inside attribute values.

    Example:
        >>> sanitize("it's [done] | ok")
        "it|'s |[done|] || ok"
        >>> sanitize("line1\\nline2")
        'line1|nline2'
    """
    for token, replacement in _SANITIZATION_TOKENS:
        source = source.replace(token, replacement)
    return source


class TeamCityServiceMessageFormatter:
    """Formats service messages and writes them to a log.

    Attributes are rendered in mapping order. A pair whose key is blank or whitespace is
    rendered as a bare quoted value, which is how single-value messages such as
    ``##teamcity[progressMessage 'Compiling']`` are written.

    Example:
        >>> formatter = TeamCityServiceMessageFormatter(logging.getLogger("globscan.teamcity"))
        >>> formatter.format_service_message("testStarted", {"name": "parse[1]", "captureStandardOutput": "false"})
        "##teamcity[testStarted name='parse|[1|]' captureStandardOutput='false']"
        >>> formatter.format_service_message("progressMessage", {" ": "Compiling"})
        "##teamcity[progressMessage 'Compiling']"
    """

    def __init__(self, log: logging.Logger) -> None:
        """Initialize the formatter.

        Args:
            log: Logger that receives each formatted message at INFO level.

        Raises:
            ValueError: If log is None.
        """
        if log is None:
            raise ValueError("log must not be None")
        self._log = log

    def format_service_message(self, message_name: str, values: Mapping[str, str]) -> str:
        """Render a service message line without writing it."""
        value_string = " ".join(self._format_pair(key, value) for key, value in values.items())
        return f"{MESSAGE_PREFIX}{message_name} {value_string}{MESSAGE_POSTFIX}"

    def write_service_message(self, message_name: str, values: Mapping[str, str]) -> None:
        """Format a service message and write it to the log."""
        self._log.info("%s", self.format_service_message(message_name, values))

    def write_value(self, message_name: str, attribute_value: str) -> None:
        """Write a message carrying a single unnamed value."""
        self.write_service_message(message_name, {" ": attribute_value})

    def write_attribute(self, message_name: str, attribute_name: str, attribute_value: str) -> None:
        """Write a message carrying a single named attribute."""
        self.write_service_message(message_name, {attribute_name: attribute_value})

    @staticmethod
    def _format_pair(key: str, value: str) -> str:
        if not key or not key.strip():
            return f"'{sanitize(value)}'"
        return f"{key}='{sanitize(value)}'"
