"""Minimal service-message capability and its TeamCity implementation."""

from abc import ABC, abstractmethod
from typing import Mapping

from globscan.teamcity.formatter import TeamCityServiceMessageFormatter


class ServiceMessageProvider(ABC):
    """The single capability the helpers in globscan.teamcity.messages build on."""

    @abstractmethod
    def write_service_message(self, message_name: str, values: Mapping[str, str]) -> None:
        """
        Write a service message to the build server.

        Args:
            message_name: Name of the message, e.g. "testStarted".
            values: Attribute names and values, written in mapping order.
        """
        pass


class TeamCityProvider(ServiceMessageProvider):
    """Provider that writes service messages through a formatter.

    Example:
        >>> import logging
        >>> provider = TeamCityProvider(TeamCityServiceMessageFormatter(logging.getLogger("globscan.teamcity")))
        >>> provider.write_service_message("blockOpened", {"name": "Restore"})
    """

    def __init__(self, formatter: TeamCityServiceMessageFormatter) -> None:
        if formatter is None:
            raise ValueError("formatter must not be None")
        self._formatter = formatter

    def write_service_message(self, message_name: str, values: Mapping[str, str]) -> None:
        self._formatter.write_service_message(message_name, values)
