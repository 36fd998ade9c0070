"""TeamCity service messages.

The helper functions are reached through the ``messages`` module (for example
``messages.test_started(provider, "name")``) rather than re-exported here.
"""

from . import messages
from .formatter import TeamCityServiceMessageFormatter, sanitize
from .provider import ServiceMessageProvider, TeamCityProvider

__all__ = [
    "ServiceMessageProvider",
    "TeamCityProvider",
    "TeamCityServiceMessageFormatter",
    "messages",
    "sanitize",
]
