"""Environment abstraction used to resolve relative walk roots."""

import os
from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import Optional


class Environment(ABC):
    """Abstract base class describing the process environment a traversal runs in.

    The traversal core only carries the environment; the walker uses it to resolve
    relative roots against the working directory.
    """

    @property
    @abstractmethod
    def working_directory(self) -> PurePosixPath:
        """The absolute working directory, using forward slashes."""
        pass

    @abstractmethod
    def get_environment_variable(self, name: str) -> Optional[str]:
        """Return the value of an environment variable, or None if it is not set."""
        pass


class ProcessEnvironment(Environment):
    """Environment backed by the current process.

    Example:
        >>> env = ProcessEnvironment()
        >>> env.working_directory.is_absolute()  # doctest: +SKIP
        True
    """

    @property
    def working_directory(self) -> PurePosixPath:
        return PurePosixPath(os.getcwd().replace("\\", "/"))

    def get_environment_variable(self, name: str) -> Optional[str]:
        return os.environ.get(name)
