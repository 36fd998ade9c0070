"""In-memory environment for tests and dry runs."""

from pathlib import PurePosixPath
from typing import Dict, Mapping, Optional

from globscan.environment import Environment
from globscan.types import PathType


class FakeEnvironment(Environment):
    """Environment with a fixed working directory and variable mapping.

    Example:
        >>> env = FakeEnvironment("/build", {"CONFIGURATION": "Release"})
        >>> str(env.working_directory)
        '/build'
        >>> env.get_environment_variable("CONFIGURATION")
        'Release'
        >>> env.get_environment_variable("MISSING") is None
        True
    """

    def __init__(self, working_directory: PathType = "/Working", variables: Optional[Mapping[str, str]] = None):
        self._working_directory = self._absolute(working_directory)
        self._variables: Dict[str, str] = dict(variables or {})

    @property
    def working_directory(self) -> PurePosixPath:
        return self._working_directory

    def set_working_directory(self, path: PathType) -> None:
        self._working_directory = self._absolute(path)

    def get_environment_variable(self, name: str) -> Optional[str]:
        return self._variables.get(name)

    def set_environment_variable(self, name: str, value: str) -> None:
        self._variables[name] = value

    @staticmethod
    def _absolute(path: PathType) -> PurePosixPath:
        working = PurePosixPath(str(path).replace("\\", "/"))
        if not working.is_absolute():
            raise ValueError(f"Working directory must be absolute, got '{path}'")
        return working
