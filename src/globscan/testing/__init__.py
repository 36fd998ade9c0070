"""In-memory collaborators for exercising traversal without touching the disk."""

from .fake_environment import FakeEnvironment
from .fake_file_system import FakeFileSystem
from .file_system_node import FileSystemNode

__all__ = ["FakeEnvironment", "FakeFileSystem", "FileSystemNode"]
