"""Test configuration and fixtures for globscan."""

import pytest

from globscan.testing import FakeEnvironment, FakeFileSystem


@pytest.fixture
def environment():
    """Environment whose working directory is /Working."""
    return FakeEnvironment("/Working")


@pytest.fixture
def file_system():
    """In-memory filesystem with a small project below /Working.

    /Working
    ├── README.md
    ├── build.cake
    ├── node_modules/
    │   └── left-pad/
    │       └── index.js
    └── src/
        ├── a.txt
        ├── b.log
        └── lib/
            └── c.txt
    """
    fs = FakeFileSystem()
    fs.create_file("/Working/src/a.txt", length=10)
    fs.create_file("/Working/src/b.log", length=2048)
    fs.create_file("/Working/src/lib/c.txt", length=5)
    fs.create_file("/Working/node_modules/left-pad/index.js", length=100)
    fs.create_file("/Working/build.cake", length=300)
    fs.create_file("/Working/README.md", length=50)
    return fs
