"""Unit tests for the in-memory filesystem."""

import pytest

from globscan.file_system.entries import DirectoryEntry, FileEntry
from globscan.testing import FakeEnvironment, FakeFileSystem


def test_root_exists():
    fs = FakeFileSystem()
    assert fs.exists("/")
    assert fs.get_directory("/") == DirectoryEntry("/")


def test_create_file_creates_parents():
    fs = FakeFileSystem()
    entry = fs.create_file("/Working/src/lib/a.txt", length=7)
    assert entry == FileEntry("/Working/src/lib/a.txt")
    assert entry.length == 7
    for path in ("/Working", "/Working/src", "/Working/src/lib"):
        assert fs.get_directory(path).is_dir


def test_relative_and_windows_paths_are_rooted():
    fs = FakeFileSystem()
    fs.create_file("Working\\src\\a.txt")
    assert fs.exists("/Working/src/a.txt")
    assert fs.exists("Working/src/../src/a.txt")


def test_create_file_replaces_existing_file():
    fs = FakeFileSystem()
    fs.create_file("/w/a.txt", length=1)
    fs.create_file("/w/a.txt", length=2)
    files = list(fs.list_files(fs.get_directory("/w")))
    assert len(files) == 1
    assert files[0].length == 2


def test_create_file_over_directory_raises():
    fs = FakeFileSystem()
    fs.create_directory("/w/src")
    with pytest.raises(IsADirectoryError):
        fs.create_file("/w/src")


def test_create_directory_under_file_raises():
    fs = FakeFileSystem()
    fs.create_file("/w/a.txt")
    with pytest.raises(NotADirectoryError):
        fs.create_directory("/w/a.txt/sub")


def test_listing_separates_files_and_directories():
    fs = FakeFileSystem()
    fs.create_file("/w/a.txt")
    fs.create_directory("/w/sub")
    fs.create_file("/w/.hidden", hidden=True)
    directory = fs.get_directory("/w")

    assert list(fs.list_directories(directory)) == [DirectoryEntry("/w/sub")]
    files = list(fs.list_files(directory))
    assert sorted(f.name for f in files) == [".hidden", "a.txt"]
    assert [f.hidden for f in files if f.name == ".hidden"] == [True]


def test_get_file_and_get_directory_check_types():
    fs = FakeFileSystem()
    fs.create_file("/w/a.txt", length=3)
    assert fs.get_file("/w/a.txt").length == 3
    with pytest.raises(NotADirectoryError):
        fs.get_directory("/w/a.txt")
    with pytest.raises(IsADirectoryError):
        fs.get_file("/w")


def test_missing_paths():
    fs = FakeFileSystem()
    assert not fs.exists("/missing")
    assert not fs.exists("/missing/child")
    with pytest.raises(FileNotFoundError):
        fs.get_directory("/missing")
    with pytest.raises(FileNotFoundError):
        list(fs.list_files(DirectoryEntry("/missing")))
    with pytest.raises(FileNotFoundError):
        fs.deny_access("/missing")


def test_paths_below_a_file_do_not_exist():
    fs = FakeFileSystem()
    fs.create_file("/w/a.txt")
    assert not fs.exists("/w/a.txt/child")


def test_listing_a_file_raises():
    fs = FakeFileSystem()
    fs.create_file("/w/a.txt")
    with pytest.raises(NotADirectoryError):
        list(fs.list_directories(DirectoryEntry("/w/a.txt")))


def test_deny_access():
    fs = FakeFileSystem()
    fs.create_file("/w/secret/a.txt")
    fs.deny_access("/w/secret")
    directory = fs.get_directory("/w/secret")
    with pytest.raises(PermissionError):
        list(fs.list_files(directory))
    with pytest.raises(PermissionError):
        list(fs.list_directories(directory))
    assert fs.exists("/w/secret/a.txt")


class TestFakeEnvironment:
    def test_defaults(self):
        env = FakeEnvironment()
        assert str(env.working_directory) == "/Working"
        assert env.get_environment_variable("PATH") is None

    def test_variables(self):
        env = FakeEnvironment("/build", {"CONFIGURATION": "Release"})
        assert env.get_environment_variable("CONFIGURATION") == "Release"
        env.set_environment_variable("TARGET", "Default")
        assert env.get_environment_variable("TARGET") == "Default"

    def test_working_directory_must_be_absolute(self):
        with pytest.raises(ValueError, match="must be absolute"):
            FakeEnvironment("relative/dir")

    def test_set_working_directory(self):
        env = FakeEnvironment("/a")
        env.set_working_directory("/b")
        assert str(env.working_directory) == "/b"
