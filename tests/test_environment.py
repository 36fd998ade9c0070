"""Tests for the process environment."""

import os
from pathlib import PurePosixPath

import pytest

from globscan.environment import Environment, ProcessEnvironment


def test_environment_is_abstract():
    with pytest.raises(TypeError):
        Environment()


def test_working_directory_follows_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    env = ProcessEnvironment()
    assert env.working_directory == PurePosixPath(os.getcwd())
    assert env.working_directory.name == tmp_path.name


def test_working_directory_uses_forward_slashes(monkeypatch):
    monkeypatch.setattr("os.getcwd", lambda: "C:\\Projects\\site")
    assert str(ProcessEnvironment().working_directory) == "C:/Projects/site"


def test_get_environment_variable(monkeypatch):
    monkeypatch.setenv("GLOBSCAN_TEST_VALUE", "42")
    monkeypatch.delenv("GLOBSCAN_MISSING_VALUE", raising=False)
    env = ProcessEnvironment()
    assert env.get_environment_variable("GLOBSCAN_TEST_VALUE") == "42"
    assert env.get_environment_variable("GLOBSCAN_MISSING_VALUE") is None
