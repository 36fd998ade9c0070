"""Unit tests for the test-reporting service message helpers."""

import logging

import pytest

from globscan.teamcity import ServiceMessageProvider, TeamCityProvider, TeamCityServiceMessageFormatter, messages


class RecordingProvider(ServiceMessageProvider):
    def __init__(self):
        self.messages = []

    def write_service_message(self, message_name, values):
        self.messages.append((message_name, list(values.items())))


@pytest.fixture
def provider():
    return RecordingProvider()


def test_suite_messages(provider):
    messages.test_suite_started(provider, "Unit")
    messages.test_suite_finished(provider, "Unit")
    assert provider.messages == [
        ("testSuiteStarted", [("name", "Unit")]),
        ("testSuiteFinished", [("name", "Unit")]),
    ]


@pytest.mark.parametrize("capture,expected", [(False, "false"), (True, "true")])
def test_started(provider, capture, expected):
    messages.test_started(provider, "Parse", capture_standard_output=capture)
    assert provider.messages == [("testStarted", [("name", "Parse"), ("captureStandardOutput", expected)])]


def test_started_defaults_to_not_capturing(provider):
    messages.test_started(provider, "Parse")
    assert provider.messages[0][1][1] == ("captureStandardOutput", "false")


def test_finished_without_duration(provider):
    messages.test_finished(provider, "Parse")
    assert provider.messages == [("testFinished", [("name", "Parse")])]


def test_finished_with_duration(provider):
    messages.test_finished(provider, "Parse", duration_ms=0)
    messages.test_finished(provider, "Parse", duration_ms=125)
    assert provider.messages == [
        ("testFinished", [("name", "Parse"), ("duration", "0")]),
        ("testFinished", [("name", "Parse"), ("duration", "125")]),
    ]


def test_output_and_error(provider):
    messages.test_output(provider, "Parse", "stdout text")
    messages.test_error(provider, "Parse", "stderr text")
    assert provider.messages == [
        ("testStdOut", [("name", "Parse"), ("out", "stdout text")]),
        ("testStdErr", [("name", "Parse"), ("out", "stderr text")]),
    ]


def test_ignored(provider):
    messages.test_ignored(provider, "Parse", "flaky")
    assert provider.messages == [("testIgnored", [("name", "Parse"), ("message", "flaky")])]


def test_failed(provider):
    messages.test_failed(provider, "Parse", "boom")
    messages.test_failed(provider, "Parse", "boom", details="trace")
    assert provider.messages == [
        ("testFailed", [("name", "Parse"), ("message", "boom"), ("details", "")]),
        ("testFailed", [("name", "Parse"), ("message", "boom"), ("details", "trace")]),
    ]


def test_comparison_failed(provider):
    messages.test_comparison_failed(provider, "Parse", "mismatch", 1, None)
    assert provider.messages == [
        (
            "testFailed",
            [
                ("type", "comparisonFailure"),
                ("name", "Parse"),
                ("message", "mismatch"),
                ("expected", "1"),
                ("actual", "<null>"),
                ("details", ""),
            ],
        )
    ]


def test_helpers_through_teamcity_provider(caplog):
    provider = TeamCityProvider(TeamCityServiceMessageFormatter(logging.getLogger("globscan.teamcity")))
    with caplog.at_level(logging.INFO, logger="globscan.teamcity"):
        messages.test_started(provider, "Parse [x]", capture_standard_output=True)
        messages.test_finished(provider, "Parse [x]", duration_ms=5)
    assert caplog.messages == [
        "##teamcity[testStarted name='Parse |[x|]' captureStandardOutput='true']",
        "##teamcity[testFinished name='Parse |[x|]' duration='5']",
    ]


def test_provider_requires_formatter():
    with pytest.raises(ValueError, match="formatter"):
        TeamCityProvider(None)


def test_provider_is_abstract():
    with pytest.raises(TypeError):
        ServiceMessageProvider()
