"""Test-reporting service messages written through any ServiceMessageProvider.

Each helper builds the attribute mapping for one TeamCity message and forwards it to
``provider.write_service_message``. Attribute order is part of the output and is kept
stable.
"""

from typing import Any, Dict, Optional

from globscan.teamcity.provider import ServiceMessageProvider

NULL_VALUE = "<null>"


def test_suite_started(provider: ServiceMessageProvider, name: str) -> None:
    """Write a testSuiteStarted message."""
    provider.write_service_message("testSuiteStarted", {"name": name})


def test_suite_finished(provider: ServiceMessageProvider, name: str) -> None:
    """Write a testSuiteFinished message."""
    provider.write_service_message("testSuiteFinished", {"name": name})


def test_started(provider: ServiceMessageProvider, name: str, capture_standard_output: bool = False) -> None:
    """Write a testStarted message.

    Args:
        provider: Where to write the message.
        name: Name of the test.
        capture_standard_output: Whether TeamCity should attach standard output written
            between testStarted and testFinished to the test.
    """
    provider.write_service_message(
        "testStarted",
        {
            "name": name,
            "captureStandardOutput": str(capture_standard_output).lower(),
        },
    )


def test_finished(provider: ServiceMessageProvider, name: str, duration_ms: Optional[int] = None) -> None:
    """Write a testFinished message, with a duration attribute only when one is given."""
    values: Dict[str, str] = {"name": name}
    if duration_ms is not None:
        values["duration"] = str(duration_ms)
    provider.write_service_message("testFinished", values)


def test_output(provider: ServiceMessageProvider, name: str, output: str) -> None:
    """Write a testStdOut message."""
    provider.write_service_message("testStdOut", {"name": name, "out": output})


def test_error(provider: ServiceMessageProvider, name: str, output: str) -> None:
    """Write a testStdErr message."""
    provider.write_service_message("testStdErr", {"name": name, "out": output})


def test_ignored(provider: ServiceMessageProvider, name: str, reason: str) -> None:
    """Write a testIgnored message."""
    provider.write_service_message("testIgnored", {"name": name, "message": reason})


def test_failed(provider: ServiceMessageProvider, name: str, message: str, details: Optional[str] = None) -> None:
    """Write a testFailed message. Missing details are written as an empty string."""
    provider.write_service_message(
        "testFailed",
        {
            "name": name,
            "message": message,
            "details": details or "",
        },
    )


def test_comparison_failed(
    provider: ServiceMessageProvider,
    name: str,
    message: str,
    expected: Any,
    actual: Any,
    details: Optional[str] = None,
) -> None:
    """Write a testFailed message of type comparisonFailure.

    Expected and actual values are converted with str(); None is written as "<null>".
    """
    provider.write_service_message(
        "testFailed",
        {
            "type": "comparisonFailure",
            "name": name,
            "message": message,
            "expected": NULL_VALUE if expected is None else str(expected),
            "actual": NULL_VALUE if actual is None else str(actual),
            "details": details or "",
        },
    )
