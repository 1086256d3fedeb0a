"""Shared fixtures for the csvchecker test suite."""

from typing import List, Optional

import pytest

from csvchecker import Checker, Validator


class RecordingValidator(Validator):
    """
    Test double that records every value and returns configured results.

    Results are returned in turn; the last one is repeated once the
    list is exhausted.
    """

    def __init__(self, *results: Optional[str]):
        self.results = list(results) or [None]
        self.calls: List[str] = []

    def validate(self, value: str) -> Optional[str]:
        result = self.results[min(len(self.calls), len(self.results) - 1)]
        self.calls.append(value)

        return result


@pytest.fixture
def checker() -> Checker:
    """Checker with ';' separator and a header row."""
    return Checker(separator=';', has_header=True)


@pytest.fixture
def accepting() -> RecordingValidator:
    return RecordingValidator(None)


@pytest.fixture
def rejecting() -> RecordingValidator:
    return RecordingValidator('Paco')
