"""Tests for defect values."""

import dataclasses
import logging

import pytest

from csvchecker import CheckError, ContentError, ShapeError


def test_shape_error_fields_and_text() -> None:
    error = ShapeError(line=3, expected=3, actual=4)

    assert isinstance(error, CheckError)
    assert error.kind == 'shape'
    assert error.location == {'line': 3}
    assert str(error) == '[SHAPE] Expected 3 fields, found 4 (at line: 3)'


def test_content_error_passes_failure_through() -> None:
    error = ContentError(line=2, column=1, failure='Paco')

    assert error.kind == 'content'
    assert error.message == 'Paco'
    assert error.location == {'line': 2, 'column': 1}
    assert str(error) == '[CONTENT] Paco (at line: 2, column: 1)'


def test_errors_are_immutable() -> None:
    error = ContentError(line=2, column=1, failure='Paco')

    with pytest.raises(dataclasses.FrozenInstanceError):
        error.line = 5


def test_errors_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger='csvchecker'):
        ShapeError(line=7, expected=2, actual=1)

    assert '[SHAPE] Expected 2 fields, found 1 (at line: 7)' in caplog.text


def test_each_error_is_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger='csvchecker'):
        ShapeError(line=4, expected=3, actual=5)

    records = [r for r in caplog.records if r.name == 'csvchecker']

    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    assert records[0].getMessage() == '[SHAPE] Expected 3 fields, found 5 (at line: 4) [expected: 3, actual: 5]'
