"""Tests for CheckerConfig."""

import dataclasses
import os
from pathlib import Path

import pytest

from csvchecker import CheckerConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('CSVCHECKER_SEPARATOR', raising=False)
    monkeypatch.delenv('CSVCHECKER_HAS_HEADER', raising=False)


def test_defaults() -> None:
    config = CheckerConfig()

    assert config.separator == ','
    assert config.has_header is True


def test_is_immutable() -> None:
    config = CheckerConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.separator = ';'


def test_from_env_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('CSVCHECKER_SEPARATOR', ';')
    monkeypatch.setenv('CSVCHECKER_HAS_HEADER', 'No')

    assert CheckerConfig.from_env() == CheckerConfig(separator=';', has_header=False)


def test_from_env_tab_alias(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('CSVCHECKER_SEPARATOR', 'tab')

    assert CheckerConfig.from_env().separator == '\t'


def test_from_dotenv_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    dotenv = tmp_path / '.env'
    dotenv.write_text('CSVCHECKER_SEPARATOR="|"\nCSVCHECKER_HAS_HEADER=0\n')
    monkeypatch.setattr(os, 'environ', {})

    assert CheckerConfig.from_env(str(dotenv)) == CheckerConfig(separator='|', has_header=False)


def test_missing_dotenv_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match='No .env file'):
        CheckerConfig.from_env(str(tmp_path / 'missing.env'))


def test_invalid_boolean(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('CSVCHECKER_HAS_HEADER', 'maybe')

    with pytest.raises(ValueError, match='valid boolean'):
        CheckerConfig.from_env()
