"""
csvchecker - Row shape and column content checks for CSV text.

This package provides:
- A checking engine that collects every shape and content defect of a CSV source
- Pluggable column validators (non-empty, regex, range, choices, predicates)
- File checking with encoding detection
- DataFrame reports of the collected defects
"""

from ._version import __version__
from .config import CheckerConfig
from .exceptions import (
    CheckerError,
    SourceReadError,
    CsvParseError,
    ColumnConfigurationError,
)
from .checking import (
    Checker,
    CheckError,
    ShapeError,
    ContentError,
    Column,
    check_file,
    Validator,
    NotEmptyValidator,
    RegexValidator,
    RangeValidator,
    ChoiceValidator,
    PredicateValidator,
)
from .report import errors_to_dataframe, error_counts


__all__ = [
    # Configuration
    'CheckerConfig',

    # Checking components
    'Checker',
    'CheckError',
    'ShapeError',
    'ContentError',
    'Column',
    'check_file',

    # Validators
    'Validator',
    'NotEmptyValidator',
    'RegexValidator',
    'RangeValidator',
    'ChoiceValidator',
    'PredicateValidator',

    # Exceptions
    'CheckerError',
    'SourceReadError',
    'CsvParseError',
    'ColumnConfigurationError',

    # Reporting
    'errors_to_dataframe',
    'error_counts',

    # Version
    '__version__',
]
