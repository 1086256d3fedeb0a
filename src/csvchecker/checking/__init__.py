"""
Checking module for delimited text: row shape and column content.
"""

from .checker import Checker
from .check_error import CheckError, ShapeError, ContentError
from .column import Column
from .file_checker import check_file, detect_encoding
from .validators import (
    Validator,
    NotEmptyValidator,
    RegexValidator,
    RangeValidator,
    ChoiceValidator,
    PredicateValidator,
)

__all__ = [
    'Checker',
    'CheckError',
    'ShapeError',
    'ContentError',
    'Column',
    'check_file',
    'detect_encoding',
    'Validator',
    'NotEmptyValidator',
    'RegexValidator',
    'RangeValidator',
    'ChoiceValidator',
    'PredicateValidator'
]
