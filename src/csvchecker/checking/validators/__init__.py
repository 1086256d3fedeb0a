"""
Validator implementations.
"""

from .base_validator import Validator
from .field_validators import (
    NotEmptyValidator,
    RegexValidator,
    RangeValidator,
    ChoiceValidator,
    PredicateValidator,
)

__all__ = [
    'Validator',
    'NotEmptyValidator',
    'RegexValidator',
    'RangeValidator',
    'ChoiceValidator',
    'PredicateValidator'
]
