"""
Field content validators.
"""

import math
import re
from typing import Callable, Iterable, Optional
from .base_validator import Validator


class NotEmptyValidator(Validator):
    """Rejects empty values."""

    def __init__(self, strip: bool = True):
        """
        Args:
            strip: Treat whitespace-only values as empty
        """
        self.__strip = strip

    def validate(self, value: str) -> Optional[str]:
        if (value.strip() if self.__strip else value):
            return None

        return 'Value must not be empty'


class RegexValidator(Validator):
    """Rejects values that do not match a regular expression."""

    def __init__(
        self,
        pattern: str,
        message: Optional[str] = None,
        flags: re.RegexFlag = re.UNICODE
    ):
        """
        Args:
            pattern: Regular expression pattern, matched from the start of the value
            message: Failure description, defaults to one naming the pattern
            flags: Regular expression flags
        """
        self.__regex = re.compile(pattern, flags)
        self.__message = message or f'Value does not match pattern: {pattern}'

    def validate(self, value: str) -> Optional[str]:
        if self.__regex.match(value):
            return None

        return self.__message

    def __repr__(self) -> str:
        return f'RegexValidator({self.__regex.pattern!r})'


class RangeValidator(Validator):
    """
    Checks that a numeric value lies within inclusive bounds.

    Empty values are accepted; pair with NotEmptyValidator on the same
    column for required numeric fields.
    """

    def __init__(
        self,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None
    ):
        """
        Args:
            min_value: Minimum allowed value (inclusive)
            max_value: Maximum allowed value (inclusive)

        Raises:
            ValueError: If min_value is greater than max_value
        """
        if min_value is not None and max_value is not None and min_value > max_value:
            raise ValueError(f'min_value {min_value} is greater than max_value {max_value}')

        self.__min_value = min_value
        self.__max_value = max_value

        range_str = []

        if min_value is not None:
            range_str.append(f'>= {min_value}')

        if max_value is not None:
            range_str.append(f'<= {max_value}')

        self.__range_desc = ' and '.join(range_str)

    def validate(self, value: str) -> Optional[str]:
        if not value.strip():
            return None

        try:
            number = float(value)
        except ValueError:
            return f'Value is not a number: {value}'

        if not math.isfinite(number):
            return f'Value is not a finite number: {value}'

        if self.__min_value is not None and number < self.__min_value:
            return f'Value must be {self.__range_desc}'

        if self.__max_value is not None and number > self.__max_value:
            return f'Value must be {self.__range_desc}'

        return None

    def __repr__(self) -> str:
        return f'RangeValidator(min_value={self.__min_value!r}, max_value={self.__max_value!r})'


class ChoiceValidator(Validator):
    """Rejects values outside a fixed set of allowed values."""

    def __init__(self, choices: Iterable[str], case_sensitive: bool = True):
        self.__case_sensitive = case_sensitive
        self.__choices = list(choices)
        self.__allowed = {self.__normalize(choice) for choice in self.__choices}

    def __normalize(self, value: str) -> str:
        return value if self.__case_sensitive else value.casefold()

    def validate(self, value: str) -> Optional[str]:
        if self.__normalize(value) in self.__allowed:
            return None

        return f'Value must be one of: {", ".join(self.__choices)}'


class PredicateValidator(Validator):
    """Wraps a plain function returning True for valid values."""

    def __init__(self, rule: Callable[[str], bool], message: str):
        """
        Args:
            rule: Function that takes a value and returns True if valid
            message: Failure description when the rule returns False
        """
        self.__rule = rule
        self.__message = message

    def validate(self, value: str) -> Optional[str]:
        if self.__rule(value):
            return None

        return self.__message
