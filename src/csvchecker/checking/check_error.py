"""
Defect values collected while checking a CSV source.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict
from ..utils.logger import log_check_error


@dataclass(frozen=True)
class CheckError:
    """
    Base class of every defect found in a CSV source.

    Attributes:
        line: 1-based physical line on which the offending row starts
    """
    kind: ClassVar[str] = 'defect'

    line: int

    def __post_init__(self):
        """Log the defect after initialization."""
        log_check_error(
            kind=self.kind,
            message=self.message,
            location=self.location,
            context=self.context
        )

    @property
    def message(self) -> str:
        """Human readable description of the defect."""
        return 'Invalid row'

    @property
    def location(self) -> Dict[str, Any]:
        """Where the defect was found."""
        return {'line': self.line}

    @property
    def context(self) -> Dict[str, Any]:
        """Additional details about the defect."""
        return {}

    def __str__(self) -> str:
        location_str = ', '.join(f'{k}: {v}' for k, v in self.location.items())

        return f'[{self.kind.upper()}] {self.message} (at {location_str})'


@dataclass(frozen=True)
class ShapeError(CheckError):
    """
    A row whose field count differs from the reference width.

    Attributes:
        line: 1-based physical line on which the row starts
        expected: Reference width fixed by the first row
        actual: Number of fields found in the row
    """
    kind: ClassVar[str] = 'shape'

    expected: int
    actual: int

    @property
    def message(self) -> str:
        return f'Expected {self.expected} fields, found {self.actual}'

    @property
    def context(self) -> Dict[str, Any]:
        return {'expected': self.expected, 'actual': self.actual}


@dataclass(frozen=True)
class ContentError(CheckError):
    """
    A field value rejected by a column validator.

    Attributes:
        line: 1-based physical line on which the row starts
        column: Zero-based index of the rejected field
        failure: Failure description returned by the validator, unchanged
    """
    kind: ClassVar[str] = 'content'

    column: int
    failure: str

    @property
    def message(self) -> str:
        return self.failure

    @property
    def location(self) -> Dict[str, Any]:
        return {'line': self.line, 'column': self.column}
