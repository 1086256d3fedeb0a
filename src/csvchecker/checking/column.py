"""
Binding of a validator to a column position.
"""

from dataclasses import dataclass
from .validators import Validator
from ..exceptions import ColumnConfigurationError


@dataclass(frozen=True)
class Column:
    """
    Applies a validator to the field at a zero-based index of every data row.

    Attributes:
        index: Zero-based field position
        validator: Validator run against the field value
    """
    index: int
    validator: Validator

    def __post_init__(self):
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise ColumnConfigurationError(f'Column index must be an integer, got {self.index!r}')

        if self.index < 0:
            raise ColumnConfigurationError(f'Column index must not be negative, got {self.index}')

        if not isinstance(self.validator, Validator):
            raise TypeError(f'Column validator must be a Validator, got {type(self.validator).__name__}')
