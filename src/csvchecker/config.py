"""
Checker configuration.
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv


_TRUE_VALUES = {'true', '1', 'yes', 'on'}
_FALSE_VALUES = {'false', '0', 'no', 'off'}
_SEPARATOR_ALIASES = {'\\t': '\t', 'tab': '\t'}


@dataclass(frozen=True)
class CheckerConfig:
    """
    Immutable settings of a Checker.

    Attributes:
        separator: Single character separating fields
        has_header: Whether the first row is a header excluded from content checks
    """
    separator: str = ','
    has_header: bool = True

    def __post_init__(self):
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise ValueError(f'Separator must be a single character, got {self.separator!r}')

        if self.separator in ('"', '\r', '\n'):
            raise ValueError(f'Separator cannot be {self.separator!r}')

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'CheckerConfig':
        """
        Build a configuration from environment variables.

        Reads CSVCHECKER_SEPARATOR and CSVCHECKER_HAS_HEADER, after loading
        a .env file when one is available.

        Args:
            dotenv_path (str, optional): Path to the .env file. Defaults to None.

        Raises:
            ValueError: If dotenv_path cannot be loaded or a variable is invalid.
        """
        if dotenv_path is not None:
            if not load_dotenv(dotenv_path=dotenv_path):
                raise ValueError(f'No .env file found at {dotenv_path}')
        else:
            load_dotenv()

        separator = os.getenv('CSVCHECKER_SEPARATOR', ',')
        separator = _SEPARATOR_ALIASES.get(separator.lower(), separator)

        has_header = os.getenv('CSVCHECKER_HAS_HEADER', 'true').strip().lower()

        if has_header in _TRUE_VALUES:
            return cls(separator=separator, has_header=True)

        if has_header in _FALSE_VALUES:
            return cls(separator=separator, has_header=False)

        raise ValueError('CSVCHECKER_HAS_HEADER must be a valid boolean')
