"""
Base validator class that all column validators must inherit from.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Validator(ABC):
    """
    Abstract base class for all column validators.

    A validator judges one field value at a time. Implementations
    return None when the value is accepted and a failure description
    when it is rejected; the description is reported unchanged.
    """

    @abstractmethod
    def validate(self, value: str) -> Optional[str]:
        """
        Validate a single field value.

        Args:
            value: Raw field text

        Returns:
            None if the value is valid, otherwise a failure description
        """
        pass

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'
