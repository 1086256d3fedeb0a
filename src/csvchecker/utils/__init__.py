"""Utility modules for csvchecker."""

from .logger import configure_logger, log_check_error

__all__ = [
    'configure_logger',
    'log_check_error'
]
