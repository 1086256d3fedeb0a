"""Logging utilities for csvchecker."""

import logging
from typing import Any, Dict, Optional


LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def configure_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Return a csvchecker logger, attaching a stream handler only when the
    host application has not configured logging itself.

    Args:
        name (str): Name for the logger, typically __name__
        level (int): Logging level, INFO by default

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    host_configured = bool(logging.getLogger().handlers)

    if not host_configured and not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.propagate = True

    return logger


def _format_pairs(pairs: Dict[str, Any]) -> str:
    return ', '.join(f'{k}: {v}' for k, v in pairs.items())


class LoggerUtility:
    """Logs defects found while checking CSV sources."""

    def __init__(self, name: str):
        self.logger = configure_logger(name)

    def log_check_error(
        self,
        kind: str,
        message: str,
        location: Dict[str, Any],
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log one defect as a single WARNING line.

        Args:
            kind: Defect kind (shape, content)
            message: Description of the defect
            location: Location details (line, column)
            context: Additional details, appended in brackets when present
        """
        text = f'[{kind.upper()}] {message} (at {_format_pairs(location)})'

        if context:
            text = f'{text} [{_format_pairs(context)}]'

        self.logger.warning(text)


default_logger = LoggerUtility('csvchecker')
log_check_error = default_logger.log_check_error
