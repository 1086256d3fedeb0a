"""
CSV file entry point: encoding detection in front of a Checker.
"""

import io
import chardet
from pathlib import Path
from typing import List, Optional
from .checker import Checker
from .check_error import CheckError
from ..exceptions import CsvParseError, SourceReadError
from ..utils import configure_logger


logger = configure_logger(__name__)


def _validate_file_exists(file_path: Path) -> None:
    """Check if file exists and is accessible."""
    if not file_path.exists():
        raise SourceReadError(f'File does not exist: {file_path}')

    if not file_path.is_file():
        raise SourceReadError(f'Path exists but is not a file: {file_path}')


def detect_encoding(raw_data: bytes, expected_encoding: Optional[str] = None) -> str:
    """
    Detect the encoding of raw file content.

    Args:
        raw_data: File content
        expected_encoding: Encoding the caller expects; a mismatch is logged

    Returns:
        Name of the detected encoding

    Raises:
        SourceReadError: If no encoding could be detected
    """
    detected = chardet.detect(raw_data)

    if detected['encoding'] is None:
        raise SourceReadError('Failed to detect file encoding')

    if expected_encoding and detected['encoding'].lower() != expected_encoding.lower():
        logger.warning(
            f'File encoding mismatch. Expected {expected_encoding}, '
            f'found {detected["encoding"]} (confidence: {detected["confidence"]})'
        )

    return detected['encoding']


def check_file(
    checker: Checker,
    file_path: str | Path,
    encoding: Optional[str] = None,
    expected_encoding: Optional[str] = None
) -> List[CheckError]:
    """
    Check a CSV file with the given checker.

    Args:
        checker: Configured Checker
        file_path: Path to the CSV file
        encoding: File encoding; detected with chardet when omitted
        expected_encoding: Encoding the file should have; a mismatch is logged

    Returns:
        List of defects, empty if the file is valid

    Raises:
        SourceReadError: If the file is missing or its encoding is unknown
        CsvParseError: If the content is malformed or cannot be decoded
    """
    file_path = Path(file_path)
    _validate_file_exists(file_path)

    try:
        raw_data = file_path.read_bytes()
    except OSError as e:
        raise SourceReadError(f'Failed to read file {file_path}: {str(e)}') from e

    if not raw_data:
        logger.info(f'{file_path} is empty')

        return []

    if encoding is None:
        encoding = detect_encoding(raw_data, expected_encoding)
        logger.info(f'Detected encoding {encoding} for {file_path}')

    try:
        text = raw_data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise CsvParseError(f'Failed to decode {file_path} as {encoding}: {str(e)}') from e

    return checker.check(io.StringIO(text, newline=''))
