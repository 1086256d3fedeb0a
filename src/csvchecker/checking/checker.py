"""
Main checking engine that walks a CSV source and collects every defect.
"""

import csv
import io
from typing import IO, Iterable, List, Optional, Union
from .check_error import CheckError, ShapeError, ContentError
from .column import Column
from ..config import CheckerConfig
from ..exceptions import ColumnConfigurationError, CsvParseError
from ..utils import configure_logger


Source = Union[str, bytes, IO[str], IO[bytes], Iterable[str]]


class Checker:
    """
    Checks row shape and column content of delimited text.

    The first row read fixes the reference width. Every later row with a
    different width is reported as a ShapeError and its fields are not
    validated. Rows of the right width (other than the header) are run
    through every registered Column in registration order. Checking is
    exhaustive: all defects are collected before returning.
    """

    def __init__(self, separator: str = ',', has_header: bool = True):
        """
        Initialize the checker.

        Args:
            separator: Single character separating fields
            has_header: Whether the first row is a header excluded from content checks

        Raises:
            ValueError: If separator is not a usable single character
        """
        self.__logger = configure_logger(__name__)
        self.__config = CheckerConfig(separator=separator, has_header=has_header)
        self.__columns: List[Column] = []

    @classmethod
    def from_config(cls, config: CheckerConfig) -> 'Checker':
        """Create a checker from an existing configuration."""
        return cls(separator=config.separator, has_header=config.has_header)

    @property
    def config(self) -> CheckerConfig:
        return self.__config

    @property
    def separator(self) -> str:
        return self.__config.separator

    @property
    def has_header(self) -> bool:
        return self.__config.has_header

    @property
    def columns(self) -> List[Column]:
        """Registered column bindings, in registration order."""
        return list(self.__columns)

    def add_column(self, column: Column) -> 'Checker':
        """
        Register a column binding.

        Bindings are never merged: two bindings on the same index are
        both applied. Index bounds are checked once the width of the
        checked source is known.

        Args:
            column: Column binding to append

        Returns:
            The checker itself, so registrations can be chained
        """
        if not isinstance(column, Column):
            raise TypeError(f'Expected a Column, got {type(column).__name__}')

        self.__columns.append(column)

        return self

    def check(self, source: Source, encoding: Optional[str] = None) -> List[CheckError]:
        """
        Check a CSV source.

        Args:
            source: CSV text, raw bytes, text stream, binary stream or iterable of text lines
            encoding: Encoding used to decode a binary stream, UTF-8 by default

        Returns:
            List of defects in processing order, empty if the source is valid

        Raises:
            CsvParseError: If the stream is malformed or cannot be decoded
            ColumnConfigurationError: If a column index is outside the reference width
        """
        if isinstance(source, str):
            source = io.StringIO(source, newline='')
        elif isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)

        if isinstance(source, (io.RawIOBase, io.BufferedIOBase)):
            text = io.TextIOWrapper(source, encoding=encoding or 'utf-8', newline='')

            try:
                return self.__check_rows(text)
            finally:
                # Leave the caller's stream open
                text.detach()

        return self.__check_rows(source)

    def __get_csv_reader(self, lines: Iterable[str]):
        """Create a properly configured CSV reader."""
        return csv.reader(
            lines,
            delimiter=self.separator,
            quotechar='"',
            quoting=csv.QUOTE_MINIMAL,
            strict=True
        )

    def __check_rows(self, lines: Iterable[str]) -> List[CheckError]:
        errors: List[CheckError] = []
        reader = self.__get_csv_reader(lines)
        reference_width: Optional[int] = None
        rows_read = 0
        next_line = 1

        try:
            for row in reader:
                line, next_line = next_line, reader.line_num + 1

                # Blank line
                if not row:
                    continue

                rows_read += 1

                if reference_width is None:
                    reference_width = len(row)
                    self.__check_column_bounds(reference_width)

                    if self.has_header:
                        continue

                if len(row) != reference_width:
                    errors.append(ShapeError(line=line, expected=reference_width, actual=len(row)))
                    continue

                errors.extend(self.__check_fields(row, line))

        except csv.Error as e:
            raise CsvParseError(f'CSV parsing error: {str(e)}', line=reader.line_num) from e

        except UnicodeDecodeError as e:
            # Decoding runs ahead of the reader, so the failing line is unknown
            raise CsvParseError(f'Failed to decode CSV source: {str(e)}') from e

        shape_count = sum(1 for e in errors if isinstance(e, ShapeError))
        self.__logger.info(
            f'Checked {rows_read} rows: {shape_count} shape errors, '
            f'{len(errors) - shape_count} content errors'
        )

        return errors

    def __check_column_bounds(self, width: int) -> None:
        """Reject bindings that cannot address a row of the reference width."""
        out_of_range = sorted({c.index for c in self.__columns if c.index >= width})

        if out_of_range:
            indexes = ', '.join(str(i) for i in out_of_range)
            raise ColumnConfigurationError(
                f'Column index(es) {indexes} out of range for rows with {width} fields'
            )

    def __check_fields(self, row: List[str], line: int) -> List[ContentError]:
        errors = []

        for column in self.__columns:
            failure = column.validator.validate(row[column.index])

            if failure is not None:
                errors.append(ContentError(line=line, column=column.index, failure=failure))

        return errors
