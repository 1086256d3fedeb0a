"""
Tabular reporting of check results.
"""

import pandas as pd
from typing import Dict, List
from .checking import CheckError, ShapeError, ContentError


REPORT_COLUMNS = ['kind', 'line', 'column', 'expected', 'actual', 'message']


def errors_to_dataframe(errors: List[CheckError]) -> pd.DataFrame:
    """
    Convert a list of defects into a DataFrame, one row per defect.

    Args:
        errors: Defects as returned by Checker.check

    Returns:
        DataFrame with columns kind, line, column, expected, actual and
        message. Integer columns use the nullable Int64 dtype; fields a
        defect kind does not carry are <NA>.
    """
    records = []

    for error in errors:
        records.append({
            'kind': error.kind,
            'line': error.line,
            'column': error.column if isinstance(error, ContentError) else None,
            'expected': error.expected if isinstance(error, ShapeError) else None,
            'actual': error.actual if isinstance(error, ShapeError) else None,
            'message': error.message,
        })

    df = pd.DataFrame.from_records(records, columns=REPORT_COLUMNS)

    return df.astype({
        'kind': 'string',
        'line': 'Int64',
        'column': 'Int64',
        'expected': 'Int64',
        'actual': 'Int64',
        'message': 'string',
    })


def error_counts(errors: List[CheckError]) -> Dict[str, int]:
    """Count defects per kind."""
    shape = sum(1 for e in errors if isinstance(e, ShapeError))
    content = sum(1 for e in errors if isinstance(e, ContentError))

    return {'shape': shape, 'content': content, 'total': len(errors)}
