"""
Survey loading utilities

Reads the coded survey export (Excel workbook or CSV) into a DataFrame.
"""

import pandas as pd
from pathlib import Path
from typing import Union

EXCEL_SUFFIXES = ['.xlsx', '.xlsm', '.xls']
CSV_SUFFIXES = ['.csv']


def load_survey(path: Union[str, Path], sheet_name: Union[str, int] = 0) -> pd.DataFrame:
    """
    Load a coded survey export

    Args:
        path: Path to an .xlsx/.xls workbook or a .csv file
        sheet_name: Worksheet name or position (workbooks only)

    Returns:
        DataFrame with one row per response

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file type is not supported
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f'Survey file not found: {path}')

    suffix = path.suffix.lower()
    print(f'Loading survey from {path}...')

    if suffix in EXCEL_SUFFIXES:
        df = pd.read_excel(path, sheet_name=sheet_name)
    elif suffix in CSV_SUFFIXES:
        df = pd.read_csv(path)
    else:
        raise ValueError(
            f'Unsupported survey file type: {path.suffix!r} '
            f'(expected one of {", ".join(EXCEL_SUFFIXES + CSV_SUFFIXES)})'
        )

    print(f'✓ Loaded {len(df):,} responses with {df.shape[1]} columns')
    return df
