"""File I/O utilities for the staging workflow."""

import logging
import os
from typing import Iterable

import pandas as pd


logger = logging.getLogger(__name__)


def read_tabular_data(file_path: str) -> pd.DataFrame:
    """Read Excel or CSV file and return DataFrame.

    Every cell is read as text so that codes such as '01' or '2A' reach the
    normalizer unchanged. Blank cells become NaN.

    For Excel files, sheet selection follows this priority:
    1. 'data' sheet (if exists)
    2. First sheet (if 'data' sheet not found)
    3. Raises error if no sheets available

    Args:
        file_path: Path to the Excel (.xlsx/.xls) or CSV (.csv) file

    Returns:
        DataFrame containing the file data

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file cannot be read, format is not supported, or no
            sheets found
    """
    try:
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Input file not found: {file_path}")

        file_ext = os.path.splitext(file_path)[1].lower()

        if file_ext == '.csv':
            df = pd.read_csv(file_path, dtype=str, encoding='utf-8')
            logger.info(f"{len(df)} records read from CSV file: {file_path}")
            return df
        elif file_ext in ['.xlsx', '.xls']:
            with pd.ExcelFile(file_path, engine='openpyxl') as excel_file:
                available_sheets = excel_file.sheet_names

                if 'data' in available_sheets:
                    sheet_to_use = 'data'
                elif len(available_sheets) > 0:
                    sheet_to_use = available_sheets[0]
                else:
                    raise ValueError(f"No sheets found in Excel file: {file_path}")

                df = pd.read_excel(
                    excel_file, sheet_name=sheet_to_use, dtype=str
                )
            logger.info(
                f"{len(df)} records read from Excel file: {file_path} "
                f"(sheet: '{sheet_to_use}', available sheets: {available_sheets})"
            )
            return df
        else:
            raise ValueError(
                f"Unsupported file format: {file_ext}. "
                f"Supported formats: .csv, .xlsx, .xls"
            )
    except FileNotFoundError:
        logger.error(f"Input file not found: {file_path}")
        raise
    except Exception as e:
        logger.error(f"File reading error: {str(e)}")
        raise


def validate_columns(df: pd.DataFrame, required_columns: Iterable[str]):
    """Check that every required column is present, case-sensitively.

    Args:
        df: Input DataFrame
        required_columns: Column names that must be present

    Raises:
        ValueError: Naming every missing column
    """
    missing = [column for column in required_columns if column not in df.columns]
    if missing:
        logger.error(
            f"Input is missing required columns {missing}; "
            f"found {list(df.columns)}"
        )
        raise ValueError(
            f"Missing required columns: {', '.join(missing)}"
        )
