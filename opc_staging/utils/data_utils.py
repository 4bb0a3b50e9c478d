"""Data processing utilities for the staging workflow."""

import logging
from typing import Any, Dict, List

import pandas as pd

from opc_staging.models.data_models import InputRecord

logger = logging.getLogger(__name__)

OCCURRENCE_COLUMN = '_occurrence'
POSITION_COLUMN = '_position'


def prepare_input(
    row: Dict[str, Any],
    columns: Dict[str, str],
    row_number: int
) -> InputRecord:
    """Build an InputRecord from one row of the input table.

    Args:
        row: Dictionary of column name -> cell value
        columns: Field name -> input column name
        row_number: 1-based row number, used in log messages

    Returns:
        Validated InputRecord

    Raises:
        ValueError: If the row cannot be validated
    """
    try:
        fields = {field: row.get(column) for field, column in columns.items()}
        return InputRecord(**fields)
    except Exception as e:
        logger.error(f"Row {row_number} input validation failed: {str(e)}")
        raise ValueError(f"Invalid input data in row {row_number}: {str(e)}")


def process_tabular_data(
    df: pd.DataFrame,
    columns: Dict[str, str]
) -> List[InputRecord]:
    """Convert every row of the input table to an InputRecord.

    Args:
        df: Input DataFrame holding all mapped columns
        columns: Field name -> input column name

    Returns:
        List of InputRecord, in row order
    """
    records = []
    for row_number, row in enumerate(df.to_dict(orient='records'), start=1):
        records.append(prepare_input(row, columns, row_number))
    logger.debug(f"Prepared {len(records)} input records")
    return records


def _with_occurrence(df: pd.DataFrame, id_column: str) -> pd.DataFrame:
    df = df.copy()
    df[OCCURRENCE_COLUMN] = df.groupby(id_column, dropna=False).cumcount()
    return df


def join_results(
    input_df: pd.DataFrame,
    output_df: pd.DataFrame,
    id_column: str,
    output_id_column: str = 'record_id'
) -> pd.DataFrame:
    """Outer-join the input table with the output records on the identifier.

    Repeated identifiers are paired by order of occurrence so each input
    row meets exactly one output row.

    Args:
        input_df: Original input table
        output_df: Table of OutputRecord fields
        id_column: Identifier column of the input table
        output_id_column: Identifier column of the output table

    Returns:
        Joined table with input columns first
    """
    duplicated = input_df[id_column].duplicated(keep=False)
    if duplicated.any():
        logger.warning(
            f"{int(duplicated.sum())} rows share an identifier; "
            f"pairing them by order of occurrence"
        )

    left = _with_occurrence(input_df, id_column)
    left[POSITION_COLUMN] = range(len(left))
    right = _with_occurrence(
        output_df.rename(columns={output_id_column: id_column}), id_column
    )
    overlapping = [
        column for column in right.columns
        if column in left.columns and column not in (id_column, OCCURRENCE_COLUMN)
    ]
    if overlapping:
        right = right.rename(columns={c: f"{c}_8th" for c in overlapping})

    joined = left.merge(
        right,
        on=[id_column, OCCURRENCE_COLUMN],
        how='outer',
        sort=False,
        indicator=True
    )
    unmatched = joined['_merge'] != 'both'
    if unmatched.any():
        logger.warning(f"{int(unmatched.sum())} rows had no counterpart when joining results")

    # Outer merges sort on the keys; restore input order, unmatched output last
    joined = joined.sort_values(
        POSITION_COLUMN, kind='mergesort', na_position='last'
    )
    return joined.drop(
        columns=[OCCURRENCE_COLUMN, POSITION_COLUMN, '_merge']
    ).reset_index(drop=True)
