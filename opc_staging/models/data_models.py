"""Data models for staging records and batch results."""

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

PATHOLOGICAL = 'pathological'
CLINICAL = 'clinical'

STAGE_I = 'I'
STAGE_II = 'II'
STAGE_III = 'III'
STAGE_IV = 'IV'
STAGE_IN_SITU = 'in situ'

ERROR_FLAGS = (
    'error_pathological_n',
    'error_clinical_n',
    'error_pathological_t',
    'error_clinical_t',
    'flag_in_situ',
    'error_m',
)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


class InputRecord(BaseModel):
    """One row of AJCC 7th edition source data."""

    model_config = ConfigDict(frozen=True)

    record_id: Optional[str] = Field(None, description="Record identifier")
    clinical_t: Optional[str] = Field(None, description="Raw clinical T")
    clinical_n: Optional[str] = Field(None, description="Raw clinical N")
    pathological_t: Optional[str] = Field(
        None, description="Raw pathological T"
    )
    pathological_n: Optional[str] = Field(
        None, description="Raw pathological N"
    )
    m: Optional[str] = Field(None, description="Raw M")
    positive_nodes: Optional[int] = Field(
        None, description="Regional lymph nodes positive"
    )

    @field_validator(
        'record_id', 'clinical_t', 'clinical_n', 'pathological_t',
        'pathological_n', 'm',
        mode='before'
    )
    @classmethod
    def handle_text(cls, v):
        """Convert NaN to None and numbers to their integer text."""
        if _is_missing(v):
            return None
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return str(v)

    @field_validator('positive_nodes', mode='before')
    @classmethod
    def handle_node_count(cls, v):
        """Parse a node count; anything that is not an integer is None."""
        if _is_missing(v) or isinstance(v, bool):
            return None
        if isinstance(v, int):
            return v
        if isinstance(v, float):
            return int(v) if not math.isinf(v) and v.is_integer() else None
        text = str(v).strip()
        try:
            number = float(text)
        except ValueError:
            if text:
                logger.debug(f"Non-numeric node count ignored: {v!r}")
            return None
        if math.isinf(number) or not number.is_integer():
            return None
        return int(number)


class OutputRecord(BaseModel):
    """Converted AJCC 8th edition values and flags for one record."""

    model_config = ConfigDict(frozen=True)

    record_id: Optional[str] = None
    staging_path: str
    pathological_t8: Optional[str] = None
    pathological_n8: Optional[str] = None
    clinical_t8: Optional[str] = None
    clinical_n8: Optional[str] = None
    m8: Optional[str] = None
    clinical_stage: Optional[str] = None
    pathological_stage: Optional[str] = None
    best_stage: Optional[str] = None
    error_pathological_n: bool = False
    error_clinical_n: bool = False
    error_pathological_t: bool = False
    error_clinical_t: bool = False
    flag_in_situ: bool = False
    error_m: bool = False

    @property
    def flags(self) -> Dict[str, bool]:
        """Return the six flags keyed by name."""
        return {name: getattr(self, name) for name in ERROR_FLAGS}


OUTPUT_COLUMNS: List[str] = list(OutputRecord.model_fields.keys())


class BatchSummary(BaseModel):
    """Summary statistics for one processed batch."""

    model_config = ConfigDict(frozen=True)

    total_records: int = 0
    staged_records: int = 0
    unstaged_records: int = 0
    percent_staged: float = 0.0
    percent_staged_pathological: float = 0.0
    flag_counts: Dict[str, int] = Field(default_factory=dict)
    best_stage_counts: Dict[str, int] = Field(default_factory=dict)


class BatchResult:
    """Immutable result of one batch.

    The output table is handed out as a copy so that display and export
    consumers never share a mutable frame.
    """

    def __init__(
        self,
        records: Tuple[OutputRecord, ...],
        table: pd.DataFrame,
        summary: BatchSummary,
        source: Optional[str] = None
    ):
        self._records = tuple(records)
        self._table = table.copy()
        self._summary = summary
        self._source = source

    @property
    def records(self) -> Tuple[OutputRecord, ...]:
        return self._records

    @property
    def table(self) -> pd.DataFrame:
        return self._table.copy()

    @property
    def summary(self) -> BatchSummary:
        return self._summary

    @property
    def source(self) -> Optional[str]:
        return self._source

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return (
            f"BatchResult(source={self._source!r}, rows={len(self._table)}, "
            f"staged={self._summary.staged_records})"
        )
