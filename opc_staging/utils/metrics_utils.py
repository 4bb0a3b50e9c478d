"""Summary statistics for a processed batch."""

import logging
from collections import Counter
from typing import Iterable

from opc_staging.models.data_models import (
    ERROR_FLAGS,
    PATHOLOGICAL,
    BatchSummary,
    OutputRecord,
)

logger = logging.getLogger(__name__)


def _percent(part: int, whole: int) -> float:
    return round(part / whole * 100, 2) if whole else 0.0


def calculate_summary(records: Iterable[OutputRecord]) -> BatchSummary:
    """Calculate batch summary statistics.

    Args:
        records: Output records of one batch

    Returns:
        BatchSummary with counts and percentages
    """
    records = list(records)
    total = len(records)
    staged = [record for record in records if record.best_stage]
    staged_pathological = sum(
        1 for record in staged if record.staging_path == PATHOLOGICAL
    )

    flag_counts = Counter({flag: 0 for flag in ERROR_FLAGS})
    for record in records:
        flag_counts.update(name for name, value in record.flags.items() if value)
    best_stage_counts = dict(
        sorted(Counter(record.best_stage for record in staged).items())
    )

    return BatchSummary(
        total_records=total,
        staged_records=len(staged),
        unstaged_records=total - len(staged),
        percent_staged=_percent(len(staged), total),
        percent_staged_pathological=_percent(staged_pathological, len(staged)),
        flag_counts=dict(flag_counts),
        best_stage_counts=best_stage_counts,
    )


def log_summary(summary: BatchSummary):
    """Log the batch summary."""
    logger.info("=" * 70)
    logger.info("Staging Summary")
    logger.info("=" * 70)
    logger.info(f"Total Records      : {summary.total_records}")
    logger.info(f"Staged             : {summary.staged_records}")
    logger.info(f"Unstaged           : {summary.unstaged_records}")
    logger.info(f"Percent Staged     : {summary.percent_staged:.2f}%")
    logger.info(
        f"Pathological Basis : {summary.percent_staged_pathological:.2f}% of staged"
    )
    for stage, count in summary.best_stage_counts.items():
        logger.info(f"  Stage {stage:<9}: {count}")
    for flag, count in summary.flag_counts.items():
        logger.info(f"  {flag:<22}: {count}")
    logger.info("=" * 70)
