"""Data models for the staging workflow."""

from opc_staging.models.config import Config
from opc_staging.models.data_models import (
    BatchResult,
    BatchSummary,
    InputRecord,
    OutputRecord,
)

__all__ = ['Config', 'InputRecord', 'OutputRecord', 'BatchResult', 'BatchSummary']
