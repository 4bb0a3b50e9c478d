"""Shared pytest fixtures for the staging test suite."""

from __future__ import annotations

import pandas as pd
import pytest

from opc_staging.models import Config
from opc_staging.staging_workflow import StagingWorkflow
from opc_staging.utils.config_loader import DEFAULT_COLUMNS


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep environment overrides from leaking into tests."""

    monkeypatch.delenv("OPC_STAGING_CONFIG", raising=False)
    monkeypatch.delenv("OPC_STAGING_LOG_LEVEL", raising=False)


@pytest.fixture
def workflow() -> StagingWorkflow:
    return StagingWorkflow(Config())


@pytest.fixture
def make_frame():
    """Build an input frame with the default column names from field dicts."""

    def _make(rows: list[dict]) -> pd.DataFrame:
        renamed = [
            {DEFAULT_COLUMNS[field]: value for field, value in row.items()}
            for row in rows
        ]
        return pd.DataFrame(renamed, columns=list(DEFAULT_COLUMNS.values()))

    return _make
