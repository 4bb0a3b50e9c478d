"""AJCC 7th to 8th edition staging workflow for HPV-associated
oropharyngeal cancer.

This module recodes T, N, and M values, derives clinical, pathological,
and best stage groups, and flags records that cannot be mapped.
"""

import logging
from typing import List, Optional

import pandas as pd

from opc_staging.models import Config
from opc_staging.models.data_models import (
    OUTPUT_COLUMNS,
    PATHOLOGICAL,
    BatchResult,
    InputRecord,
    OutputRecord,
)
from opc_staging.utils.conversion_utils import (
    convert_clinical_n,
    convert_m,
    convert_pathological_n,
    convert_t,
)
from opc_staging.utils.data_utils import join_results, process_tabular_data
from opc_staging.utils.file_utils import read_tabular_data, validate_columns
from opc_staging.utils.metrics_utils import calculate_summary
from opc_staging.utils.stage_utils import (
    determine_best_stage,
    determine_clinical_stage,
    determine_pathological_stage,
)
from opc_staging.utils.staging_path_utils import (
    select_staging_path,
    usable_node_count,
)
from opc_staging.utils.validation_utils import build_error_flags

logger = logging.getLogger(__name__)


class StagingWorkflow:
    """Batch workflow for 8th edition staging."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize the staging workflow.

        Args:
            config: Configuration; defaults are used when omitted
        """
        self.config = config or Config()
        self.node_count_range = self.config.node_count_range
        self.not_applicable = self.config.not_applicable
        self._latest_result: Optional[BatchResult] = None

    @property
    def latest_result(self) -> Optional[BatchResult]:
        """Result of the most recent batch, replaced by each new batch."""
        return self._latest_result

    def stage_record(self, record: InputRecord) -> OutputRecord:
        """Stage one record.

        Args:
            record: Input record

        Returns:
            OutputRecord with converted values, stage groups, and flags.
            Fields of the staging path that was not selected hold the
            not-applicable marker; values that could not be converted are
            None.
        """
        nodes = usable_node_count(record.positive_nodes, self.node_count_range)
        staging_path = select_staging_path(
            record.pathological_n, record.positive_nodes, self.node_count_range
        )

        # Pathological T is converted for both paths; the clinical stage may
        # borrow it when the clinical T is missing.
        pathological_t_raw = convert_t(record.pathological_t)
        m_class = convert_m(record.m)

        if staging_path == PATHOLOGICAL:
            pathological_t = pathological_t_raw
            pathological_n = convert_pathological_n(record.pathological_n, nodes)
            clinical_t = None
            clinical_n = None
        else:
            pathological_t = None
            pathological_n = None
            clinical_t = convert_t(record.clinical_t)
            clinical_n = convert_clinical_n(record.clinical_n)

        clinical_stage = determine_clinical_stage(
            clinical_t, clinical_n, m_class, fallback_t=pathological_t_raw
        )
        pathological_stage = determine_pathological_stage(
            pathological_t, pathological_n, m_class
        )
        best_stage = determine_best_stage(
            clinical_stage, pathological_stage, clinical_t, pathological_t
        )

        flags = build_error_flags(
            staging_path,
            pathological_t,
            pathological_n,
            clinical_t,
            clinical_n,
            m_class,
            record.m,
        )

        logger.debug(
            f"Record {record.record_id}: path={staging_path}, "
            f"pT={pathological_t}, pN={pathological_n}, cT={clinical_t}, "
            f"cN={clinical_n}, M={m_class}, stage(c/p/best)="
            f"{clinical_stage}/{pathological_stage}/{best_stage}"
        )

        if staging_path == PATHOLOGICAL:
            clinical_t = clinical_n = self.not_applicable
        else:
            pathological_t = pathological_n = self.not_applicable

        return OutputRecord(
            record_id=record.record_id,
            staging_path=staging_path,
            pathological_t8=pathological_t,
            pathological_n8=pathological_n,
            clinical_t8=clinical_t,
            clinical_n8=clinical_n,
            m8=m_class,
            clinical_stage=clinical_stage,
            pathological_stage=pathological_stage,
            best_stage=best_stage,
            **flags,
        )

    def stage_records(self, records: List[InputRecord]) -> List[OutputRecord]:
        """Stage a list of records independently."""
        return [self.stage_record(record) for record in records]

    def _to_frame(
        self,
        records: List[OutputRecord],
        id_values: pd.Series
    ) -> pd.DataFrame:
        frame = pd.DataFrame(
            [record.model_dump() for record in records],
            columns=OUTPUT_COLUMNS
        )
        # Keep the identifiers exactly as read so the join matches them
        frame['record_id'] = id_values.to_numpy()
        return frame

    def process_dataframe(
        self,
        df: pd.DataFrame,
        source: Optional[str] = None
    ) -> BatchResult:
        """Process an already parsed input table.

        Args:
            df: Input table with the configured column names
            source: Optional description of where the table came from

        Returns:
            BatchResult, also stored as latest_result

        Raises:
            ValueError: If required columns are missing
        """
        columns = self.config.columns
        validate_columns(df, columns.values())

        logger.info(f"Staging {len(df)} records")
        records = process_tabular_data(df, columns)
        output_records = self.stage_records(records)

        id_column = columns['record_id']
        output_df = self._to_frame(output_records, df[id_column])
        table = join_results(df, output_df, id_column)

        summary = calculate_summary(output_records)
        result = BatchResult(
            records=tuple(output_records),
            table=table,
            summary=summary,
            source=source,
        )
        self._latest_result = result
        logger.info(
            f"Staged {summary.staged_records}/{summary.total_records} records"
        )
        return result

    def process_file(self, file_path: Optional[str] = None) -> BatchResult:
        """Read a CSV or Excel file and process it.

        Args:
            file_path: Input file; defaults to the configured input_file

        Returns:
            BatchResult

        Raises:
            ValueError: If no input file is configured or columns are missing
            FileNotFoundError: If the input file does not exist
        """
        input_file = file_path or self.config.get('input_file')
        if not input_file:
            logger.error("Input file is not configured.")
            raise ValueError("Missing input file configuration")

        df = read_tabular_data(input_file)
        return self.process_dataframe(df, source=input_file)
