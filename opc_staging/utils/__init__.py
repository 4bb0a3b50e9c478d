"""Utility modules for the staging workflow."""

from opc_staging.utils.config_loader import load_config, setup_environment
from opc_staging.utils.conversion_utils import (
    convert_clinical_n,
    convert_m,
    convert_pathological_n,
    convert_t,
)
from opc_staging.utils.data_utils import (
    join_results,
    prepare_input,
    process_tabular_data,
)
from opc_staging.utils.file_operations import (
    save_results_csv,
    save_results_json,
    save_summary_json,
)
from opc_staging.utils.file_utils import read_tabular_data, validate_columns
from opc_staging.utils.logging_utils import setup_logging
from opc_staging.utils.metrics_utils import calculate_summary, log_summary
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

__all__ = [
    'load_config',
    'setup_environment',
    'setup_logging',
    'read_tabular_data',
    'validate_columns',
    'prepare_input',
    'process_tabular_data',
    'join_results',
    'save_results_csv',
    'save_results_json',
    'save_summary_json',
    'calculate_summary',
    'log_summary',
    'convert_t',
    'convert_clinical_n',
    'convert_pathological_n',
    'convert_m',
    'select_staging_path',
    'usable_node_count',
    'determine_clinical_stage',
    'determine_pathological_stage',
    'determine_best_stage',
    'build_error_flags',
]
