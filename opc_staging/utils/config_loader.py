"""Configuration loading utilities."""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'OPC_STAGING_CONFIG'
LOG_LEVEL_ENV_VAR = 'OPC_STAGING_LOG_LEVEL'

DEFAULT_COLUMNS: Dict[str, str] = {
    'record_id': 'PUF_CASE_ID',
    'clinical_t': 'TNM_CLIN_T',
    'clinical_n': 'TNM_CLIN_N',
    'pathological_t': 'TNM_PATH_T',
    'pathological_n': 'TNM_PATH_N',
    'm': 'TNM_CLIN_M',
    'positive_nodes': 'REGIONAL_NODES_POSITIVE',
}

DEFAULT_CONFIG: Dict[str, Any] = {
    'columns': DEFAULT_COLUMNS,
    'node_count_range': [0, 94],
    'not_applicable': 'NA',
    'output_file': 'output/staging_results.csv',
    'json_output_file': 'output/staging_results.json',
    'summary_file': 'output/staging_summary.json',
    'log_file': 'output/opc_staging.log',
    'log_level': 'INFO',
}


def _resolve_path(path: str) -> str:
    """Resolve a relative path against the current working directory.

    Args:
        path: Path to resolve (can be relative or absolute)

    Returns:
        Absolute path string
    """
    if os.path.isabs(path):
        return path
    return str((Path.cwd() / path).resolve())


def _merge(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from a YAML file merged over the defaults.

    Args:
        config_path: Path to configuration YAML file, or None for defaults

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If the configuration file does not exist
        ValueError: If the file does not hold a YAML mapping or a setting
            is malformed
    """
    if not config_path:
        logger.debug("No config file given, using defaults")
        return validate_config(copy.deepcopy(DEFAULT_CONFIG))

    try:
        config_path_abs = _resolve_path(config_path)
        logger.debug(f"Loading config from: {config_path_abs}")

        with open(config_path_abs, 'r', encoding='utf-8') as file:
            config_yaml = yaml.safe_load(file) or {}

        if not isinstance(config_yaml, dict):
            raise ValueError(
                f"Configuration file {config_path} must contain a mapping"
            )

        return validate_config(_merge(DEFAULT_CONFIG, config_yaml))
    except FileNotFoundError:
        logger.error(f"Configuration file not found: {config_path}")
        raise
    except yaml.YAMLError as e:
        logger.error(f"YAML parsing error in {config_path}: {e}")
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
    except Exception as e:
        logger.error(f"Error loading configuration: {e}")
        raise


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check the settings the staging engine depends on.

    Args:
        config: Merged configuration dictionary

    Returns:
        The configuration with ``node_count_range`` as a tuple

    Raises:
        ValueError: If a setting is malformed
    """
    columns = config.get('columns')
    missing = sorted(set(DEFAULT_COLUMNS) - set(columns or {}))
    if missing:
        raise ValueError(f"Column mapping is missing keys: {missing}")

    node_range = config.get('node_count_range')
    try:
        low, high = (int(value) for value in node_range)
    except (TypeError, ValueError):
        raise ValueError(
            f"node_count_range must be two integers, got {node_range!r}"
        )
    if low > high:
        raise ValueError(f"node_count_range is empty: {low} > {high}")
    config['node_count_range'] = (low, high)
    return config


def setup_environment() -> Optional[str]:
    """Load environment variables from a .env file.

    Returns:
        Config path named by OPC_STAGING_CONFIG, if set
    """
    load_dotenv()
    return os.environ.get(CONFIG_ENV_VAR)
