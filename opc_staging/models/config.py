"""Configuration management class."""

import logging
import os
from typing import Any, Dict, Optional, Tuple

from opc_staging.utils.config_loader import (
    LOG_LEVEL_ENV_VAR,
    load_config,
    setup_environment,
)

logger = logging.getLogger(__name__)


class Config:
    """Configuration for a staging run."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration.

        Args:
            config_path: Path to configuration YAML file. Falls back to the
                OPC_STAGING_CONFIG environment variable, then to defaults.
        """
        env_config_path = self.setup_environment()
        self.config_path = config_path or env_config_path
        self.config = load_config(self.config_path)

        env_log_level = os.environ.get(LOG_LEVEL_ENV_VAR)
        if env_log_level:
            self.config['log_level'] = env_log_level.upper()

    @property
    def columns(self) -> Dict[str, str]:
        """Field name -> input column name."""
        return dict(self.config['columns'])

    @property
    def node_count_range(self) -> Tuple[int, int]:
        return self.config['node_count_range']

    @property
    def not_applicable(self) -> str:
        return self.config['not_applicable']

    def get_file_paths(self) -> Dict[str, Optional[str]]:
        """Return currently configured file paths.

        Returns:
            Dictionary with file paths
        """
        return {
            'input_file': self.config.get('input_file'),
            'output_file': self.config.get('output_file'),
            'json_output_file': self.config.get('json_output_file'),
            'summary_file': self.config.get('summary_file'),
            'log_file': self.config.get('log_file'),
        }

    def set_input_file(self, file_path: str):
        """Set input file path.

        Args:
            file_path: Path to input file
        """
        self.config['input_file'] = file_path

    def set_output_prefix(self, output_prefix: str):
        """Derive the output file paths from a common prefix.

        Args:
            output_prefix: Output file prefix without extension
        """
        self.config['output_file'] = f"{output_prefix}.csv"
        self.config['json_output_file'] = f"{output_prefix}.json"
        self.config['summary_file'] = f"{output_prefix}_summary.json"

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return self.config.get(key, default)

    def setup_environment(self) -> Optional[str]:
        """Load environment variables."""
        return setup_environment()
