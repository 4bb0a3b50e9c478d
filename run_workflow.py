#!/usr/bin/env python3
"""Run AJCC 8th edition staging from the command line.

Usage:
    python run_workflow.py --i input/cases.csv --o output/cases_staged
    python run_workflow.py -i input/cases.xlsx -o output/cases_staged --config config/staging_config.yaml
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from opc_staging.models import Config
from opc_staging.staging_workflow import StagingWorkflow
from opc_staging.utils.file_operations import (
    save_results_csv,
    save_results_json,
    save_summary_json,
)
from opc_staging.utils.logging_utils import set_verbose, setup_logging
from opc_staging.utils.metrics_utils import log_summary


def parse_arguments(argv=None):
    """Parse command line arguments.

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description='Recode AJCC 7th edition oropharyngeal TNM values to the '
                    '8th edition and derive stage groups',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_workflow.py --i input/cases.csv --o output/cases_staged
  python run_workflow.py -i input/cases.xlsx -o output/cases_staged --config config/staging_config.yaml
        """
    )

    parser.add_argument(
        '-i', '--i',
        dest='input_file',
        required=True,
        help='Input file path (CSV or Excel file)'
    )

    parser.add_argument(
        '-o', '--o',
        dest='output_prefix',
        required=True,
        help='Output file prefix (without extension). Output files will be: '
             '<prefix>.csv, <prefix>.json and <prefix>_summary.json'
    )

    parser.add_argument(
        '--config',
        dest='config_path',
        default=None,
        help='Path to configuration YAML file '
             '(default: $OPC_STAGING_CONFIG or built-in defaults)'
    )

    parser.add_argument(
        '--log',
        dest='log_file',
        default=None,
        help='Path to log file (default: <output_prefix>.log)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser.parse_args(argv)


def setup_output_paths(config: Config, output_prefix: str, log_file: str = None):
    """Setup output file paths in config.

    Args:
        config: Configuration object
        output_prefix: Output file prefix
        log_file: Optional log file path
    """
    Path(output_prefix).parent.mkdir(parents=True, exist_ok=True)

    config.set_output_prefix(output_prefix)
    config.config['log_file'] = log_file or f"{output_prefix}.log"


def main(argv=None):
    """Main entry point for staging a batch."""
    args = parse_arguments(argv)

    if not os.path.exists(args.input_file):
        print(f"Error: Input file not found: {args.input_file}")
        sys.exit(1)

    try:
        config = Config(config_path=args.config_path)
        config.set_input_file(args.input_file)
        setup_output_paths(config, args.output_prefix, args.log_file)

        logger = setup_logging(config)
        if args.verbose:
            set_verbose(logger)

        logger.info("=" * 70)
        logger.info("Oropharyngeal Cancer AJCC 7th -> 8th Edition Staging")
        logger.info("=" * 70)
        logger.info(f"Input file: {args.input_file}")
        logger.info(f"Output prefix: {args.output_prefix}")
        logger.info(f"Config file: {config.config_path or '(defaults)'}")
        logger.info("=" * 70)

        workflow = StagingWorkflow(config)
        result = workflow.process_file(args.input_file)

        paths = config.get_file_paths()
        save_results_csv(result, paths['output_file'])
        save_results_json(result, paths['json_output_file'])
        save_summary_json(result, paths['summary_file'])

        log_summary(result.summary)
        logger.info(
            f"Results saved to: {paths['output_file']} and "
            f"{paths['json_output_file']}"
        )

    except KeyboardInterrupt:
        print("\n\nStaging interrupted by user")
        sys.exit(1)
    except Exception as e:
        logging.getLogger(__name__).debug("Batch failed", exc_info=True)
        print(f"\nError: {str(e)}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
