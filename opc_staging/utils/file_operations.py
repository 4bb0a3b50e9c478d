"""File operations for saving staging results."""

import json
import logging
import os

from opc_staging.models.data_models import BatchResult

logger = logging.getLogger(__name__)


def _ensure_parent(file_path: str):
    output_dir = os.path.dirname(file_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)


def save_results_csv(result: BatchResult, output_file: str):
    """Save the output table to a CSV file.

    Args:
        result: Batch result
        output_file: Path to CSV output file

    Raises:
        Exception: If saving fails
    """
    try:
        if not output_file:
            raise ValueError("Output file path not configured")
        _ensure_parent(output_file)
        result.table.to_csv(output_file, index=False, encoding='utf-8')
        logger.info(f"Successfully wrote {len(result)} rows to CSV file: {output_file}")
    except Exception as e:
        logger.error(f"Error writing to CSV file: {e}", exc_info=True)
        raise


def save_results_json(result: BatchResult, json_file_path: str):
    """Save the output table to a JSON file as a list of row objects.

    Args:
        result: Batch result
        json_file_path: Path to JSON output file

    Raises:
        Exception: If saving fails
    """
    try:
        if not json_file_path:
            raise ValueError("JSON output file path not configured")
        _ensure_parent(json_file_path)
        rows = json.loads(result.table.to_json(orient='records'))
        with open(json_file_path, 'w', encoding='utf-8') as f:
            json.dump(rows, f, ensure_ascii=False, indent=2)
        logger.info(f"Successfully saved {len(rows)} records to JSON file: {json_file_path}")
    except Exception as e:
        logger.error(f"Error saving to JSON file: {e}", exc_info=True)
        raise


def save_summary_json(result: BatchResult, summary_file: str):
    """Save the batch summary to a JSON file.

    Args:
        result: Batch result
        summary_file: Path to summary JSON file

    Raises:
        Exception: If saving fails
    """
    try:
        if not summary_file:
            raise ValueError("Summary file path not configured")
        _ensure_parent(summary_file)
        with open(summary_file, 'w', encoding='utf-8') as f:
            json.dump(result.summary.model_dump(), f, ensure_ascii=False, indent=2)
        logger.info(f"Successfully saved summary to: {summary_file}")
    except Exception as e:
        logger.error(f"Error saving summary file: {e}", exc_info=True)
        raise
