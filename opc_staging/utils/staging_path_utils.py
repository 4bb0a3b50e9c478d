"""Staging-path selection between pathological and clinical staging."""

import logging
from typing import Any, Optional, Tuple

from opc_staging.models.data_models import CLINICAL, PATHOLOGICAL
from opc_staging.parsers import TNM_N_Parser

logger = logging.getLogger(__name__)

NODE_COUNT_RANGE: Tuple[int, int] = (0, 94)

_n_parser = TNM_N_Parser()


def usable_node_count(
    count: Optional[int],
    node_count_range: Tuple[int, int] = NODE_COUNT_RANGE
) -> Optional[int]:
    """Return the positive-node count if it lies in the valid range.

    Out-of-range values are registry markers (aspiration only, positive but
    unspecified, none examined, unknown) and count as not recorded.

    Args:
        count: Positive-node count or None
        node_count_range: Inclusive (low, high) range of real counts

    Returns:
        The count, or None when not recorded or out of range
    """
    if count is None:
        return None
    low, high = node_count_range
    if low <= count <= high:
        return count
    logger.debug(f"Node count {count} outside {low}-{high}, treated as not recorded")
    return None


def select_staging_path(
    pathological_n: Any,
    positive_nodes: Optional[int],
    node_count_range: Tuple[int, int] = NODE_COUNT_RANGE
) -> str:
    """Decide whether a record is staged pathologically or clinically.

    Args:
        pathological_n: Raw pathological N token
        positive_nodes: Positive-node count or None
        node_count_range: Inclusive range of usable counts

    Returns:
        PATHOLOGICAL if the count is usable or the pathological N is a
        recognized code other than NX, otherwise CLINICAL
    """
    if usable_node_count(positive_nodes, node_count_range) is not None:
        return PATHOLOGICAL

    if _n_parser.is_unknown(pathological_n):
        logger.debug("Pathological N is unknown, staging clinically")
        return CLINICAL
    if _n_parser.parse(pathological_n) is not None:
        return PATHOLOGICAL
    return CLINICAL
