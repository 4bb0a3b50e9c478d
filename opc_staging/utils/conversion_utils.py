"""AJCC 7th to 8th edition conversion of T, N, and M categories.

Rules for HPV-associated (p16+) oropharyngeal cancer. The N rules are
ordered override chains: each rule that matches overwrites the result of
the rules before it.
"""

import logging
from typing import Any, Optional

from opc_staging.parsers import (
    M0,
    M1,
    T_IN_SITU,
    TNM_M_Parser,
    TNM_N_Parser,
    TNM_T_Parser,
)

logger = logging.getLogger(__name__)

_t_parser = TNM_T_Parser()
_n_parser = TNM_N_Parser()
_m_parser = TNM_M_Parser()

T_CONVERSION = {
    'T0': 'T0',
    'T1': 'T1',
    'T2': 'T2',
    'T3': 'T3',
    'T4': 'T4',
    'T4a': 'T4',
    'T4b': 'T4',
    T_IN_SITU: T_IN_SITU,
}

CLINICAL_N_CONVERSION = {
    'N0': 'N0',
    'N1': 'N1',
    'N2a': 'N1',
    'N2b': 'N1',
    'N2c': 'N2',
    'N3': 'N3',
}

PATHOLOGICAL_N1_CODES = {'N1', 'N2a'}


def convert_t(raw_t: Any) -> Optional[str]:
    """Convert a raw T token to its 8th edition category.

    Args:
        raw_t: Raw T token

    Returns:
        'T0'-'T4', 'Tis' for carcinoma in situ, or None
    """
    return T_CONVERSION.get(_t_parser.parse(raw_t))


def convert_pathological_n(
    raw_n: Any,
    positive_nodes: Optional[int]
) -> Optional[str]:
    """Convert pathological N using the raw code and the node count.

    Args:
        raw_n: Raw pathological N token
        positive_nodes: Usable positive-node count, or None

    Returns:
        'N0', 'N1', 'N2', or None
    """
    code = _n_parser.parse(raw_n)
    result = None

    if code in PATHOLOGICAL_N1_CODES:
        result = 'N1'
    if positive_nodes is not None and positive_nodes < 5:
        result = 'N1'
    if positive_nodes is not None and positive_nodes > 4:
        result = 'N2'
    if code == 'N0' or positive_nodes == 0:
        result = 'N0'

    logger.debug(
        f"pN {raw_n!r} (code={code}, nodes={positive_nodes}) -> {result}"
    )
    return result


def convert_clinical_n(raw_n: Any) -> Optional[str]:
    """Convert a raw clinical N token to its 8th edition category.

    Args:
        raw_n: Raw clinical N token

    Returns:
        'N0'-'N3', or None
    """
    return CLINICAL_N_CONVERSION.get(_n_parser.parse(raw_n))


def convert_m(raw_m: Any) -> Optional[str]:
    """Convert a raw M token.

    A blank M is implicit M0. MX and unrecognized tokens give None.

    Args:
        raw_m: Raw M token

    Returns:
        'M1', 'M0', or None
    """
    if _m_parser.is_blank(raw_m):
        return M0
    code = _m_parser.parse(raw_m)
    if code in (M0, M1):
        return code
    return None


def is_invalid_m(raw_m: Any) -> bool:
    """Check for a non-blank M token that is neither M0 nor M1."""
    if _m_parser.is_blank(raw_m):
        return False
    return _m_parser.parse(raw_m) not in (M0, M1)
