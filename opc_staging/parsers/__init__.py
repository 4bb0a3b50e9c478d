"""AJCC 7th edition token parsers."""

from opc_staging.parsers.base_parser import (
    BaseCodeParser,
    normalize_token,
)
from opc_staging.parsers.tnm_parsers import (
    M0,
    M1,
    N_UNKNOWN,
    T_IN_SITU,
    TNM_M_Parser,
    TNM_N_Parser,
    TNM_T_Parser,
)

__all__ = [
    'BaseCodeParser',
    'normalize_token',
    'TNM_T_Parser',
    'TNM_N_Parser',
    'TNM_M_Parser',
    'T_IN_SITU',
    'N_UNKNOWN',
    'M0',
    'M1',
]
