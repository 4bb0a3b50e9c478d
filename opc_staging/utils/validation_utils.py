"""Per-record validation flags."""

from typing import Any, Dict, Optional

from opc_staging.models.data_models import CLINICAL, PATHOLOGICAL
from opc_staging.parsers import M1, T_IN_SITU
from opc_staging.utils.conversion_utils import is_invalid_m


def build_error_flags(
    staging_path: str,
    pathological_t: Optional[str],
    pathological_n: Optional[str],
    clinical_t: Optional[str],
    clinical_n: Optional[str],
    m_class: Optional[str],
    raw_m: Any
) -> Dict[str, bool]:
    """Build the six independent flags for one record.

    Args:
        staging_path: PATHOLOGICAL or CLINICAL
        pathological_t: Converted pathological T (None if missing or not
            applicable)
        pathological_n: Converted pathological N
        clinical_t: Converted clinical T
        clinical_n: Converted clinical N
        m_class: Converted M
        raw_m: Raw M token

    Returns:
        Dictionary of flag name -> bool
    """
    is_pathological = staging_path == PATHOLOGICAL
    is_clinical = staging_path == CLINICAL

    return {
        'error_pathological_n': is_pathological and pathological_n is None,
        'error_clinical_n': is_clinical and clinical_n is None,
        'error_pathological_t': is_pathological and pathological_t is None,
        'error_clinical_t': is_clinical and clinical_t is None,
        'flag_in_situ': T_IN_SITU in (pathological_t, clinical_t),
        'error_m': is_invalid_m(raw_m) and m_class != M1,
    }
