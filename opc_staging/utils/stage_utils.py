"""Stage group determination for AJCC 8th edition HPV-associated
oropharyngeal cancer.

Each rule set is an ordered chain where a later matching rule overwrites
an earlier one.
"""

import logging
from typing import Optional

from opc_staging.models.data_models import (
    STAGE_I,
    STAGE_II,
    STAGE_III,
    STAGE_IN_SITU,
    STAGE_IV,
)
from opc_staging.parsers import M1, T_IN_SITU

logger = logging.getLogger(__name__)

T0_T2 = {'T0', 'T1', 'T2'}
T0_T3 = {'T0', 'T1', 'T2', 'T3'}
T3_T4 = {'T3', 'T4'}
N0_N1 = {'N0', 'N1'}
N0_N2 = {'N0', 'N1', 'N2'}


def _apply_clinical_rules(t: Optional[str], n: Optional[str]) -> Optional[str]:
    stage = None
    if n in N0_N1 and t in T0_T2:
        stage = STAGE_I
    if (n == 'N2' and t in T0_T3) or (t == 'T3' and n in N0_N2):
        stage = STAGE_II
    if n == 'N3' or t == 'T4':
        stage = STAGE_III
    return stage


def determine_clinical_stage(
    t_class: Optional[str],
    n_class: Optional[str],
    m_class: Optional[str],
    fallback_t: Optional[str] = None
) -> Optional[str]:
    """Determine the clinical stage group.

    When the clinical T is unavailable, a pathological T may stand in for
    it provided the clinical N is available.

    Args:
        t_class: Converted clinical T, or None
        n_class: Converted clinical N, or None
        m_class: Converted M, or None
        fallback_t: Converted pathological T used when t_class is missing

    Returns:
        'I', 'II', 'III', 'IV', or None when unstaged
    """
    stage = _apply_clinical_rules(t_class, n_class)

    if t_class is None and fallback_t is not None and n_class is not None:
        logger.debug(f"Clinical T missing, using pathological T {fallback_t}")
        stage = _apply_clinical_rules(fallback_t, n_class)

    if m_class == M1:
        stage = STAGE_IV
    return stage


def determine_pathological_stage(
    t_class: Optional[str],
    n_class: Optional[str],
    m_class: Optional[str]
) -> Optional[str]:
    """Determine the pathological stage group.

    M1 only raises an already computed stage to IV; it does not create a
    stage on its own.

    Args:
        t_class: Converted pathological T, or None
        n_class: Converted pathological N, or None
        m_class: Converted M, or None

    Returns:
        'I', 'II', 'III', 'IV', or None when unstaged
    """
    stage = None
    if t_class in T0_T2 and n_class in N0_N1:
        stage = STAGE_I
    if (t_class in T0_T2 and n_class == 'N2') or (
        t_class in T3_T4 and n_class in N0_N1
    ):
        stage = STAGE_II
    if t_class in T3_T4 and n_class == 'N2':
        stage = STAGE_III

    if m_class == M1 and stage is not None:
        stage = STAGE_IV
    return stage


def determine_best_stage(
    clinical_stage: Optional[str],
    pathological_stage: Optional[str],
    clinical_t: Optional[str],
    pathological_t: Optional[str]
) -> Optional[str]:
    """Resolve the best stage for a record.

    Args:
        clinical_stage: Clinical stage group, or None
        pathological_stage: Pathological stage group, or None
        clinical_t: Converted clinical T, or None
        pathological_t: Converted pathological T, or None

    Returns:
        Stage group, 'in situ', or None
    """
    best = pathological_stage if pathological_stage else clinical_stage

    if pathological_t == T_IN_SITU or (
        clinical_t == T_IN_SITU and not pathological_stage
    ):
        best = STAGE_IN_SITU
    return best
