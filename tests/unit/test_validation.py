"""Unit tests for per-record validation flags."""

from __future__ import annotations

from opc_staging.models.data_models import CLINICAL, PATHOLOGICAL
from opc_staging.utils.validation_utils import build_error_flags


def _flags(staging_path: str, **overrides):
    values = {
        "pathological_t": None,
        "pathological_n": None,
        "clinical_t": None,
        "clinical_n": None,
        "m_class": "M0",
        "raw_m": "",
    }
    values.update(overrides)
    return build_error_flags(staging_path, **values)


def test_pathological_path_flags_only_pathological_fields() -> None:
    flags = _flags(PATHOLOGICAL)

    assert flags["error_pathological_n"]
    assert flags["error_pathological_t"]
    assert not flags["error_clinical_n"]
    assert not flags["error_clinical_t"]


def test_clinical_path_flags_only_clinical_fields() -> None:
    flags = _flags(CLINICAL)

    assert flags["error_clinical_n"]
    assert flags["error_clinical_t"]
    assert not flags["error_pathological_n"]
    assert not flags["error_pathological_t"]


def test_complete_record_has_no_flags() -> None:
    flags = _flags(CLINICAL, clinical_t="T2", clinical_n="N1")

    assert not any(flags.values())


def test_in_situ_flag_for_either_t() -> None:
    assert _flags(PATHOLOGICAL, pathological_t="Tis", pathological_n="N0")["flag_in_situ"]
    assert _flags(CLINICAL, clinical_t="Tis", clinical_n="N0")["flag_in_situ"]


def test_m_flag_for_unmapped_non_blank_token() -> None:
    assert _flags(CLINICAL, m_class=None, raw_m="MX")["error_m"]
    assert not _flags(CLINICAL, m_class="M1", raw_m="M1")["error_m"]
    assert not _flags(CLINICAL, m_class="M0", raw_m=" ")["error_m"]
