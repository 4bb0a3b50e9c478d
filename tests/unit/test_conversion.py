"""Unit tests for AJCC 7th to 8th edition category conversion."""

from __future__ import annotations

import pytest

from opc_staging.utils.conversion_utils import (
    convert_clinical_n,
    convert_m,
    convert_pathological_n,
    convert_t,
    is_invalid_m,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("T0", "T0"),
        ("1", "T1"),
        ("t2", "T2"),
        ("T3", "T3"),
        ("T4", "T4"),
        ("T4a", "T4"),
        ("4B", "T4"),
        ("Tis", "Tis"),
        ("TX", None),
        ("", None),
    ],
)
def test_convert_t(raw, expected) -> None:
    assert convert_t(raw) == expected


@pytest.mark.parametrize("raw", ["2.0", 2.0, "2.00"])
def test_convert_t_accepts_decimal_text_from_float_columns(raw) -> None:
    assert convert_t(raw) == "T2"


@pytest.mark.parametrize(
    ("raw", "nodes", "expected"),
    [
        ("N1", None, "N1"),
        ("N2a", None, "N1"),
        ("N2b", None, None),
        ("N2c", None, None),
        ("N3", None, None),
        ("NX", 3, "N1"),
        ("N2c", 4, "N1"),
        ("N1", 5, "N2"),
        ("", 12, "N2"),
        ("N0", None, "N0"),
        ("N2b", 0, "N0"),
        ("", 0, "N0"),
        ("", None, None),
    ],
)
def test_convert_pathological_n(raw, nodes, expected) -> None:
    assert convert_pathological_n(raw, nodes) == expected


def test_pathological_n0_token_overrides_node_count_rules() -> None:
    assert convert_pathological_n("N0", 7) == "N0"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("N0", "N0"),
        ("N1", "N1"),
        ("N2a", "N1"),
        ("N2B", "N1"),
        ("N2c", "N2"),
        ("N3", "N3"),
        ("N2", None),
        ("NX", None),
        (None, None),
    ],
)
def test_convert_clinical_n(raw, expected) -> None:
    assert convert_clinical_n(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("M1", "M1"), ("1", "M1"), ("M0", "M0"), ("", "M0"), (None, "M0"), ("MX", None), ("M9", None)],
)
def test_convert_m(raw, expected) -> None:
    assert convert_m(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("", False), (None, False), ("M0", False), ("M1", False), ("MX", True), ("bone", True)],
)
def test_is_invalid_m(raw, expected) -> None:
    assert is_invalid_m(raw) is expected
