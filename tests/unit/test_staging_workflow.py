"""Unit tests for record staging and batch processing."""

from __future__ import annotations

import pandas as pd
import pytest

from opc_staging.models import InputRecord
from opc_staging.models.data_models import CLINICAL, ERROR_FLAGS, PATHOLOGICAL
from opc_staging.staging_workflow import StagingWorkflow


def _record(**fields) -> InputRecord:
    return InputRecord(record_id=fields.pop("record_id", "1"), **fields)


def test_example_a_clinical_t2_n1(workflow: StagingWorkflow) -> None:
    result = workflow.stage_record(_record(clinical_t="T2", clinical_n="N1", m=""))

    assert result.staging_path == CLINICAL
    assert result.clinical_stage == "I"
    assert result.best_stage == "I"
    assert result.m8 == "M0"
    assert not any(result.flags.values())


def test_decimal_text_codes_are_staged_like_integers(workflow: StagingWorkflow) -> None:
    result = workflow.stage_record(_record(clinical_t="2.0", clinical_n="1.0", m="0.0"))

    assert result.clinical_t8 == "T2"
    assert result.clinical_n8 == "N1"
    assert result.m8 == "M0"
    assert result.clinical_stage == "I"
    assert not result.error_clinical_t
    assert not result.error_clinical_n


def test_example_b_node_count_wins_over_nx(workflow: StagingWorkflow) -> None:
    result = workflow.stage_record(_record(pathological_n="NX", positive_nodes=3))

    assert result.staging_path == PATHOLOGICAL
    assert result.pathological_n8 == "N1"


def test_example_c_in_situ_pathological_t(workflow: StagingWorkflow) -> None:
    result = workflow.stage_record(_record(pathological_t="Tis", pathological_n="N0"))

    assert result.staging_path == PATHOLOGICAL
    assert result.pathological_t8 == "Tis"
    assert result.pathological_stage is None
    assert result.flag_in_situ
    assert result.best_stage == "in situ"


def test_example_d_m1_raises_pathological_stage(workflow: StagingWorkflow) -> None:
    result = workflow.stage_record(
        _record(pathological_t="T2", pathological_n="N1", m="M1")
    )

    assert result.pathological_stage == "IV"
    assert result.best_stage == "IV"
    assert result.m8 == "M1"
    assert not result.error_m


def test_example_e_pathological_t_substitutes_for_missing_clinical_t(
    workflow: StagingWorkflow,
) -> None:
    result = workflow.stage_record(
        _record(clinical_n="N1", pathological_t="T3")
    )

    assert result.staging_path == CLINICAL
    assert result.clinical_stage == "II"
    assert result.best_stage == "II"
    assert result.error_clinical_t
    assert result.pathological_t8 == "NA"


def test_unselected_branch_is_marked_not_applicable(workflow: StagingWorkflow) -> None:
    result = workflow.stage_record(
        _record(clinical_t="T1", clinical_n="N1", pathological_t="T2", pathological_n="N1")
    )

    assert result.staging_path == PATHOLOGICAL
    assert result.clinical_t8 == "NA"
    assert result.clinical_n8 == "NA"
    assert result.clinical_stage is None
    assert not result.error_clinical_t


def test_unrecognized_values_are_left_empty_and_flagged(workflow: StagingWorkflow) -> None:
    result = workflow.stage_record(
        _record(clinical_t="T9", clinical_n="N2", m="MX")
    )

    assert result.clinical_t8 is None
    assert result.clinical_n8 is None
    assert result.error_clinical_t
    assert result.error_clinical_n
    assert result.error_m
    assert result.m8 is None
    assert result.best_stage is None
    assert not result.flag_in_situ


@pytest.mark.parametrize("raw_n", ["N0", "N1", "N2a", "N2b", "N2c", "N3", "NX", ""])
def test_zero_positive_nodes_always_gives_n0(workflow: StagingWorkflow, raw_n: str) -> None:
    result = workflow.stage_record(_record(pathological_n=raw_n, positive_nodes=0))

    assert result.pathological_n8 == "N0"


@pytest.mark.parametrize("raw_n", ["N1", "N2a", "N2b", "N2c", "N3", "NX", ""])
def test_more_than_four_positive_nodes_gives_n2(workflow: StagingWorkflow, raw_n: str) -> None:
    result = workflow.stage_record(_record(pathological_n=raw_n, positive_nodes=5))

    assert result.pathological_n8 == "N2"


def test_out_of_range_node_count_is_ignored(workflow: StagingWorkflow) -> None:
    result = workflow.stage_record(
        _record(clinical_t="T2", clinical_n="N2c", pathological_n="NX", positive_nodes=98)
    )

    assert result.staging_path == CLINICAL
    assert result.clinical_n8 == "N2"
    assert result.clinical_stage == "II"


def test_input_record_normalizes_cells() -> None:
    record = InputRecord(
        record_id=101.0,
        clinical_t=float("nan"),
        pathological_n=None,
        positive_nodes="3.0",
    )

    assert record.record_id == "101"
    assert record.clinical_t is None
    assert record.positive_nodes == 3
    assert InputRecord(positive_nodes="n/a").positive_nodes is None
    assert InputRecord(positive_nodes=2.5).positive_nodes is None


def test_process_dataframe_builds_result_and_summary(workflow: StagingWorkflow, make_frame) -> None:
    df = make_frame(
        [
            {"record_id": "A", "clinical_t": "T2", "clinical_n": "N1"},
            {"record_id": "B", "pathological_t": "T3", "pathological_n": "N1", "positive_nodes": "6"},
            {"record_id": "C", "clinical_t": "T9"},
            {"record_id": "D", "pathological_t": "Tis", "pathological_n": "N0"},
        ]
    )

    result = workflow.process_dataframe(df)
    table = result.table

    assert list(table["PUF_CASE_ID"]) == ["A", "B", "C", "D"]
    assert list(table["best_stage"].fillna("")) == ["I", "III", "", "in situ"]
    assert list(table["staging_path"]) == [CLINICAL, PATHOLOGICAL, CLINICAL, PATHOLOGICAL]
    for flag in ERROR_FLAGS:
        assert flag in table.columns

    summary = result.summary
    assert summary.total_records == 4
    assert summary.staged_records == 3
    assert summary.unstaged_records == 1
    assert summary.percent_staged == 75.0
    assert summary.percent_staged_pathological == pytest.approx(66.67)
    assert summary.best_stage_counts == {"I": 1, "III": 1, "in situ": 1}
    assert summary.flag_counts["flag_in_situ"] == 1
    assert workflow.latest_result is result


def test_process_dataframe_does_not_mutate_input(workflow: StagingWorkflow, make_frame) -> None:
    df = make_frame([{"record_id": "A", "clinical_t": "T2", "clinical_n": "N1"}])
    before = df.copy()

    workflow.process_dataframe(df)

    pd.testing.assert_frame_equal(df, before)


def test_process_dataframe_is_deterministic(workflow: StagingWorkflow, make_frame) -> None:
    df = make_frame(
        [
            {"record_id": "A", "clinical_t": "T4a", "clinical_n": "N2b", "m": "M1"},
            {"record_id": "B", "pathological_n": "NX", "positive_nodes": "2", "pathological_t": "T1"},
        ]
    )

    first = workflow.process_dataframe(df)
    second = workflow.process_dataframe(df)

    pd.testing.assert_frame_equal(first.table, second.table)
    assert first.records == second.records
    assert workflow.latest_result is second


def test_result_table_is_read_only_copy(workflow: StagingWorkflow, make_frame) -> None:
    result = workflow.process_dataframe(make_frame([{"record_id": "A", "clinical_t": "T1", "clinical_n": "N0"}]))

    table = result.table
    table.loc[0, "best_stage"] = "IV"

    assert result.table.loc[0, "best_stage"] == "I"


def test_missing_required_column_fails_batch(workflow: StagingWorkflow, make_frame) -> None:
    df = make_frame([{"record_id": "A"}]).drop(columns=["TNM_PATH_N", "TNM_CLIN_M"])

    with pytest.raises(ValueError, match="TNM_PATH_N, TNM_CLIN_M"):
        workflow.process_dataframe(df)

    assert workflow.latest_result is None


def test_column_names_are_case_sensitive(workflow: StagingWorkflow, make_frame) -> None:
    df = make_frame([{"record_id": "A"}]).rename(columns={"TNM_CLIN_T": "tnm_clin_t"})

    with pytest.raises(ValueError, match="TNM_CLIN_T"):
        workflow.process_dataframe(df)
