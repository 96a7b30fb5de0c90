"""Tests for results/domain/index.py — datapoint and result indexing."""

from eval_compare.content.domain.input import DisplayInput
from eval_compare.content.domain.output import JsonInferenceOutput, TextOutputBlock
from eval_compare.results.domain.index import (
    MetricValueInfo,
    build_datapoint_index,
    build_result_index,
    build_run_variant_map,
    index_records,
)
from eval_compare.results.domain.record import EvaluationResultRecord
from eval_compare.results.domain.run_info import EvaluationRunInfo


def _make_input(text: str = "question") -> DisplayInput:
    return DisplayInput.model_validate(
        {
            "messages": [
                {"role": "user", "content": [{"type": "unstructured_text", "text": text}]}
            ]
        }
    )


def _make_record(
    datapoint_id: str | None = "d1",
    run_id: str | None = "r1",
    metric_name: str | None = "m",
    metric_value: str = "0.5",
    input_text: str = "question",
    generated_text: str = "answer",
    inference_id: str = "inf",
) -> EvaluationResultRecord:
    return EvaluationResultRecord(
        datapoint_id=datapoint_id,
        evaluation_run_id=run_id,
        input=_make_input(input_text),
        reference_output=[TextOutputBlock(type="text", text="reference")],
        generated_output=[TextOutputBlock(type="text", text=generated_text)],
        metric_name=metric_name,
        metric_value=metric_value,
        evaluator_inference_id=None,
        inference_id=inference_id,
        is_human_feedback=False,
    )


class TestDatapointIndexUniqueness:
    """One Datapoint per distinct id, first-seen content wins."""

    def test_duplicate_ids_collapse_to_one_entry(self) -> None:
        records = [
            _make_record(datapoint_id="d1", run_id="r1"),
            _make_record(datapoint_id="d1", run_id="r2"),
            _make_record(datapoint_id="d1", run_id="r1", metric_name="other"),
        ]

        datapoints = build_datapoint_index(records)

        assert [dp.id for dp in datapoints] == ["d1"]

    def test_first_seen_input_wins_when_duplicates_disagree(self) -> None:
        records = [
            _make_record(datapoint_id="d1", input_text="first"),
            _make_record(datapoint_id="d1", input_text="second"),
        ]

        datapoints = build_datapoint_index(records)

        assert datapoints[0].input == _make_input("first")

    def test_empty_stream_produces_empty_index(self) -> None:
        assert build_datapoint_index([]) == ()


class TestDatapointIndexOrdering:
    """Datapoints sort by id, descending, using plain string comparison."""

    def test_ids_sort_lexicographically_descending(self) -> None:
        records = [
            _make_record(datapoint_id="a1"),
            _make_record(datapoint_id="a10"),
            _make_record(datapoint_id="a2"),
        ]

        datapoints = build_datapoint_index(records)

        assert [dp.id for dp in datapoints] == ["a2", "a10", "a1"]

    def test_order_is_independent_of_stream_order(self) -> None:
        forward = [_make_record(datapoint_id=i) for i in ["b", "c", "a"]]
        backward = list(reversed(forward))

        assert [dp.id for dp in build_datapoint_index(forward)] == [
            dp.id for dp in build_datapoint_index(backward)
        ]


class TestMalformedRecords:
    """Records missing an id are dropped silently from both indexes."""

    def test_record_without_datapoint_id_is_dropped(self) -> None:
        records = [_make_record(datapoint_id=None), _make_record(datapoint_id="d1")]

        index = index_records(records)

        assert [dp.id for dp in index.datapoints] == ["d1"]

    def test_record_with_empty_datapoint_id_is_dropped(self) -> None:
        index = index_records([_make_record(datapoint_id="")])

        assert index.datapoints == ()
        assert dict(index.results) == {}

    def test_record_without_run_id_is_dropped(self) -> None:
        records = [_make_record(datapoint_id="d9", run_id=None)]

        index = index_records(records)

        assert index.datapoints == ()
        assert "d9" not in index.results

    def test_run_without_run_id_does_not_appear_under_valid_datapoint(self) -> None:
        records = [
            _make_record(datapoint_id="d1", run_id="r1"),
            _make_record(datapoint_id="d1", run_id=""),
        ]

        index = index_records(records)

        assert set(index.results["d1"]) == {"r1"}


class TestResultIndex:
    """Results are keyed datapoint -> run -> metric."""

    def test_every_indexed_datapoint_has_an_entry(self) -> None:
        records = [_make_record(datapoint_id="d1"), _make_record(datapoint_id="d2")]

        index = index_records(records)

        assert set(index.results) == {"d1", "d2"}

    def test_metric_entry_carries_record_fields(self) -> None:
        index = index_records(
            [_make_record(metric_name="m", metric_value="0.9", inference_id="inf-7")]
        )

        assert index.results["d1"]["r1"].metrics["m"] == MetricValueInfo(
            value="0.9",
            evaluator_inference_id=None,
            inference_id="inf-7",
            is_human_feedback=False,
        )

    def test_later_record_for_same_triple_overwrites_earlier(self) -> None:
        records = [
            _make_record(metric_name="m", metric_value="0.1"),
            _make_record(metric_name="m", metric_value="0.9"),
        ]

        index = index_records(records)

        assert index.results["d1"]["r1"].metrics["m"].value == "0.9"

    def test_distinct_metrics_coexist_for_one_run(self) -> None:
        records = [
            _make_record(metric_name="a", metric_value="1"),
            _make_record(metric_name="b", metric_value="2"),
        ]

        index = index_records(records)

        assert set(index.results["d1"]["r1"].metrics) == {"a", "b"}

    def test_record_without_metric_name_registers_run_without_metrics(self) -> None:
        index = index_records([_make_record(metric_name=None)])

        run = index.results["d1"]["r1"]
        assert dict(run.metrics) == {}
        assert run.generated_output == [TextOutputBlock(type="text", text="answer")]

    def test_generated_output_comes_from_first_record_of_run(self) -> None:
        records = [
            _make_record(metric_name="a", generated_text="first"),
            _make_record(metric_name="b", generated_text="second"),
        ]

        index = index_records(records)

        assert index.results["d1"]["r1"].generated_output == [
            TextOutputBlock(type="text", text="first")
        ]

    def test_result_index_ignores_datapoints_not_in_index(self) -> None:
        records = [_make_record(datapoint_id="d1"), _make_record(datapoint_id="d2")]
        datapoints = build_datapoint_index(records[:1])

        results = build_result_index(records, datapoints)

        assert set(results) == {"d1"}

    def test_json_outputs_are_kept(self) -> None:
        record = EvaluationResultRecord(
            datapoint_id="d1",
            evaluation_run_id="r1",
            generated_output=JsonInferenceOutput(raw='{"a": 1}', parsed={"a": 1}),
        )

        index = index_records([record])

        assert index.results["d1"]["r1"].generated_output == JsonInferenceOutput(
            raw='{"a": 1}', parsed={"a": 1}
        )


class TestIdempotence:
    """Rebuilding from the same stream yields structurally identical indexes."""

    def test_two_builds_are_equal(self) -> None:
        records = [
            _make_record(datapoint_id="d2", run_id="r1", metric_name="a"),
            _make_record(datapoint_id="d1", run_id="r2", metric_name="b"),
            _make_record(datapoint_id="d1", run_id="r1", metric_name="a"),
        ]

        first = index_records(records)
        second = index_records(records)

        assert first.datapoints == second.datapoints
        assert {
            dp: {run: result for run, result in runs.items()}
            for dp, runs in first.results.items()
        } == {
            dp: {run: result for run, result in runs.items()}
            for dp, runs in second.results.items()
        }


class TestRunVariantMap:
    def test_maps_run_id_to_variant_name(self) -> None:
        infos = [
            EvaluationRunInfo(evaluation_run_id="r1", variant_name="baseline"),
            EvaluationRunInfo(evaluation_run_id="r2", variant_name="candidate"),
        ]

        assert dict(build_run_variant_map(infos)) == {
            "r1": "baseline",
            "r2": "candidate",
        }

