"""Tests for the preview accumulator."""
from decimal import Decimal

from source_preview_core.preview import CompletionReason, PreviewAccumulator


def test_add_caps_at_ten():
    acc = PreviewAccumulator()
    full = [acc.add({"i": i}) for i in range(15)]
    assert full[:9] == [False] * 9
    assert all(full[9:])
    assert len(acc.results) == 10
    assert acc.results[-1] == {"i": 9}


def test_fields_follow_last_record():
    acc = PreviewAccumulator()
    acc.add({"a": 1, "b": 2})
    acc.add({"c": 3})
    assert acc.fields == ["c"]


def test_merge_fields_keeps_first_seen_order():
    acc = PreviewAccumulator(merge_fields=True)
    acc.add({"a": 1, "b": 2})
    acc.add({"c": 3, "a": 4})
    assert acc.fields == ["a", "b", "c"]


def test_add_without_observing_fields():
    acc = PreviewAccumulator()
    acc.set_fields(["OBJECTID", "NAME"])
    acc.add({"OBJECTID": 1}, observe_fields=False)
    assert acc.fields == ["OBJECTID", "NAME"]


def test_records_are_json_safe():
    acc = PreviewAccumulator()
    acc.add({"area": Decimal("1.5"), "count": Decimal("3"), "tags": ("x", "y")})
    assert acc.results == [{"area": 1.5, "count": 3, "tags": ["x", "y"]}]


def test_settle_is_one_shot():
    acc = PreviewAccumulator()
    assert acc.settle(CompletionReason.CAPPED) is True
    assert acc.settle(CompletionReason.EXHAUSTED) is False
    assert acc.completion is CompletionReason.CAPPED


def test_step_outcomes():
    acc = PreviewAccumulator()
    acc.record_success("sample")
    assert not acc.failed
    acc.record_failure("schema", ValueError("bad json"))
    assert acc.failed
    assert acc.steps[-1].error == "bad json"


def test_results_unset_until_started():
    acc = PreviewAccumulator()
    assert acc.results is None
    assert not acc.full
    acc.start()
    assert acc.results == []
