import pytest

from gostudy.pipe_filter import (
    FilterFormatError,
    SplitFilter,
    StraightPipeline,
    SumFilter,
    ToIntFilter,
)


def _pipeline():
    return StraightPipeline("p1", SplitFilter(","), ToIntFilter(), SumFilter())


def test_straight_pipeline_sums_numbers():
    assert _pipeline().process("1,2,3") == 6


def test_pipeline_keeps_name_and_filters():
    pipeline = _pipeline()
    assert pipeline.name == "p1"
    assert len(pipeline.filters) == 3


def test_split_filter_splits_on_delimiter():
    assert SplitFilter(",").process("A,B,C") == ["A", "B", "C"]


def test_split_filter_empty_delimiter_splits_characters():
    assert SplitFilter("").process("abc") == ["a", "b", "c"]


def test_split_filter_rejects_non_string():
    with pytest.raises(FilterFormatError, match="input data should be String."):
        SplitFilter(",").process(5)


def test_to_int_filter_converts_signed_numbers():
    assert ToIntFilter().process(["1", "-2", "+3"]) == [1, -2, 3]


@pytest.mark.parametrize("bad", ["x", " 1", "1_000", "", "1.5"])
def test_to_int_filter_rejects_invalid_numbers(bad):
    with pytest.raises(ValueError, match="invalid syntax"):
        ToIntFilter().process([bad])


def test_to_int_filter_rejects_out_of_range():
    with pytest.raises(ValueError, match="out of range"):
        ToIntFilter().process([str(2**63)])


def test_to_int_filter_rejects_wrong_type():
    with pytest.raises(FilterFormatError, match=r"\[\]string"):
        ToIntFilter().process("1,2")


def test_sum_filter_rejects_wrong_type():
    with pytest.raises(FilterFormatError, match=r"\[\]int"):
        SumFilter().process(["1"])


def test_pipeline_propagates_errors():
    with pytest.raises(ValueError):
        _pipeline().process("1,a,3")


def test_pipeline_rejects_non_string_input():
    with pytest.raises(FilterFormatError):
        _pipeline().process([1, 2, 3])


def test_empty_pipeline_returns_none():
    assert StraightPipeline("empty").process("1,2") is None