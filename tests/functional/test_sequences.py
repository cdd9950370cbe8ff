import numpy as np
import pytest
from common_utils.core.errors import InvalidArgumentError, MaterializationLimitError
from common_utils.functional import sequences as seq
from common_utils.functional.reducers import to_list


def counting(source, pulled):
    """Generator over ``source`` recording every element pulled from it."""
    for item in source:
        pulled.append(item)
        yield item


def test_infinite_counts_from_start():
    assert to_list(seq.take(5, seq.infinite())) == [0, 1, 2, 3, 4]
    assert to_list(seq.take(3, seq.infinite(10))) == [10, 11, 12]


def test_infinite_calls_are_independent():
    first = seq.infinite()
    second = seq.infinite()
    next(first)
    next(first)
    assert next(second) == 0
    assert next(first) == 2


@pytest.mark.parametrize("start", ["0", 1.5, float("nan"), None, True])
def test_infinite_rejects_non_integer_start(start):
    with pytest.raises(InvalidArgumentError):
        seq.infinite(start)


def test_infinite_yields_ints_from_integral_start():
    values = to_list(seq.take(2, seq.infinite(2.0)))
    assert values == [2, 3]
    assert all(type(value) is int for value in values)
    assert to_list(seq.take(2, seq.infinite(np.int64(4)))) == [4, 5]


def test_take_zero_or_negative_is_empty():
    assert to_list(seq.take(0, seq.infinite())) == []
    assert to_list(seq.take(-2, [1, 2, 3])) == []


def test_take_shorter_source():
    assert to_list(seq.take(10, [1, 2])) == [1, 2]


def test_take_does_not_pull_past_n():
    pulled = []
    assert to_list(seq.take(2, counting(range(10), pulled))) == [0, 1]
    assert pulled == [0, 1]


def test_take_validates_n_at_call_time():
    with pytest.raises(InvalidArgumentError):
        seq.take("2", [1, 2, 3])
    with pytest.raises(InvalidArgumentError):
        seq.take(1.5, [1, 2, 3])


def test_slice_is_inclusive_on_both_ends():
    assert to_list(seq.slice(2, 3, "abcde")) == ["c", "d"]
    assert to_list(seq.slice(0, 0, "abcde")) == ["a"]


def test_slice_consumes_skipped_prefix_and_stops_at_end():
    pulled = []
    assert to_list(seq.slice(2, 3, counting("abcde", pulled))) == ["c", "d"]
    assert pulled == ["a", "b", "c", "d"]


def test_slice_works_on_infinite_source():
    assert to_list(seq.slice(5, 7, seq.infinite())) == [5, 6, 7]


def test_slice_empty_ranges():
    assert to_list(seq.slice(3, 2, "abcde")) == []
    assert to_list(seq.slice(1, -1, "abcde")) == []
    assert to_list(seq.slice(10, 12, "abc")) == []


def test_drop_skips_leading_elements():
    assert to_list(seq.drop(2, [1, 2, 3, 4])) == [3, 4]
    assert to_list(seq.drop(0, [1, 2])) == [1, 2]
    assert to_list(seq.drop(5, [1, 2])) == []


def test_drop_defaults_to_one():
    assert to_list(seq.drop(seq=[1, 2, 3])) == [2, 3]


def test_drop_is_lazy_on_infinite_source():
    assert to_list(seq.take(2, seq.drop(3, seq.infinite()))) == [3, 4]


@pytest.mark.parametrize(
    "n", [-1, np.int64(-1), 1.0, np.float64(1.0), "1", True, None]
)
def test_drop_rejects_invalid_count(n):
    with pytest.raises(InvalidArgumentError):
        seq.drop(n, [1, 2, 3])


def test_drop_right_removes_trailing_elements():
    assert to_list(seq.drop_right(2, [1, 2, 3, 4])) == [1, 2]
    assert to_list(seq.drop_right(seq=[1, 2, 3])) == [1, 2]
    assert to_list(seq.drop_right(0, [1, 2])) == [1, 2]
    assert to_list(seq.drop_right(5, [1, 2])) == []


def test_drop_right_on_generator():
    assert to_list(seq.drop_right(1, (n * n for n in range(4)))) == [0, 1, 4]


def test_cat_preserves_source_order():
    assert to_list(seq.cat([1, 2], [3, 4], [5, 6])) == [1, 2, 3, 4, 5, 6]
    assert to_list(seq.cat("ab", (c for c in "cd"))) == ["a", "b", "c", "d"]


def test_cat_without_sources_is_empty():
    assert to_list(seq.cat()) == []


def test_construct_prepends_head():
    assert to_list(seq.construct(0, [1, 2, 3])) == [0, 1, 2, 3]
    assert to_list(seq.construct(0, [])) == [0]


def test_map_preserves_order_and_cardinality():
    assert to_list(seq.map(lambda n: n * 2, [1, 2, 3])) == [2, 4, 6]


def test_map_is_lazy():
    calls = []
    result = seq.map(calls.append, [1, 2, 3])
    assert calls == []
    next(result)
    assert calls == [1]


def test_map_rejects_non_callable():
    with pytest.raises(InvalidArgumentError):
        seq.map("upper", ["a"])


def test_flat_map_concatenates_in_source_order():
    result = seq.flat_map(lambda n: [n, n * 3], [0, 1, 2])
    assert to_list(result) == [0, 0, 1, 3, 2, 6]


def test_map_cat_is_eager_list():
    result = seq.map_cat(lambda n: [n, n * 3], [0, 1, 2])
    assert result == [0, 0, 1, 3, 2, 6]


def test_interpose_inserts_between_elements():
    assert to_list(seq.interpose(lambda n: -n, [1, 2, 3])) == [1, -1, 2, -2, 3]
    assert to_list(seq.interpose(lambda _: ",", [1, 2, 3])) == [1, ",", 2, ",", 3]


@pytest.mark.parametrize("source", [[], [7]])
def test_interpose_short_sources_unchanged(source):
    assert to_list(seq.interpose(lambda n: -n, source)) == source


def test_filter_keeps_matching_elements():
    assert to_list(seq.filter(lambda n: n % 2 == 0, range(6))) == [0, 2, 4]


def test_filter_on_infinite_source():
    evens = seq.filter(lambda n: n % 2 == 0, seq.infinite())
    assert to_list(seq.take(3, evens)) == [0, 2, 4]


def test_filter_rejects_non_callable():
    with pytest.raises(InvalidArgumentError):
        seq.filter(None, [1])


def test_reverse_sequence_and_generator():
    assert to_list(seq.reverse([1, 2, 3])) == [3, 2, 1]
    assert to_list(seq.reverse("abc")) == ["c", "b", "a"]
    assert to_list(seq.reverse(n for n in range(3))) == [2, 1, 0]


def test_reverse_round_trip():
    xs = [4, 8, 15, 16, 23, 42]
    assert to_list(seq.reverse(to_list(seq.reverse(xs)))) == xs


def test_reverse_does_not_mutate_input():
    xs = [1, 2, 3]
    to_list(seq.reverse(xs))
    assert xs == [1, 2, 3]


def test_consumed_generator_yields_nothing_more():
    source = (n for n in range(3))
    assert to_list(seq.map(lambda n: n, source)) == [0, 1, 2]
    assert to_list(seq.map(lambda n: n, source)) == []


def test_list_source_can_be_reused():
    source = [1, 2, 3]
    assert to_list(seq.take(2, source)) == [1, 2]
    assert to_list(seq.take(2, source)) == [1, 2]


def test_composed_pipeline():
    squares_of_odds = seq.map(
        lambda n: n * n, seq.filter(lambda n: n % 2, seq.infinite(1))
    )
    assert to_list(seq.take(4, squares_of_odds)) == [1, 9, 25, 49]


@pytest.mark.parametrize("n", [np.int64(2), np.int32(2), np.uint8(2)])
def test_counts_accept_numpy_integers(n):
    source = [1, 2, 3, 4]
    assert to_list(seq.take(n, source)) == [1, 2]
    assert to_list(seq.drop(n, source)) == [3, 4]
    assert to_list(seq.drop_right(n, source)) == [1, 2]


@pytest.mark.parametrize("n", [-1, np.int64(-1), 1.5, "1", True])
def test_drop_right_rejects_invalid_count(n):
    with pytest.raises(InvalidArgumentError):
        seq.drop_right(n, [1, 2])


@pytest.mark.parametrize(
    "start, end", [("0", 2), (0, "2"), (None, 2), (0, 1.5), (float("nan"), 2)]
)
def test_slice_validates_bounds_at_call_time(start, end):
    with pytest.raises(InvalidArgumentError):
        seq.slice(start, end, "abcde")


@pytest.mark.parametrize(
    "combinator", [seq.map, seq.flat_map, seq.map_cat, seq.interpose, seq.filter]
)
@pytest.mark.parametrize("fn", [None, "upper", 3])
def test_function_arguments_validated_at_call_time(combinator, fn):
    with pytest.raises(InvalidArgumentError):
        combinator(fn, seq.infinite())


def test_map_cat_stops_at_materialization_limit(monkeypatch):
    from common_utils.core.config import settings

    monkeypatch.setattr(settings, "MATERIALIZE_LIMIT", 5)
    with pytest.raises(MaterializationLimitError):
        seq.map_cat(lambda n: [n, n], seq.infinite())
    assert seq.map_cat(lambda n: [n], [1, 2]) == [1, 2]


def test_reverse_generator_stops_at_materialization_limit(monkeypatch):
    from common_utils.core.config import settings

    monkeypatch.setattr(settings, "MATERIALIZE_LIMIT", 5)
    reversed_stream = seq.reverse(seq.infinite())
    with pytest.raises(MaterializationLimitError):
        next(reversed_stream)
    assert to_list(seq.reverse(n for n in range(3))) == [2, 1, 0]
