import pytest

from algorithms.sorting import bubble_sort, counting_sort, insertion_sort, radix_sort


SORTS = [
    "bubble-sort", "selection-sort", "insertion-sort", "quick-sort",
    "merge-sort", "heap-sort", "counting-sort", "radix-sort", "shell-sort",
]


@pytest.mark.parametrize("algorithm_id", SORTS)
def test_sort_ends_sorted_and_fully_finalized(run, algorithm_id):
    trace = run(algorithm_id)
    first, last = trace[0].data, trace[-1].data
    assert list(last.values) == sorted(first.values)
    assert last.sorted == tuple(range(len(last.values)))
    assert last.highlights == {}


@pytest.mark.parametrize("algorithm_id", SORTS)
def test_sort_only_permutes_values(run, algorithm_id):
    trace = run(algorithm_id)
    assert sorted(trace[-1].data.values) == sorted(trace[0].data.values)


@pytest.mark.parametrize("algorithm_id", ["bubble-sort", "selection-sort", "quick-sort", "heap-sort"])
def test_finalized_indices_are_never_highlighted_again(run, algorithm_id):
    for step in run(algorithm_id):
        assert not set(step.data.highlights) & set(step.data.sorted)


def test_bubble_sort_compares_adjacent_pairs():
    trace = list(bubble_sort())
    for step in trace:
        compared = sorted(i for i, role in step.data.highlights.items() if role == "comparing")
        if compared:
            assert len(compared) == 2 and compared[1] - compared[0] == 1


def test_insertion_sort_swaps_are_adjacent():
    for step in insertion_sort():
        swapped = sorted(i for i, role in step.data.highlights.items() if role == "swapped")
        if swapped:
            assert swapped[1] - swapped[0] == 1


def test_counting_sort_shows_count_array():
    trace = list(counting_sort())
    counts = [step.data.aux for step in trace]
    assert (0, 1, 2, 2, 1, 0, 0, 0, 1) in counts
    assert trace[-1].data.aux == (0,) * 9


def test_radix_sort_fills_buckets_by_digit():
    trace = list(radix_sort())
    assert all(len(step.data.buckets) in (0, 10) for step in trace)
    ones_pass = [step.data.buckets for step in trace if step.data.buckets and step.variables.get("exp") == 1]
    assert any(buckets[0] == (170, 90) for buckets in ones_pass)
    assert list(trace[-1].data.values) == [2, 24, 45, 66, 75, 90, 170, 802]
