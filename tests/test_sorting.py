import random

import pytest

from algokit.sorting import (
    bubble_sort,
    hoare_quick_sort,
    insertion_sort,
    iterative_merge_sort,
    kth_smallest,
    merge_sort,
    quick_sort,
    selection_sort,
)

SAMPLES = [
    [],
    [7],
    [5, 1, 6, 2, 4, 3],
    [4, 2, 6, 9, 2],
    [6, 0, 8, 2, 3, 0, 4, 0, 1],
    [1, 2, 3, 4, 9, 10, 5],
    [3, 3, 3, 3],
    list(range(20, 0, -1)),
    list(range(15)),
    [-5, 12, 0, -5, 99, 42, 7, 7, -100, 3],
]


@pytest.mark.parametrize("sample", SAMPLES)
def test_sorts_match_builtin(sample):
    expected = sorted(sample)
    assert bubble_sort(sample) == expected
    assert insertion_sort(sample) == expected
    assert selection_sort(sample) == expected
    assert merge_sort(sample) == expected
    assert iterative_merge_sort(sample) == expected
    assert quick_sort(sample) == expected
    assert hoare_quick_sort(sample) == expected


def test_input_is_not_modified():
    data = [9, 4, 7, 1]
    assert bubble_sort(data) == [1, 4, 7, 9]
    assert insertion_sort(data) == [1, 4, 7, 9]
    assert selection_sort(data) == [1, 4, 7, 9]
    assert merge_sort(data) == [1, 4, 7, 9]
    assert iterative_merge_sort(data) == [1, 4, 7, 9]
    assert quick_sort(data) == [1, 4, 7, 9]
    assert hoare_quick_sort(data) == [1, 4, 7, 9]
    assert data == [9, 4, 7, 1]


def test_random_lists():
    rng = random.Random(1234)
    for size in range(0, 40):
        data = [rng.randint(1, 100) for _ in range(size)]
        expected = sorted(data)
        assert bubble_sort(data) == expected
        assert insertion_sort(data) == expected
        assert selection_sort(data) == expected
        assert merge_sort(data) == expected
        assert iterative_merge_sort(data) == expected
        assert quick_sort(data) == expected
        assert hoare_quick_sort(data) == expected


def test_accepts_any_iterable():
    expected = [2, 4, 6]
    assert bubble_sort(x * 2 for x in (3, 1, 2)) == expected
    assert insertion_sort(x * 2 for x in (3, 1, 2)) == expected
    assert selection_sort(x * 2 for x in (3, 1, 2)) == expected
    assert merge_sort(x * 2 for x in (3, 1, 2)) == expected
    assert iterative_merge_sort(x * 2 for x in (3, 1, 2)) == expected
    assert quick_sort(x * 2 for x in (3, 1, 2)) == expected
    assert hoare_quick_sort(x * 2 for x in (3, 1, 2)) == expected


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [k.pair for k in merge_sort([Key(p) for p in pairs])]
    assert result == sorted(pairs, key=lambda p: p[0])


@pytest.mark.parametrize("sample", [s for s in SAMPLES if s])
def test_kth_smallest_every_rank(sample):
    ordered = sorted(sample)
    for k in range(1, len(sample) + 1):
        assert kth_smallest(sample, k) == ordered[k - 1]


@pytest.mark.parametrize("k", [0, -1, 8])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest([3, 1, 4, 1, 5, 9, 2], k)


def test_kth_smallest_empty():
    with pytest.raises(ValueError):
        kth_smallest([], 1)