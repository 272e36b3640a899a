import io
import random

import pytest

from dsalgo.heap import HeapFullError, MinHeap, count_unmoved, heap_sort, main


def _is_heap(items):
    return all(
        items[parent] <= items[child]
        for child in range(1, len(items))
        for parent in [(child - 1) // 2]
    )


def test_extracts_in_ascending_order():
    values = [9, 4, 7, 1, 8, 2, 2, 6]
    heap = MinHeap()
    for value in values:
        heap.insert(value)
    assert heap.peek() == min(values)
    assert [heap.extract_min() for _ in values] == sorted(values)
    assert len(heap) == 0


def test_heap_order_kept_after_inserts():
    rng = random.Random(7)
    heap = MinHeap(100)
    inserted = []
    for _ in range(100):
        value = rng.randrange(1000)
        heap.insert(value)
        inserted.append(value)
        contents = list(heap)
        assert heap.peek() == min(inserted)
        assert sorted(contents) == sorted(inserted)
        assert _is_heap(contents) is True
    assert len(heap) == 100


def test_capacity_enforced():
    heap = MinHeap()
    for value in range(15):
        heap.insert(value)
    with pytest.raises(HeapFullError):
        heap.insert(99)
    assert len(heap) == 15


def test_empty_heap_errors():
    heap = MinHeap()
    with pytest.raises(IndexError):
        heap.peek()
    with pytest.raises(IndexError):
        heap.extract_min()


def test_from_iterable_builds_heap():
    values = [5, 3, 8, 1, 9, 2, 7]
    heap = MinHeap.from_iterable(values)
    assert _is_heap(list(heap))
    assert sorted(heap) == sorted(values)
    assert [heap.extract_min() for _ in values] == sorted(values)


def test_from_iterable_over_capacity():
    with pytest.raises(HeapFullError):
        MinHeap.from_iterable(range(5), capacity=4)


def test_from_iterable_grows_default_capacity():
    heap = MinHeap.from_iterable(range(30))
    assert len(heap) == 30
    with pytest.raises(HeapFullError):
        heap.insert(0)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_heap_sort_descending(seed):
    rng = random.Random(seed)
    values = [rng.randrange(-50, 50) for _ in range(40)]
    assert heap_sort(values) == sorted(values, reverse=True)


def test_count_unmoved_descending_input():
    values = [5, 4, 3, 2, 1]
    assert count_unmoved(values) == len(values)


def test_count_unmoved_ascending_input():
    assert count_unmoved([1, 2, 3]) == 1


def test_main_reads_cases(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n3 2 1\n2\n1 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "3\n0\n"