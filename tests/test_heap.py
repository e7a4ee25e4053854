import operator
import random

from keyed_priority_queue import LazyHeapStrategy


def test_stale_pairs_discarded_lazily():
    heap = LazyHeapStrategy([(1, 10), (2, 20), (3, 30)])
    assert heap.stale_count == 0

    heap.insert_or_update(1, 5)
    assert heap.stale_count == 1
    assert heap.size() == 3

    heap.erase(2)
    assert heap.stale_count == 2
    assert heap.size() == 2
    assert heap.top() == (3, 30)

    assert heap.pop() == (3, 30)
    assert heap.stale_count == 0
    assert heap.size() == 1
    assert heap.top() == (1, 5)


def test_stale_top_discarded_immediately():
    heap = LazyHeapStrategy([(1, 10), (2, 20)])

    heap.insert_or_update(2, 5)
    assert heap.top() == (1, 10)
    assert heap.stale_count == 0

    heap.erase(1)
    assert heap.top() == (2, 5)
    assert heap.stale_count == 0


def test_same_value_update_not_pushed():
    heap = LazyHeapStrategy([(1, 10), (2, 20)])

    assert heap.insert_or_update(1, 10) is True
    assert heap.stale_count == 0


def test_size_ignores_stale_pairs():
    heap = LazyHeapStrategy(compare=operator.lt)

    for key in range(100):
        heap.insert_or_update(key, key)
    for key in range(100):
        heap.insert_or_update(key, -key - 1)

    assert heap.size() == 100
    assert heap.stale_count == 100

    result = []
    while heap:
        result.append(heap.pop())

    assert result == [(key, -key - 1) for key in reversed(range(100))]
    assert heap.stale_count == 0


def test_erase_all_discards_everything():
    heap = LazyHeapStrategy([(key, random.randint(0, 10)) for key in range(20)])
    for key in range(20):
        heap.insert_or_update(key, random.randint(0, 10))

    for key in range(20):
        assert heap.erase(key) is True

    assert heap.empty()
    assert heap.stale_count == 0


def test_bulk_load_heapify():
    items = [(key, random.randint(0, 1000)) for key in range(200)]
    heap = LazyHeapStrategy(items)

    result = []
    while heap:
        result.append(heap.pop())

    assert result == sorted(items, key=lambda item: (-item[1], item[0]))


def test_copy_keeps_stale_pairs_separate():
    heap = LazyHeapStrategy([(1, 10), (2, 20), (3, 30)])
    heap.insert_or_update(1, 5)

    clone = heap.copy()
    assert clone.stale_count == 1

    clone.pop()
    clone.pop()
    assert clone.stale_count == 0
    assert heap.stale_count == 1
    assert heap.items() == [(3, 30), (2, 20), (1, 5)]
