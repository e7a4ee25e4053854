import operator
from typing import Iterable, List, Tuple

from .common import MISSING, BaseStrategy, Compare, Copier, Key, Value, logger


class LazyHeapStrategy(BaseStrategy[Key, Value]):
    """
    Binary-heap based strategy with lazy invalidation.
    An update pushes a new pair onto the heap leaving the previous one in place (stale),
    an erase only removes the key from the index. Stale pairs are discarded
    as soon as they reach the top of the heap so that the top is always valid.

    :param pairs: initial `(key, value)` pairs; if a key is repeated the last value wins
    :param compare: value priority relation
    """

    def __init__(self, pairs: Iterable[Tuple[Key, Value]] = (), *, compare: Compare = operator.gt):
        self._heap: List[Tuple[Key, Value]] = []
        super().__init__(pairs, compare=compare)

    @property
    def stale_count(self) -> int:
        """
        Returns the number of stale pairs not yet discarded from the heap.
        """

        return len(self._heap) - len(self._index)

    def top(self) -> Tuple[Key, Value]:
        self._check_nonempty()

        return self._heap[0]

    def pop(self) -> Tuple[Key, Value]:
        self._check_nonempty()

        key, value = self._heap[0]
        del self._index[key]
        self._pop_top()
        self._pop_till_valid()

        return key, value

    def insert_or_update(self, key: Key, value: Value) -> bool:
        current = self._index.get(key, MISSING)
        if current is not MISSING and current == value:
            return True

        self._push((key, value))
        self._index[key] = value
        self._pop_till_valid()

        return current is not MISSING

    def erase(self, key: Key) -> bool:
        if key not in self._index:
            return False

        del self._index[key]
        self._pop_till_valid()

        return True

    def clear(self) -> None:
        self._heap.clear()
        self._index.clear()

    def _build(self) -> None:
        self._heap = list(self._index.items())
        for idx in reversed(range(len(self._heap) // 2)):
            self._siftup(idx)

    def _clone_view(self, clone: BaseStrategy[Key, Value], copier: Copier) -> None:
        assert isinstance(clone, LazyHeapStrategy)
        clone._heap = [copier(item) for item in self._heap]

    def _is_valid(self, item: Tuple[Key, Value]) -> bool:
        key, value = item
        current = self._index.get(key, MISSING)

        return current is not MISSING and current == value

    def _pop_till_valid(self) -> None:
        """
        Discards stale pairs from the top of the heap until the top one matches the index.
        """

        reaped = 0
        while self._heap and not self._is_valid(self._heap[0]):
            self._pop_top()
            reaped += 1

        if reaped:
            logger.debug("%d stale pairs discarded, %d left", reaped, self.stale_count)

    def _push(self, item: Tuple[Key, Value]) -> None:
        self._heap.append(item)
        try:
            self._siftdown(len(self._heap) - 1)
        except Exception:
            self._heap.pop()
            raise

    def _pop_top(self) -> None:
        last_item = self._heap.pop()
        if self._heap:
            self._heap[0] = last_item
            self._siftup(0)

    def _siftup(self, idx: int) -> None:
        precedes = self._ordering
        item = self._heap[idx]

        left_child_idx = 2 * idx + 1
        while left_child_idx < len(self._heap):
            right_child_idx = left_child_idx + 1
            if right_child_idx >= len(self._heap) or precedes(self._heap[left_child_idx], self._heap[right_child_idx]):
                first_child_idx = left_child_idx
            else:
                first_child_idx = right_child_idx

            child = self._heap[first_child_idx]
            if not precedes(child, item):
                break

            self._heap[idx] = child

            idx = first_child_idx
            left_child_idx = 2 * idx + 1

        self._heap[idx] = item

    def _siftdown(self, idx: int) -> None:
        precedes = self._ordering
        item = self._heap[idx]

        # the heap is not modified until the item position is found
        target_idx = idx
        while target_idx > 0:
            parent_idx = (target_idx - 1) // 2
            if precedes(item, self._heap[parent_idx]):
                target_idx = parent_idx
            else:
                break

        while idx > target_idx:
            parent_idx = (idx - 1) // 2
            self._heap[idx] = self._heap[parent_idx]
            idx = parent_idx

        self._heap[idx] = item
