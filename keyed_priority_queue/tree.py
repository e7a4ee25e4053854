from typing import List, Tuple

from sortedcontainers import SortedKeyList

from .common import MISSING, BaseStrategy, Copier, Key, Value


class EagerTreeStrategy(BaseStrategy[Key, Value]):
    """
    Sorted container based strategy.
    The ordered view holds exactly the pairs of the index at any moment:
    an update inserts the new pair and removes the previous one.

    :param pairs: initial `(key, value)` pairs; if a key is repeated the last value wins
    :param compare: value priority relation
    """

    def top(self) -> Tuple[Key, Value]:
        self._check_nonempty()

        return self._tree[0]

    def pop(self) -> Tuple[Key, Value]:
        self._check_nonempty()

        key, value = self._tree.pop(0)
        del self._index[key]

        return key, value

    def insert_or_update(self, key: Key, value: Value) -> bool:
        current = self._index.get(key, MISSING)

        # pairs of the same key are distinct by value so the new one is added before the old one is removed
        self._tree.add((key, value))
        if current is not MISSING:
            self._tree.remove((key, current))
        self._index[key] = value

        return current is not MISSING

    def erase(self, key: Key) -> bool:
        if (value := self._index.pop(key, MISSING)) is MISSING:
            return False

        self._tree.remove((key, value))

        return True

    def clear(self) -> None:
        self._tree.clear()
        self._index.clear()

    def items(self) -> List[Tuple[Key, Value]]:
        return list(self._tree)

    def _build(self) -> None:
        self._tree: SortedKeyList = SortedKeyList(self._index.items(), key=self._ordering.sort_key)

    def _clone_view(self, clone: BaseStrategy[Key, Value], copier: Copier) -> None:
        assert isinstance(clone, EagerTreeStrategy)
        clone._tree = SortedKeyList((copier(item) for item in self._tree), key=self._ordering.sort_key)
