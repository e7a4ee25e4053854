import abc
import copy
import functools
import logging
import operator
from typing import Any, Callable, Dict, Generic, Hashable, Iterable, List, Optional, Protocol, Tuple, TypeVar

from . import exceptions

logger = logging.getLogger(__package__)


class ComparableP(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __eq__(self, other: Any) -> bool: ...


class ComparableAndHashable(ComparableP, Protocol, Hashable):
    pass


Key = TypeVar('Key', bound=ComparableAndHashable)
Value = TypeVar('Value')

Compare = Callable[[Any, Any], bool]
Copier = Callable[[Any], Any]

MISSING: Any = object()


def _identity(obj: Any) -> Any:
    return obj


class Ordering(Generic[Key, Value]):
    """
    Total order over `(key, value)` pairs.

    A pair precedes another one if its value has higher priority according to `compare`,
    equal priorities are ordered by ascending key.

    :param compare: returns `True` if the first value has strictly higher priority than the second one
    """

    def __init__(self, compare: Compare = operator.gt):
        self.compare = compare
        self.sort_key = functools.cmp_to_key(self.cmp)

    def __call__(self, a: Tuple[Key, Value], b: Tuple[Key, Value]) -> bool:
        a_key, a_value = a
        b_key, b_value = b

        return self.compare(a_value, b_value) or (not self.compare(b_value, a_value) and a_key < b_key)

    def cmp(self, a: Tuple[Key, Value], b: Tuple[Key, Value]) -> int:
        """
        Three-way comparison of two pairs.

        :return: -1 if `a` precedes `b`, 1 if `b` precedes `a`, otherwise 0
        """

        if self(a, b):
            return -1
        elif self(b, a):
            return 1
        else:
            return 0


class BaseStrategy(Generic[Key, Value], abc.ABC):
    """
    Abstract addressable priority queue strategy.

    Keeps the authoritative key to value index, subclasses maintain an ordered view over it.

    :param pairs: initial `(key, value)` pairs; if a key is repeated the last value wins
    :param compare: value priority relation
    """

    def __init__(self, pairs: Iterable[Tuple[Key, Value]] = (), *, compare: Compare = operator.gt):
        self._ordering: Ordering[Key, Value] = Ordering(compare)
        self._index: Dict[Key, Value] = {}

        loaded = 0
        for key, value in pairs:
            self._index[key] = value
            loaded += 1

        if loaded:
            logger.debug(
                "%s: loaded %d pairs (%d duplicate keys collapsed)",
                type(self).__name__, loaded, loaded - len(self._index),
            )

        self._build()

    def __len__(self) -> int:
        return len(self._index)

    def __bool__(self) -> bool:
        return bool(self._index)

    def __contains__(self, key: Key) -> bool:
        return key in self._index

    def __copy__(self) -> 'BaseStrategy[Key, Value]':
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'BaseStrategy[Key, Value]':
        return self._clone(functools.partial(copy.deepcopy, memo=memo), memo)

    @property
    def compare(self) -> Compare:
        return self._ordering.compare

    def size(self) -> int:
        """
        Returns the number of keys in the queue.
        """

        return len(self._index)

    def empty(self) -> bool:
        return not self._index

    def contain(self, key: Key) -> bool:
        return key in self._index

    def peek(self, key: Key) -> Value:
        """
        Returns the current value of the key.
        If the key is not presented raises `KeyNotFoundError`.

        :param key: item key
        :return: item value
        """

        try:
            return self._index[key]
        except KeyError:
            raise exceptions.KeyNotFoundError(key) from None

    def items(self) -> List[Tuple[Key, Value]]:
        """
        Returns all the pairs in priority order without modifying the queue.
        """

        return sorted(self._index.items(), key=self._ordering.sort_key)

    def copy(self) -> 'BaseStrategy[Key, Value]':
        """
        Returns an independent copy of the strategy. Keys and values are shared.
        """

        return self._clone(_identity)

    def _clone(self, copier: Copier, memo: Optional[Dict[int, Any]] = None) -> 'BaseStrategy[Key, Value]':
        clone = type(self).__new__(type(self))
        if memo is not None:
            memo[id(self)] = clone
        clone._ordering = self._ordering
        clone._index = {copier(key): copier(value) for key, value in self._index.items()}
        self._clone_view(clone, copier)

        return clone

    def _check_nonempty(self) -> None:
        if not self._index:
            raise exceptions.EmptyQueueError("queue is empty")

    @abc.abstractmethod
    def _build(self) -> None:
        """
        Builds the ordered view from the index.
        """

    @abc.abstractmethod
    def _clone_view(self, clone: 'BaseStrategy[Key, Value]', copier: Copier) -> None:
        """
        Copies the ordered view to the clone.

        :param clone: strategy the view is copied to
        :param copier: function applied to every copied key and value
        """

    @abc.abstractmethod
    def top(self) -> Tuple[Key, Value]:
        """
        Returns the pair with the highest priority.
        If the queue is empty raises `EmptyQueueError`.
        """

    @abc.abstractmethod
    def pop(self) -> Tuple[Key, Value]:
        """
        Removes the pair with the highest priority.
        If the queue is empty raises `EmptyQueueError`.

        :return: removed pair
        """

    @abc.abstractmethod
    def insert_or_update(self, key: Key, value: Value) -> bool:
        """
        Inserts the key or updates its value if it already exists.

        :param key: item key
        :param value: item value
        :return: `True` if the key was presented
        """

    @abc.abstractmethod
    def erase(self, key: Key) -> bool:
        """
        Removes the key from the queue.

        :param key: item key
        :return: `True` if the key was presented
        """

    @abc.abstractmethod
    def clear(self) -> None:
        """
        Removes all items from the queue.
        """
