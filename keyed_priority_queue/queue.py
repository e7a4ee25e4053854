import copy
import logging
import operator
from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, Type, Union

from . import exceptions
from .common import BaseStrategy, Compare, Key, Value
from .heap import LazyHeapStrategy
from .tree import EagerTreeStrategy

logger = logging.getLogger(__package__)

STRATEGIES: Dict[str, Type[BaseStrategy]] = {
    'lazy': LazyHeapStrategy,
    'eager': EagerTreeStrategy,
}

StrategyT = Union[str, Type[BaseStrategy]]


def resolve_strategy(strategy: StrategyT) -> Type[BaseStrategy]:
    """
    Returns the strategy class by its name or the class itself.

    :param strategy: strategy name (`lazy` or `eager`) or strategy class
    :return: strategy class
    """

    if isinstance(strategy, str):
        try:
            return STRATEGIES[strategy]
        except KeyError:
            raise ValueError(f"unknown strategy '{strategy}', expected one of {sorted(STRATEGIES)}") from None

    if isinstance(strategy, type) and strategy in STRATEGIES.values():
        return strategy

    raise ValueError(f"unsupported strategy {strategy!r}")


class PriorityQueue(Generic[Key, Value]):
    """
    Priority queue supporting lookup, update and removal of an element by its key.
    Owns exactly one strategy instance all the operations are forwarded to.

    Once the queue content is moved to another queue (see :py:meth:`move`) the queue
    becomes invalid and any operation except :py:attr:`valid`, :py:meth:`copy_from`
    and :py:meth:`move_from` raises `InvalidHandleError`.

    :param pairs: initial `(key, value)` pairs; if a key is repeated the last value wins
    :param compare: returns `True` if the first value has strictly higher priority than the second one;
                    `operator.gt` (default) makes a max-priority queue, `operator.lt` a min-priority one
    :param strategy: `lazy` (binary heap with lazy invalidation, default) or `eager` (sorted container)
    """

    def __init__(
            self,
            pairs: Iterable[Tuple[Key, Value]] = (),
            *,
            compare: Compare = operator.gt,
            strategy: StrategyT = LazyHeapStrategy,
    ):
        strategy_cls = resolve_strategy(strategy)
        self._impl: Optional[BaseStrategy[Key, Value]] = strategy_cls(pairs, compare=compare)

    @classmethod
    def _from_impl(cls, impl: BaseStrategy[Key, Value]) -> 'PriorityQueue[Key, Value]':
        queue = cls.__new__(cls)
        queue._impl = impl

        return queue

    @property
    def valid(self) -> bool:
        """
        Returns `False` if the queue content has been moved to another queue.
        """

        return self._impl is not None

    @property
    def strategy(self) -> Type[BaseStrategy]:
        return type(self._get_impl())

    @property
    def compare(self) -> Compare:
        return self._get_impl().compare

    def _get_impl(self) -> BaseStrategy[Key, Value]:
        if self._impl is None:
            raise exceptions.InvalidHandleError("queue content has been moved")

        return self._impl

    def __len__(self) -> int:
        return self._get_impl().size()

    def __bool__(self) -> bool:
        return not self._get_impl().empty()

    def __contains__(self, key: Key) -> bool:
        return self._get_impl().contain(key)

    def __getitem__(self, key: Key) -> Value:
        return self._get_impl().peek(key)

    def __setitem__(self, key: Key, value: Value) -> None:
        self._get_impl().insert_or_update(key, value)

    def __delitem__(self, key: Key) -> None:
        if not self._get_impl().erase(key):
            raise exceptions.KeyNotFoundError(key)

    def __iter__(self) -> Iterator[Key]:
        return (key for key, value in self._get_impl().items())

    def __repr__(self) -> str:
        if self._impl is None:
            return f'<{type(self).__name__} (moved)>'

        return f'{type(self).__name__}({self._impl.items()!r}, strategy={type(self._impl).__name__})'

    def __copy__(self) -> 'PriorityQueue[Key, Value]':
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'PriorityQueue[Key, Value]':
        impl = self._get_impl()
        queue = self._from_impl(impl)
        memo[id(self)] = queue
        queue._impl = copy.deepcopy(impl, memo)

        return queue

    def top(self) -> Tuple[Key, Value]:
        """
        Returns the `(key, value)` pair with the highest priority.
        If the queue is empty raises `EmptyQueueError`.

        Complexity: O(1)
        """

        return self._get_impl().top()

    def pop(self) -> Tuple[Key, Value]:
        """
        Removes the `(key, value)` pair with the highest priority.
        If the queue is empty raises `EmptyQueueError`.

        Complexity: O(log(n)), amortized for the lazy strategy

        :return: removed pair
        """

        return self._get_impl().pop()

    def size(self) -> int:
        """
        Returns the number of keys in the queue.
        """

        return self._get_impl().size()

    def empty(self) -> bool:
        return self._get_impl().empty()

    def insert_or_update(self, key: Key, value: Value) -> bool:
        """
        Inserts the key with the value or updates the value if the key already exists.

        Complexity: O(log(n)), amortized for the lazy strategy

        :param key: item key
        :param value: item value
        :return: `True` if the key was in the queue
        """

        return self._get_impl().insert_or_update(key, value)

    def erase(self, key: Key) -> bool:
        """
        Removes the key and its value from the queue.

        Complexity: O(log(n)), amortized for the lazy strategy

        :param key: item key
        :return: `True` if the key was in the queue
        """

        return self._get_impl().erase(key)

    def contain(self, key: Key) -> bool:
        return self._get_impl().contain(key)

    def peek(self, key: Key) -> Value:
        """
        Returns the value of the key.
        If the key is not found raises `KeyNotFoundError`.

        :param key: item key
        :return: item value
        """

        return self._get_impl().peek(key)

    def clear(self) -> None:
        self._get_impl().clear()

    def items(self) -> List[Tuple[Key, Value]]:
        """
        Returns all the `(key, value)` pairs in priority order. The queue is not modified.
        """

        return self._get_impl().items()

    def copy(self) -> 'PriorityQueue[Key, Value]':
        """
        Returns an independent copy of the queue.

        Complexity: O(n)
        """

        impl = self._get_impl()
        logger.debug("copying %s of %d items", type(impl).__name__, impl.size())

        return self._from_impl(impl.copy())

    def move(self) -> 'PriorityQueue[Key, Value]':
        """
        Moves the queue content to a new queue. The current queue becomes invalid.

        Complexity: O(1)

        :return: new queue owning the content
        """

        impl = self._get_impl()
        self._impl = None
        logger.debug("%s of %d items moved", type(impl).__name__, impl.size())

        return self._from_impl(impl)

    def copy_from(self, other: 'PriorityQueue[Key, Value]') -> None:
        """
        Replaces the queue content by a copy of the other queue content.
        Makes an invalid queue valid again.

        :param other: queue to be copied
        """

        if other is self:
            return

        self._impl = other._get_impl().copy()

    def move_from(self, other: 'PriorityQueue[Key, Value]') -> None:
        """
        Replaces the queue content by the other queue content. The other queue becomes invalid.
        Makes an invalid queue valid again.

        :param other: queue the content is moved from
        """

        if other is self:
            return

        self._impl = other.move()._impl
