from . import common, exceptions
from .common import BaseStrategy, Ordering
from .exceptions import BaseError, EmptyQueueError, InvalidHandleError, KeyNotFoundError
from .heap import LazyHeapStrategy
from .queue import PriorityQueue
from .tree import EagerTreeStrategy

__all__ = [
    'BaseError',
    'BaseStrategy',
    'EagerTreeStrategy',
    'EmptyQueueError',
    'InvalidHandleError',
    'KeyNotFoundError',
    'LazyHeapStrategy',
    'Ordering',
    'PriorityQueue',
]
