class BaseError(Exception):
    """
    Base package exception.
    """


class EmptyQueueError(BaseError, IndexError):
    """
    The queue has no elements to access or remove.
    """


class KeyNotFoundError(BaseError, KeyError):
    """
    Key not found in the queue.
    """


class InvalidHandleError(BaseError):
    """
    Queue handle is invalidated (its content has been moved to another handle).
    """
