"""Exception types raised by :class:`ringdeque.deque.RingDeque`.

Each error also derives from the closest built-in exception, so callers
can catch them with a plain ``except ValueError`` or ``except IndexError``.
"""


class RingDequeError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(RingDequeError, ValueError):
    """Raised for a negative capacity or a ``None`` value on insertion."""


class IndexOutOfRangeError(RingDequeError, IndexError):
    """Raised when a logical index falls outside ``[0, len(deque))``."""


class ConcurrentModificationError(RingDequeError, RuntimeError):
    """Raised when an iterator observes a structural change to its deque."""
