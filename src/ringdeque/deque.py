from collections.abc import Iterable, Iterator, Sized
from typing import TYPE_CHECKING, Final, Generic, TypeVar

from loguru import logger

from ringdeque.errors import (
    ConcurrentModificationError,
    IndexOutOfRangeError,
    InvalidArgumentError,
)

if TYPE_CHECKING:
    from ringdeque.config import Settings

T = TypeVar("T")

DEFAULT_CAPACITY: Final[int] = 32


class RingDeque(Sized, Generic[T]):
    """A double-ended queue stored in a growable circular buffer.

    Elements live in a fixed-length list interpreted as a ring. ``_front``
    points at the first occupied slot and ``_back`` one past the last one,
    both wrapping modulo the capacity. Logical index ``i`` maps to the
    physical slot ``(_front + i) % capacity``.

    Inserting into a full deque with :meth:`append` or :meth:`prepend`
    grows the storage to ``max(len + 1, capacity * 2)`` and straightens
    the ring so that the front lands on slot 0. The storage never shrinks.

    ``None`` marks an empty slot and is the "absent" result of the pop and
    peek methods, so it cannot be stored as an element.

    The class is not thread-safe. Iterators are fail-fast: any structural
    change made after an iterator was created raises
    :class:`~ringdeque.errors.ConcurrentModificationError` on its next step.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """Initializes an empty RingDeque.

        Args:
            capacity: The initial number of slots. Zero is allowed; the
                first insertion will grow the storage.

        Raises:
            InvalidArgumentError: If the capacity is not a non-negative integer.
        """
        if not isinstance(capacity, int) or capacity < 0:
            err_msg = "Capacity must be a non-negative integer."
            raise InvalidArgumentError(err_msg)
        self._storage: list[T | None] = [None] * capacity
        self._front = 0
        self._back = 0
        self._count = 0
        self._stamp = 0

    @classmethod
    def from_settings(cls, settings: "Settings | None" = None) -> "RingDeque[T]":
        """Creates a deque sized by the configured default capacity."""
        if settings is None:
            from ringdeque.config import Settings

            settings = Settings.get_instance()
        return cls(settings.deque.default_capacity)

    @property
    def capacity(self) -> int:
        """The number of slots currently allocated."""
        return len(self._storage)

    @property
    def is_full(self) -> bool:
        """Returns True if the next auto-insert would trigger a resize."""
        return self._count == len(self._storage)

    # --- Insertion ---

    def try_append(self, item: T) -> bool:
        """Adds an element to the back only if there is a free slot.

        Args:
            item: The element to add.

        Returns:
            True if the element was added, False if the deque is full. A
            full deque is left untouched.

        Raises:
            InvalidArgumentError: If ``item`` is None.
        """
        self._check_item(item)
        if self.is_full:
            return False
        self._push_back(item)
        return True

    def append(self, item: T) -> None:
        """Adds an element to the back, growing the storage when full.

        Raises:
            InvalidArgumentError: If ``item`` is None.
        """
        self._check_item(item)
        if self.is_full:
            self._grow()
        self._push_back(item)

    def prepend(self, item: T) -> None:
        """Adds an element to the front, growing the storage when full.

        Raises:
            InvalidArgumentError: If ``item`` is None.
        """
        self._check_item(item)
        if self.is_full:
            self._grow()
        capacity = len(self._storage)
        self._front = (self._front - 1 + capacity) % capacity
        self._storage[self._front] = item
        self._count += 1
        self._stamp += 1

    def extend(self, items: Iterable[T]) -> None:
        """Appends every element of the iterable in order.

        A None element raises when it is reached; the elements before it
        remain in the deque.
        """
        for item in items:
            self.append(item)

    # --- Removal and inspection ---

    def pop_first(self) -> T | None:
        """Removes and returns the front element, or None if empty."""
        if self._count == 0:
            return None
        item = self._storage[self._front]
        self._storage[self._front] = None
        self._front = (self._front + 1) % len(self._storage)
        self._count -= 1
        self._stamp += 1
        return item

    def pop_last(self) -> T | None:
        """Removes and returns the back element, or None if empty."""
        if self._count == 0:
            return None
        capacity = len(self._storage)
        self._back = (self._back - 1 + capacity) % capacity
        item = self._storage[self._back]
        self._storage[self._back] = None
        self._count -= 1
        self._stamp += 1
        return item

    def peek_first(self) -> T | None:
        """Returns the front element without removing it, or None if empty."""
        if self._count == 0:
            return None
        return self._storage[self._front]

    def peek_last(self) -> T | None:
        """Returns the back element without removing it, or None if empty."""
        if self._count == 0:
            return None
        capacity = len(self._storage)
        return self._storage[(self._back - 1 + capacity) % capacity]

    def clear(self) -> None:
        """Removes all elements. The capacity is kept."""
        for i in range(len(self._storage)):
            self._storage[i] = None
        self._front = self._back = self._count = 0
        self._stamp += 1
        logger.debug(f"Cleared deque, capacity stays at {len(self._storage)}.")

    # --- Positional access ---

    def at(self, index: int) -> T:
        """Returns the element at a logical position counted from the front.

        Args:
            index: A position in ``[0, len(self))``. Negative indices are
                not accepted.

        Raises:
            IndexOutOfRangeError: If the index is out of range.
        """
        if not 0 <= index < self._count:
            err_msg = f"Index {index} out of range for deque of size {self._count}."
            raise IndexOutOfRangeError(err_msg)
        item = self._storage[(self._front + index) % len(self._storage)]
        return item  # type: ignore[return-value]

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    # --- Iteration ---

    def __iter__(self) -> Iterator[T]:
        """Returns a fail-fast iterator from front to back."""
        return RingDequeIterator(self)

    def __reversed__(self) -> Iterator[T]:
        """Returns a fail-fast iterator from back to front."""
        return RingDequeIterator(self, reverse=True)

    # --- Utility ---

    def __len__(self) -> int:
        """Returns the current number of elements in the deque."""
        return self._count

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._items()) + "]"

    def __repr__(self) -> str:
        """Returns a developer-friendly representation of the deque."""
        return (
            f"RingDeque(capacity={self.capacity}, size={len(self)}, "
            f"data={list(self._items())})"
        )

    def describe(self) -> str:
        """Returns the size, the capacity and the contents on three lines."""
        return f"{self._count}\n{self.capacity}\n{self}"

    # --- Internals ---

    def _items(self) -> Iterator[T]:
        capacity = len(self._storage)
        for i in range(self._count):
            yield self._storage[(self._front + i) % capacity]  # type: ignore[misc]

    @staticmethod
    def _check_item(item: object) -> None:
        if item is None:
            err_msg = "None cannot be stored in a RingDeque."
            raise InvalidArgumentError(err_msg)

    def _push_back(self, item: T) -> None:
        self._storage[self._back] = item
        self._back = (self._back + 1) % len(self._storage)
        self._count += 1
        self._stamp += 1

    def _grow(self) -> None:
        self._resize(max(self._count + 1, len(self._storage) * 2))

    def _resize(self, new_capacity: int) -> None:
        """Moves the elements into a larger buffer, front first at slot 0.

        A capacity that is not larger than the current one is ignored.
        """
        old_capacity = len(self._storage)
        if new_capacity <= old_capacity:
            return
        new_storage: list[T | None] = [None] * new_capacity
        for i in range(self._count):
            new_storage[i] = self._storage[(self._front + i) % old_capacity]
        self._storage = new_storage
        self._front = 0
        self._back = self._count
        self._stamp += 1
        logger.debug(f"Resized deque from {old_capacity} to {new_capacity} slots.")


class RingDequeIterator(Generic[T]):
    """Walks a RingDeque by logical index, in either direction.

    The iterator remembers the deque's modification stamp, size and
    capacity when it is created. If any of them differs on a later step,
    the deque was structurally changed and the step raises
    :class:`~ringdeque.errors.ConcurrentModificationError`.
    """

    def __init__(self, deque: RingDeque[T], reverse: bool = False) -> None:
        self._deque = deque
        self._reverse = reverse
        self._expected_stamp = deque._stamp
        self._expected_count = deque._count
        self._expected_capacity = deque.capacity
        self._step = 0

    def __iter__(self) -> "RingDequeIterator[T]":
        return self

    def __next__(self) -> T:
        deque = self._deque
        if (
            deque._stamp != self._expected_stamp
            or deque._count != self._expected_count
            or deque.capacity != self._expected_capacity
        ):
            err_msg = "RingDeque was modified during iteration."
            raise ConcurrentModificationError(err_msg)
        if self._step >= self._expected_count:
            raise StopIteration
        if self._reverse:
            index = self._expected_count - 1 - self._step
        else:
            index = self._step
        self._step += 1
        return deque.at(index)
