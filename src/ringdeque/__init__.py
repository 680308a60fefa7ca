# src/ringdeque/__init__.py
"""ringdeque: a double-ended queue on top of a growable ring buffer.

Key modules:
- `deque`: the `RingDeque` container and its fail-fast iterator.
- `errors`: the exceptions raised by the container.
- `config`: TOML-backed settings (default capacity, log levels).
- `logging_config`: Loguru setup for applications and the demo.
"""

import importlib.metadata

from loguru import logger

from ringdeque.deque import DEFAULT_CAPACITY, RingDeque, RingDequeIterator
from ringdeque.errors import (
    ConcurrentModificationError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    RingDequeError,
)

# Silent by default when used as a library; setup_logging() re-enables it.
logger.disable("ringdeque")

try:
    __version__: str = importlib.metadata.version("ringdeque")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "DEFAULT_CAPACITY",
    "ConcurrentModificationError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "RingDeque",
    "RingDequeError",
    "RingDequeIterator",
]
