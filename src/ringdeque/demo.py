"""Demonstration driver for RingDeque.

Replays a fixed sequence of insertions that exercises growth from small
and zero capacities, rejected bounded appends, clearing and iteration,
and prints the size, capacity and contents after each stage.

Usage:
    ringdeque-demo
    python -m ringdeque.demo
"""

import sys
from pathlib import Path

from loguru import logger

from ringdeque.config import Settings
from ringdeque.deque import RingDeque
from ringdeque.logging_config import setup_logging


def _growth_from_two() -> RingDeque[str]:
    dq = RingDeque[str](2)
    dq.try_append("Hello World")
    dq.prepend("World Hello")
    dq.append("Hello World Hello")
    dq.prepend("World Hello World")
    dq.prepend("World Hello Hello World")
    dq.append("Hello World Hello World")
    return dq


def _growth_from_zero(dq: RingDeque[str]) -> RingDeque[str]:
    dq.prepend("Hello World")
    dq.prepend("World Hello")
    dq.prepend("World Hello World")
    dq.prepend("World Hello Hello World")
    # Both are rejected: the deque is full at capacity 4.
    dq.try_append("World Hello Hello World World")
    dq.try_append("Hello Hello")
    return dq


def _append_only() -> RingDeque[str]:
    dq = RingDeque[str](0)
    for text in (
        "Hello World",
        "World Hello",
        "World Hello World",
        "World Hello Hello World",
        "Hello World",
        "World Hello",
        "World World Hello",
        "World Hello Hello",
    ):
        dq.append(text)
    dq.try_append("HehhEllo")
    dq.try_append("HehhEllo Olfle")
    dq.append("HehhEllo Olfle")
    return dq


def run_demo() -> list[str]:
    """Runs every stage and returns the printed blocks in order.

    The last block lists the elements of the final deque, one per line,
    as produced by iterating over it.
    """
    blocks: list[str] = []

    logger.info("Stage 1: growth from capacity 2")
    blocks.append(_growth_from_two().describe())

    logger.info("Stage 2: growth from capacity 0, then bounded appends")
    dq = _growth_from_zero(RingDeque[str](0))
    blocks.append(dq.describe())
    dq.append("World Hello Hello World World")
    dq.append("Hello Hello")
    blocks.append(dq.describe())

    logger.info("Stage 3: append-only growth")
    dq = _append_only()
    blocks.append(dq.describe())

    logger.info("Stage 4: clear and iterate")
    dq.clear()
    dq.try_append("1234")
    dq.try_append("4321")
    dq.prepend("4321123")
    dq.try_append("29349")
    dq.prepend("59494")
    blocks.append("\n".join(dq))

    return blocks


def main() -> int:
    """The synchronous entry point for the demo."""
    settings = Settings.get_instance()
    log_dir = (
        Path(settings.general.log_directory)
        if settings.general.log_directory
        else None
    )
    setup_logging(
        console_level=settings.general.log_level_console,
        file_level=settings.general.log_level_file,
        log_dir=log_dir,
    )

    try:
        for block in run_demo():
            print(block)
    except Exception:
        logger.exception("The demo failed with an unhandled exception.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
