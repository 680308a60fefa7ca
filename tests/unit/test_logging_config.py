import json
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from ringdeque import RingDeque
from ringdeque.logging_config import setup_logging


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    """Puts Loguru and the stdlib root logger back the way they were."""
    root_handlers = logging.root.handlers[:]
    root_level = logging.root.level
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("ringdeque")
    logging.root.handlers[:] = root_handlers
    logging.root.setLevel(root_level)


def read_messages(log_dir: Path) -> list[str]:
    """Helper returning the message of every serialized record in log_dir."""
    messages = []
    for log_file in log_dir.glob("ringdeque_*.log"):
        for line in log_file.read_text(encoding="utf-8").splitlines():
            messages.append(json.loads(line)["record"]["message"])
    return messages


@pytest.mark.usefixtures("restore_logging")
def test_file_sink_receives_package_and_stdlib_records(tmp_path: Path) -> None:
    """Tests that the JSON file sink collects package and stdlib messages."""
    setup_logging(console_level="WARNING", file_level="DEBUG", log_dir=tmp_path)

    dq = RingDeque[int](1)
    dq.extend([1, 2])
    logging.getLogger("some.library").warning("stdlib message")

    # Removing the sinks flushes the enqueued file writer.
    logger.remove()

    messages = read_messages(tmp_path)
    assert "Logging configured successfully." in messages
    assert "Resized deque from 1 to 2 slots." in messages
    assert "stdlib message" in messages


@pytest.mark.usefixtures("restore_logging")
def test_file_level_filters_records(tmp_path: Path) -> None:
    """Tests that records below the file level are not written."""
    setup_logging(console_level="ERROR", file_level="INFO", log_dir=tmp_path)

    RingDeque[int](0).append(1)
    logger.remove()

    messages = read_messages(tmp_path)
    assert "Logging configured successfully." in messages
    assert not any(m.startswith("Resized deque") for m in messages)


@pytest.mark.usefixtures("restore_logging")
def test_no_file_sink_without_directory(tmp_path: Path) -> None:
    """Tests that file logging is disabled when no directory is given."""
    setup_logging(console_level="ERROR", log_dir=None)
    RingDeque[int](0).append(1)
    logger.remove()
    assert list(tmp_path.iterdir()) == []
