"""Pytest fixtures for server module testing."""

import queue
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from gpsnmea.gnss import NMEAReader


class ControlledNMEAReader(NMEAReader):
    """NMEAReader fed from an in-memory queue instead of a gpsd socket.

    ``None`` on the queue ends the stream, which is also what ``cancel``
    enqueues.
    """

    def __init__(self) -> None:
        super().__init__()
        self.line_queue: queue.Queue[str | None] = queue.Queue()

    def __enter__(self) -> "ControlledNMEAReader":
        return self

    def __exit__(self, *_: object) -> None:
        pass

    def cancel(self) -> None:
        self.line_queue.put(None)

    def read(self) -> str:
        line = self.line_queue.get()
        if line is None:
            raise EOFError("stream ended")
        return line


@pytest.fixture(autouse=True)
def nmea_controller() -> Iterator[ControlledNMEAReader]:
    controller = ControlledNMEAReader()
    with patch("server.main.NMEAReader", return_value=controller):
        yield controller
    controller.line_queue.put(None)
