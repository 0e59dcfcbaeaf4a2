"""Fan-out of JSON messages from the reader thread to WebSocket clients."""

import asyncio
import contextlib
import logging
from collections.abc import Iterator

__all__ = ["Broadcaster"]

logger = logging.getLogger(__name__)


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    # Full queue: the oldest message is dropped.
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


class Broadcaster:
    """Per-client bounded queues fed from a non-async thread.

    Args:
        queue_size: Messages buffered per client before the oldest is dropped.
    """

    def __init__(self, queue_size: int) -> None:
        self._queue_size = queue_size
        self._queues: list[asyncio.Queue[str]] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._queues)

    @contextlib.contextmanager
    def subscribe(self) -> Iterator[asyncio.Queue[str]]:
        """Register a new client queue for the duration of the ``with`` block."""
        queue: asyncio.Queue[str] = asyncio.Queue(maxsize=self._queue_size)
        self._queues.append(queue)
        logger.info(f"WebSocket client subscribed ({len(self._queues)} active)")
        try:
            yield queue
        finally:
            self._queues.remove(queue)
            logger.info(f"WebSocket client left ({len(self._queues)} active)")

    def publish(self, message: str, loop: asyncio.AbstractEventLoop) -> None:
        """Hand ``message`` to every client queue; safe to call from any thread."""
        for queue in list(self._queues):
            loop.call_soon_threadsafe(_enqueue_message, queue, message)
