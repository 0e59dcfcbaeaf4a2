"""FastAPI web server streaming decoded NMEA sentences over WebSocket.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

WebSocket clients connect to ``ws://<host>:8000/ws`` and receive one JSON
message per NMEA line read from gpsd: ``{"type": "gga", ...}`` (or ``gll``,
``gsa``, ``gsv``, ``rmc``, ``vtg``) for decoded sentences, and
``{"type": "unparsed", "text": ...}`` for lines that could not be decoded.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from gpsnmea.gnss import NMEAReader
from server.broadcaster import Broadcaster
from server.sensors import run_nmea_loop

logger = logging.getLogger(__name__)

_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0

_broadcaster = Broadcaster(queue_size=_QUEUE_MAX_SIZE)


def _stream_from_gpsd(loop: asyncio.AbstractEventLoop, reader: NMEAReader) -> None:
    try:
        with reader:
            run_nmea_loop(_broadcaster, loop, reader)
    except OSError as e:
        logger.warning(f"Cannot stream NMEA from gpsd: {e}")


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@asynccontextmanager
async def _lifespan(_application: FastAPI) -> AsyncIterator[None]:
    loop = asyncio.get_running_loop()
    executor = ThreadPoolExecutor(max_workers=1)
    reader = NMEAReader()
    loop.run_in_executor(executor, _stream_from_gpsd, loop, reader)
    yield
    reader.cancel()
    executor.shutdown(wait=False)


app = FastAPI(lifespan=_lifespan)


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Forward every published NMEA message to one client.

    The client is subscribed before the handshake completes, so it sees every
    line read after it connected. A client that falls more than
    ``_QUEUE_MAX_SIZE`` messages behind loses the oldest ones. After
    ``_TIMEOUT_SECONDS`` without a message the server closes the socket with
    code 1001 and the client is expected to reconnect.
    """
    with _broadcaster.subscribe() as queue:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket)
