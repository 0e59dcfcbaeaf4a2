"""NMEAReader: raw NMEA lines from a gpsd daemon.

gpsd owns the receiver's serial port, so other clients (Chrony, for
instance) keep working while this one listens on its TCP socket.

The watch command asks gpsd to pass the receiver's sentences through
unchanged, one per line. gpsd still answers that command with a few JSON
status objects (VERSION, DEVICES, WATCH) first. Only lines that begin with
``$`` are handed to callers; everything else is dropped here.
"""

import contextlib
import logging
import socket
from collections.abc import Iterator
from types import TracebackType
from typing import IO, Any

from gpsnmea.nmea_parser import NmeaParser

__all__ = ["NMEAReader"]

logger = logging.getLogger(__name__)

_DEFAULT_HOST = "localhost"
_DEFAULT_PORT = 2947
# Upper bound on how long cancel() waits for a blocked read to notice.
_READ_TIMEOUT = 2.0

_WATCH_CMD = b'?WATCH={"enable":true,"nmea":true}\n'

_SENTENCE_START = "$"


class NMEAReader:
    """Context manager yielding NMEA lines from gpsd.

    Iterate over it::

        with NMEAReader() as reader:
            for line in reader:
                parser.parse(line)

    or let it drive a parser until gpsd goes away::

        with NMEAReader() as reader:
            reader.pump(parser)

    Lines come back without their ``\\r\\n``.

    Args:
        host: Address of the gpsd daemon.
        port: TCP port gpsd listens on.
    """

    def __init__(
        self,
        host: str = _DEFAULT_HOST,
        port: int = _DEFAULT_PORT,
    ) -> None:
        self._host = host
        self._port = port
        self._sock: socket.socket | None = None
        self._stream: IO[Any] | None = None
        self._cancelled = False

    def __enter__(self) -> "NMEAReader":
        """Connect and switch gpsd to raw NMEA output."""
        sock = socket.create_connection((self._host, self._port))
        try:
            sock.settimeout(_READ_TIMEOUT)
            sock.sendall(_WATCH_CMD)
        except OSError:
            sock.close()
            raise
        self._sock = sock
        self._stream = sock.makefile("rb")
        logger.info(f"Watching NMEA from gpsd at {self._host}:{self._port}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def cancel(self) -> None:
        """Stop a reader that may be blocked in another thread.

        Shutting the socket down wakes a pending ``readline()`` at once; a
        read that is sitting in a timeout retry sees the flag instead. Either
        way the blocked ``read()`` raises ``EOFError``.
        """
        self._cancelled = True
        if self._sock is not None:
            with contextlib.suppress(OSError):
                self._sock.shutdown(socket.SHUT_RDWR)

    def _next_raw_line(self, stream: IO[Any]) -> bytes | None:
        """Return the next raw line, or None when the read timed out.

        Raises:
            EOFError: gpsd closed the stream or the socket failed.
        """
        try:
            raw: bytes = stream.readline()
        except TimeoutError:
            return None
        except OSError as e:
            logger.warning(f"Lost gpsd connection: {e}")
            raise EOFError("gpsd connection lost.") from e
        if not raw:
            raise EOFError("gpsd closed the stream.")
        return raw

    def _next_line(self) -> str | None:
        if self._stream is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        raw = self._next_raw_line(self._stream)
        if raw is None:
            if self._cancelled:
                raise EOFError("NMEAReader was cancelled.")
            return None
        return raw.decode("ascii", errors="replace").rstrip("\r\n")

    def read(self) -> str:
        """Block until gpsd delivers the next ``$``-prefixed line.

        Raises:
            RuntimeError: If the reader is not open.
            EOFError: If the reader was cancelled or the stream ended.
        """
        if self._sock is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        while True:
            line = self._next_line()
            if line is not None and line.startswith(_SENTENCE_START):
                return line

    def __iter__(self) -> Iterator[str]:
        """Yield lines until ``read()`` raises; never ends on its own."""
        while True:
            yield self.read()

    def pump(self, parser: NmeaParser) -> int:
        """Feed every line to ``parser.parse`` until the stream ends.

        Handler exceptions raised inside ``parse`` are not caught.

        Returns:
            How many lines were parsed.
        """
        count = 0
        try:
            for line in self:
                parser.parse(line)
                count += 1
        except EOFError:
            logger.info(f"gpsd stream finished after {count} sentences")
        return count
