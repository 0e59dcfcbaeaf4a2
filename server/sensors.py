"""Background NMEA reading loop."""

import asyncio
from functools import partial

from gpsnmea.gnss import NMEAReader
from gpsnmea.nmea import SENTENCE_KINDS, Sentence, SentenceKind
from gpsnmea.nmea_parser import NmeaParser
from server.broadcaster import Broadcaster
from server.formatters import format_sentence_message, format_unparsed_message

__all__ = ["build_parser", "run_nmea_loop"]


def _publish_sentence(
    broadcaster: Broadcaster,
    loop: asyncio.AbstractEventLoop,
    kind: SentenceKind,
    sentence: Sentence,
) -> None:
    broadcaster.publish(format_sentence_message(kind, sentence), loop)


def _publish_unparsed(
    broadcaster: Broadcaster, loop: asyncio.AbstractEventLoop, text: str
) -> None:
    broadcaster.publish(format_unparsed_message(text), loop)


def build_parser(
    broadcaster: Broadcaster, loop: asyncio.AbstractEventLoop
) -> NmeaParser:
    """Create a parser whose handlers publish every outcome on ``loop``."""
    parser = NmeaParser()
    for sentence_type, kind in SENTENCE_KINDS.items():
        parser.set_handler(
            sentence_type, partial(_publish_sentence, broadcaster, loop, kind)
        )
    parser.set_failure_handler(partial(_publish_unparsed, broadcaster, loop))
    return parser


def run_nmea_loop(
    broadcaster: Broadcaster,
    loop: asyncio.AbstractEventLoop,
    reader: NMEAReader,
) -> None:
    """Read NMEA sentences continuously and publish them to WebSocket clients.

    The caller owns *reader* and must use it as an open context manager. The
    loop exits when ``reader.cancel()`` is called, which causes the underlying
    ``NMEAReader.read()`` to raise ``EOFError``.

    Args:
        broadcaster: Destination for the JSON messages.
        loop: Running asyncio event loop the client queues belong to.
        reader: An open ``NMEAReader`` instance managed by the caller.
    """
    reader.pump(build_parser(broadcaster, loop))
