"""Callback-routing facade over the NMEA sentence dispatcher.

``NmeaParser`` holds one handler slot per sentence type plus one failure
slot. ``parse`` decodes a line and calls exactly one of them::

    parser = NmeaParser()
    parser.set_handler(GGASentence, lambda gga: print(gga.position))
    parser.set_failure_handler(lambda line: print("unparsed:", line))
    parser.parse("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47")

Every slot defaults to a no-op, so unregistered sentence types are dropped
silently. The parser keeps no state between calls apart from the handlers
themselves, and does no locking: callers sharing one instance across threads
must serialize ``set_handler`` and ``parse`` themselves.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from gpsnmea.nmea.checksum import validate_checksum
from gpsnmea.nmea.dispatcher import dispatch_sentence
from gpsnmea.nmea.types import (
    SENTENCE_KINDS,
    Decoded,
    Failed,
    GGASentence,
    GLLSentence,
    GSASentence,
    GSVSentence,
    RMCSentence,
    Sentence,
    SentenceKind,
    VTGSentence,
)

__all__ = ["NmeaParser", "SentenceHandlers", "UnroutableSentenceError"]

logger = logging.getLogger(__name__)


class UnroutableSentenceError(RuntimeError):
    """A decoded sentence kind has no handler slot.

    This means the grammar table and the handler slots have drifted apart.
    It is a programming error, never a consequence of bad input.
    """


def _ignore(_payload: Any) -> None:
    pass


@dataclass
class SentenceHandlers:
    """One handler slot per sentence type, plus the failure handler."""

    gga: Callable[[GGASentence], None] = _ignore
    gll: Callable[[GLLSentence], None] = _ignore
    gsa: Callable[[GSASentence], None] = _ignore
    gsv: Callable[[GSVSentence], None] = _ignore
    rmc: Callable[[RMCSentence], None] = _ignore
    vtg: Callable[[VTGSentence], None] = _ignore
    failure: Callable[[str], None] = _ignore


# Sentence tag -> SentenceHandlers attribute.
_HANDLER_SLOTS: dict[SentenceKind, str] = {
    SentenceKind.GGA: "gga",
    SentenceKind.GLL: "gll",
    SentenceKind.GSA: "gsa",
    SentenceKind.GSV: "gsv",
    SentenceKind.RMC: "rmc",
    SentenceKind.VTG: "vtg",
}


class NmeaParser:
    """Decode NMEA lines and route each result to a registered handler.

    Args:
        verify_checksum: When True, a line that decodes but whose checksum
            does not match its body is routed to the failure handler. Off by
            default: the transmitted checksum is extracted, not verified.
    """

    def __init__(self, verify_checksum: bool = False) -> None:
        self._verify_checksum = verify_checksum
        self._handlers = SentenceHandlers()

    def set_handler(self, sentence_type: type, handler: Callable[[Any], None]) -> None:
        """Replace the handler called with every decoded ``sentence_type``.

        Args:
            sentence_type: One of the six sentence record classes, e.g.
                ``GGASentence``.
            handler: Called with the decoded record.

        Raises:
            TypeError: If ``sentence_type`` is not a sentence record class.
        """
        kind = SENTENCE_KINDS.get(sentence_type)
        if kind is None:
            raise TypeError(f"{sentence_type!r} is not an NMEA sentence type")
        setattr(self._handlers, _HANDLER_SLOTS[kind], handler)

    def set_failure_handler(self, handler: Callable[[str], None]) -> None:
        """Replace the handler called with the original text of unparsed lines."""
        self._handlers.failure = handler

    def parse(self, line: str) -> None:
        """Decode ``line`` and call exactly one handler.

        Decode failures are routed to the failure handler and never raised.
        Exceptions raised by a handler propagate to the caller.

        Raises:
            UnroutableSentenceError: If the dispatcher produced a sentence
                kind with no handler slot.
        """
        match dispatch_sentence(line):
            case Failed(text=text):
                logger.debug(f"Unparsed NMEA line: {text!r}")
                self._handlers.failure(text)
            case Decoded(kind=kind, sentence=sentence):
                self._route(line, kind, sentence)

    def _route(self, line: str, kind: SentenceKind, sentence: Sentence) -> None:
        if self._verify_checksum and not validate_checksum(line):
            logger.debug(f"Checksum mismatch: {line!r}")
            self._handlers.failure(line)
            return

        slot = _HANDLER_SLOTS.get(kind)
        if slot is None:
            raise UnroutableSentenceError(f"No handler slot for {kind!r} sentences")
        getattr(self._handlers, slot)(sentence)
