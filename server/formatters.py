"""JSON formatting utilities for decoded NMEA sentences."""

import json
from dataclasses import asdict
from enum import Enum
from typing import Any

from gpsnmea.nmea import Sentence, SentenceKind

__all__ = ["format_sentence_message", "format_unparsed_message"]


def _encode_enum(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name.lower()
    raise TypeError(f"Cannot serialize {type(value).__name__}")


def format_sentence_message(kind: SentenceKind, sentence: Sentence) -> str:
    """Serialize a decoded sentence into a JSON string for WebSocket transmission.

    Nested records become objects, enums become their lower-case names and
    absent optional fields become ``null``.
    """
    return json.dumps(
        {"type": kind.value.lower(), **asdict(sentence)},
        default=_encode_enum,
    )


def format_unparsed_message(text: str) -> str:
    """Serialize a line that could not be decoded."""
    return json.dumps({"type": "unparsed", "text": text})
