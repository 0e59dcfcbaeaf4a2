"""GLL sentence grammar.

GLL (Geographic Position - Latitude/Longitude) carries a position, the UTC
time it was computed at, and validity indicators.

GLL Sentence Format:
    $GPGLL,4916.45,N,12311.12,W,225444,A,A*5C
           |       | |        | |      | |
           |       | |        | |      | +-- FAA mode indicator (A/D/E/M/N)
           |       | |        | |      +-- Data status (A=active, V=void)
           |       | |        | +-- UTC time (hhmmss.ss)
           |       | +--------+-- Longitude DDDMM.MMMM + E/W
           +-------+-- Latitude DDMM.MMMM + N/S
"""

from gpsnmea.nmea.fields import (
    COMMA,
    checksum,
    enum_symbols,
    position_2d,
    sentence_line,
    strip_line_ending,
    time_of_day,
)
from gpsnmea.nmea.primitives import build, literal, parse_complete, sequence
from gpsnmea.nmea.types import DataStatus, FixMode, GLLSentence

GLL_GRAMMAR = build(
    sequence(
        literal("GLL"), COMMA,
        position_2d, COMMA,
        time_of_day, COMMA,
        enum_symbols(DataStatus), COMMA,
        enum_symbols(FixMode),
        checksum,
    ),
    GLLSentence,
)

_GLL_LINE = sentence_line(GLL_GRAMMAR)


def parse_gll(sentence: str) -> GLLSentence | None:
    """Decode a complete GLL line, or return None if it is malformed."""
    return parse_complete(_GLL_LINE, strip_line_ending(sentence))
