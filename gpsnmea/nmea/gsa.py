"""GSA sentence grammar.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the
navigation solution and the resulting dilution of precision.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                      | |   |   |
           | | |                      | |   |   +-- VDOP
           | | |                      | |   +-- HDOP
           | | |                      | +-- PDOP
           | | +----------------------+-- 12 PRN slots, 2 digits each, may be empty
           | +-- Fix type (1=unavailable, 2=2D, 3=3D)
           +-- Mode (M=manual, A=automatic)

The twelve slots are always present on the wire. Only the populated ones are
kept, in wire order, so ``04,05,,09`` becomes ``(4, 5, 9)``.
"""

from gpsnmea.nmea.fields import (
    COMMA,
    checksum,
    enum_symbols,
    sentence_line,
    strip_line_ending,
)
from gpsnmea.nmea.primitives import (
    apply,
    build,
    fixed_uint,
    literal,
    optional,
    parse_complete,
    real,
    repeat,
    sequence,
)
from gpsnmea.nmea.types import GsaFixType, GsaMode, GSASentence

_SATELLITE_SLOTS = 12


def _populated_prns(slots: tuple[tuple[int | None], ...]) -> tuple[int, ...]:
    prns = []
    for (prn,) in slots:
        if prn is not None:
            prns.append(prn)
    return tuple(prns)


_SATELLITE_SLOT = sequence(optional(fixed_uint(10, 2)), COMMA)

satellite_block = apply(
    repeat(_SATELLITE_SLOT, _SATELLITE_SLOTS, _SATELLITE_SLOTS),
    _populated_prns,
)

GSA_GRAMMAR = build(
    sequence(
        literal("GSA"), COMMA,
        enum_symbols(GsaMode), COMMA,
        enum_symbols(GsaFixType), COMMA,
        satellite_block,
        real(), COMMA,  # PDOP
        real(), COMMA,  # HDOP
        real(),  # VDOP
        checksum,
    ),
    GSASentence,
)

_GSA_LINE = sentence_line(GSA_GRAMMAR)


def parse_gsa(sentence: str) -> GSASentence | None:
    """Decode a complete GSA line, or return None if it is malformed.

    Example:
        >>> parse_gsa("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39").satellites
        (4, 5, 9, 12, 24)
    """
    return parse_complete(_GSA_LINE, strip_line_ending(sentence))
