"""VTG sentence grammar.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.
This is essential for navigation and sensor fusion applications that need
ground speed and heading data.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/M/N)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees), optional
           +-----+-- Track (true north, degrees), optional

Each value is followed by its unit letter. The unit letters are mandatory
even when the track value before them is empty.

Note: When stationary, the track angles may be empty (no heading when not moving).
"""

from gpsnmea.nmea.fields import (
    COMMA,
    checksum,
    enum_symbols,
    sentence_line,
    strip_line_ending,
)
from gpsnmea.nmea.primitives import (
    build,
    literal,
    optional,
    parse_complete,
    real,
    sequence,
)
from gpsnmea.nmea.types import FixMode, VTGSentence

VTG_GRAMMAR = build(
    sequence(
        literal("VTG"), COMMA,
        optional(real()), COMMA, literal("T"), COMMA,
        optional(real()), COMMA, literal("M"), COMMA,
        real(), COMMA, literal("N"), COMMA,
        real(), COMMA, literal("K"), COMMA,
        enum_symbols(FixMode),
        checksum,
    ),
    VTGSentence,
)

_VTG_LINE = sentence_line(VTG_GRAMMAR)


def parse_vtg(sentence: str) -> VTGSentence | None:
    """Decode a complete VTG line.

    Args:
        sentence: Raw NMEA VTG sentence string

    Returns:
        VTGSentence, or None if the line is not a well-formed VTG sentence
        from a supported talker.

    Example:
        >>> result = parse_vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B")
        >>> result.speed_kilometers_per_hour
        10.2
        >>> result.fix_mode
        <FixMode.AUTONOMOUS: 'A'>
    """
    return parse_complete(_VTG_LINE, strip_line_ending(sentence))
