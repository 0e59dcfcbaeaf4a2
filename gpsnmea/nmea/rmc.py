"""RMC sentence grammar.

RMC (Recommended Minimum Specific GNSS Data) is the smallest sentence that
carries time, date, position, speed and course together.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W,A*..
           |      | |        | |         | |     |     |      |     | |
           |      | |        | |         | |     |     |      |     | +-- FAA mode indicator
           |      | |        | |         | |     |     |      +-----+-- Magnetic variation + E/W (optional)
           |      | |        | |         | |     |     +-- UTC date (ddmmyy)
           |      | |        | |         | |     +-- Course over ground, degrees true (optional)
           |      | |        | |         | +-- Speed over ground, knots
           |      | |        | +---------+-- Longitude DDDMM.MMMM + E/W
           |      | +--------+-- Latitude DDMM.MMMM + N/S
           |      +-- Data status (A=active, V=void)
           +-- UTC time (hhmmss.ss)

The magnetic variation value and its direction are decoded independently;
the grammar does not require one when the other is present.
"""

from gpsnmea.nmea.fields import (
    COMMA,
    calendar_date,
    checksum,
    enum_symbols,
    position_2d,
    sentence_line,
    strip_line_ending,
    time_of_day,
)
from gpsnmea.nmea.primitives import (
    build,
    literal,
    optional,
    parse_complete,
    real,
    sequence,
)
from gpsnmea.nmea.types import (
    DataStatus,
    FixMode,
    MagneticVariationDirection,
    RMCSentence,
)

RMC_GRAMMAR = build(
    sequence(
        literal("RMC"), COMMA,
        time_of_day, COMMA,
        enum_symbols(DataStatus), COMMA,
        position_2d, COMMA,
        real(), COMMA,
        optional(real()), COMMA,
        calendar_date, COMMA,
        optional(real()), COMMA,
        optional(enum_symbols(MagneticVariationDirection)), COMMA,
        enum_symbols(FixMode),
        checksum,
    ),
    RMCSentence,
)

_RMC_LINE = sentence_line(RMC_GRAMMAR)


def parse_rmc(sentence: str) -> RMCSentence | None:
    """Decode a complete RMC line, or return None if it is malformed."""
    return parse_complete(_RMC_LINE, strip_line_ending(sentence))
