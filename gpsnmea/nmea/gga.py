"""GGA sentence grammar.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
           |      |        | |         | | |  |   |     | |    | ||
           |      |        | |         | | |  |   |     | |    | |+-- DGPS station id (optional)
           |      |        | |         | | |  |   |     | |    | +-- DGPS age, seconds (optional)
           |      |        | |         | | |  |   |     | +----+-- Geoid separation (M=meters)
           |      |        | |         | | |  |   +-----+-- Altitude above MSL (M=meters)
           |      |        | |         | | |  +-- HDOP (horizontal dilution)
           |      |        | |         | | +-- Satellites in use, 0-12 (u-blox sends "8" as well as "08")
           |      |        | |         | +-- Fix quality (0-8)
           |      |        | +---------+-- Longitude DDDMM.MMMM + E/W
           |      +--------+-- Latitude DDMM.MMMM + N/S
           +-- UTC time (hhmmss.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    3 = PPS fix
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Dead reckoning mode
    7 = Manual input mode
    8 = Simulation mode
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
from gpsnmea.nmea.primitives import (
    build,
    check,
    literal,
    optional,
    parse_complete,
    real,
    sequence,
    uint,
)
from gpsnmea.nmea.types import FixQuality, GGASentence

_MAXIMUM_SATELLITES = 12

GGA_GRAMMAR = build(
    sequence(
        literal("GGA"), COMMA,
        time_of_day, COMMA,
        position_2d, COMMA,
        enum_symbols(FixQuality), COMMA,
        check(uint(), lambda count: count <= _MAXIMUM_SATELLITES), COMMA,
        real(), COMMA,  # HDOP
        real(), COMMA, literal("M"), COMMA,  # altitude above MSL
        real(), COMMA, literal("M"), COMMA,  # geoid separation
        optional(real()), COMMA,
        optional(uint()),
        checksum,
    ),
    GGASentence,
)

_GGA_LINE = sentence_line(GGA_GRAMMAR)


def parse_gga(sentence: str) -> GGASentence | None:
    """Decode a complete GGA line.

    Args:
        sentence: Raw NMEA line, e.g. ``"$GPGGA,...*47\\r\\n"``.

    Returns:
        GGASentence, or None if the line is not a well-formed GGA sentence
        from a supported talker.

    Example:
        >>> gga = parse_gga("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47")
        >>> gga.position.latitude.degrees, gga.satellites_tracked
        (48, 8)
    """
    return parse_complete(_GGA_LINE, strip_line_ending(sentence))
