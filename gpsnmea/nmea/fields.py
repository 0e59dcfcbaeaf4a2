"""Composite NMEA field parsers.

These parsers decode the multi-part fields shared by several sentence types.
Sub-fields that share one comma-delimited token on the wire (``hhmmss.ss``,
``ddmmyy``, ``DDMM.MMMM``) are packed positionally, so their widths are fixed
and enforced digit by digit.

Coordinates are kept in degrees and decimal minutes; nothing here converts
to decimal degrees.
"""

from enum import Enum

from gpsnmea.nmea.primitives import (
    Parser,
    build,
    check,
    fixed_uint,
    literal,
    preceded,
    real,
    sequence,
    symbol_table,
)
from gpsnmea.nmea.types import (
    CalendarDate,
    Direction,
    Latitude,
    Longitude,
    Position2D,
    TimeOfDay,
)

# Supported NMEA talker IDs for multi-constellation GNSS receivers.
# Each 2-character prefix identifies the satellite system:
#   GP = GPS (USA)
#   GN = Multi-GNSS (combined solution)
#   GL = GLONASS (Russia)
#   GA = Galileo (Europe)
#   GB = BeiDou (China)
#   GQ = QZSS (Japan)
VALID_TALKER_IDS = ("GP", "GN", "GL", "GA", "GB", "GQ")

COMMA = literal(",")


def enum_symbols(enum_type: type[Enum]) -> Parser:
    """Build a symbol table from an enum whose values are its wire codes.

    Example:
        >>> enum_symbols(Direction)("S", 0)
        (<Direction.SOUTH: 'S'>, 1)
    """
    return symbol_table({member.value: member for member in enum_type})


def _hemisphere(*allowed: Direction) -> Parser:
    # A direction outside ``allowed`` is a failure.
    return check(enum_symbols(Direction), lambda direction: direction in allowed)


time_of_day = build(
    sequence(fixed_uint(10, 2), fixed_uint(10, 2), real()),
    TimeOfDay,
)

calendar_date = build(
    sequence(fixed_uint(10, 2), fixed_uint(10, 2), fixed_uint(10, 2)),
    CalendarDate,
)

latitude = build(
    sequence(
        fixed_uint(10, 2),
        real(),
        COMMA,
        _hemisphere(Direction.NORTH, Direction.SOUTH),
    ),
    Latitude,
)

longitude = build(
    sequence(
        fixed_uint(10, 3),
        real(),
        COMMA,
        _hemisphere(Direction.EAST, Direction.WEST),
    ),
    Longitude,
)

position_2d = build(sequence(latitude, COMMA, longitude), Position2D)

# "*" followed by exactly two hex digits. The value is stored, not verified.
checksum = preceded(literal("*"), fixed_uint(16, 2))

talker_id = symbol_table({talker: talker for talker in VALID_TALKER_IDS})


def sentence_line(body: Parser) -> Parser:
    """Frame ``body`` as a full line: ``$``, a talker ID, then the body.

    The talker ID is consumed and discarded.
    """
    return preceded(sequence(literal("$"), talker_id), body)


def strip_line_ending(line: str) -> str:
    """Remove one trailing ``\\n``, ``\\r`` or ``\\r\\n``.

    Other trailing whitespace is left in place and makes the line fail.

    Example:
        >>> strip_line_ending("$GPGLL,...*5C\\r\\n")
        '$GPGLL,...*5C'
    """
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
