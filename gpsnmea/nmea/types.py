"""NMEA data types for decoded sentences.

This module defines the enums and frozen dataclasses produced by the sentence
grammars, plus the tagged outcome returned by the dispatcher.

Design Decisions:
    1. Enum values are the wire codes. ``FixQuality("4")`` is
       ``FixQuality.REAL_TIME_KINEMATIC``, so a symbol table can be built
       straight from the enum.

    2. Optional fields (``X | None``): an empty field between two commas is
       decoded as None. A field is never "present but empty".

    3. No unit conversion: coordinates stay in degrees and minutes exactly as
       they appear on the wire. Two-digit years carry no century.

    4. Closed sum type: ``SentenceKind`` tags every ``Decoded`` outcome, and
       consumers route on the tag instead of on the record class.
"""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Compass hemisphere as it appears after a coordinate."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"


class FixQuality(Enum):
    """GGA fix quality indicator."""

    INVALID = "0"
    GPS_FIX = "1"
    DGPS_FIX = "2"
    PPS_FIX = "3"
    REAL_TIME_KINEMATIC = "4"
    FLOAT_RTK = "5"
    DEAD_RECKONING = "6"
    MANUAL_INPUT_MODE = "7"
    SIMULATION_MODE = "8"


class DataStatus(Enum):
    """GLL/RMC data status. ``V`` is "void" on the wire."""

    ACTIVE = "A"
    INVALID = "V"


class FixMode(Enum):
    """FAA mode indicator (NMEA 2.3+)."""

    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    ESTIMATED = "E"
    MANUAL = "M"
    INVALID = "N"


class GsaMode(Enum):
    """GSA 2D/3D switching mode."""

    MANUAL = "M"
    AUTOMATIC = "A"


class GsaFixType(Enum):
    """GSA fix type."""

    UNAVAILABLE = "1"
    TWO_D = "2"
    THREE_D = "3"


class MagneticVariationDirection(Enum):
    """Direction of the RMC magnetic variation."""

    EAST = "E"
    WEST = "W"


class SentenceKind(Enum):
    """Tag of a decoded sentence; the value is the 3-letter sentence code."""

    GGA = "GGA"
    GLL = "GLL"
    GSA = "GSA"
    GSV = "GSV"
    RMC = "RMC"
    VTG = "VTG"


@dataclass(frozen=True)
class TimeOfDay:
    """UTC time packed as ``hhmmss.ss`` on the wire."""

    hours: int
    minutes: int
    seconds: float


@dataclass(frozen=True)
class CalendarDate:
    """UTC date packed as ``ddmmyy`` on the wire.

    ``year`` is the two wire digits (0-99). Resolving the century is left to
    the caller.
    """

    day: int
    month: int
    year: int


@dataclass(frozen=True)
class Latitude:
    """Latitude as ``DDMM.MMMM,N|S``.

    Attributes:
        degrees: Whole degrees, always two digits on the wire.
        minutes: Decimal minutes (0-60).
        direction: ``Direction.NORTH`` or ``Direction.SOUTH``.
    """

    degrees: int
    minutes: float
    direction: Direction


@dataclass(frozen=True)
class Longitude:
    """Longitude as ``DDDMM.MMMM,E|W``.

    Attributes:
        degrees: Whole degrees, always three digits on the wire.
        minutes: Decimal minutes (0-60).
        direction: ``Direction.EAST`` or ``Direction.WEST``.
    """

    degrees: int
    minutes: float
    direction: Direction


@dataclass(frozen=True)
class Position2D:
    latitude: Latitude
    longitude: Longitude


@dataclass(frozen=True)
class GGASentence:
    """Decoded GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        time: UTC time of the fix.
        position: Latitude and longitude of the fix.
        fix_quality: Fix quality indicator.
        satellites_tracked: Number of satellites in use (0-12).
        horizontal_dilution_of_precision: HDOP, lower is better.
        altitude_meters: Antenna altitude above mean sea level.
        geoid_separation_meters: Height of the geoid above the WGS84
            ellipsoid.
        dgps_update_age: Seconds since the last DGPS update, None when DGPS
            is not in use.
        dgps_station_id: DGPS reference station id, None when DGPS is not in
            use.
        checksum: The two hex digits after ``*``, as transmitted.
    """

    time: TimeOfDay
    position: Position2D
    fix_quality: FixQuality
    satellites_tracked: int
    horizontal_dilution_of_precision: float
    altitude_meters: float
    geoid_separation_meters: float
    dgps_update_age: float | None
    dgps_station_id: int | None
    checksum: int


@dataclass(frozen=True)
class GLLSentence:
    """Decoded GLL (Geographic Position, Latitude/Longitude) sentence."""

    position: Position2D
    time: TimeOfDay
    data_status: DataStatus
    fix_mode: FixMode
    checksum: int


@dataclass(frozen=True)
class GSASentence:
    """Decoded GSA (DOP and Active Satellites) sentence.

    Attributes:
        mode: Manual or automatic 2D/3D selection.
        fix_type: Unavailable, 2D or 3D.
        satellites: PRNs of the satellites used in the fix, in wire order.
            The wire always carries twelve slots; empty slots are left out,
            so this list holds between 0 and 12 entries.
        dilution_of_precision: PDOP.
        horizontal_dilution_of_precision: HDOP.
        vertical_dilution_of_precision: VDOP.
        checksum: The two hex digits after ``*``, as transmitted.
    """

    mode: GsaMode
    fix_type: GsaFixType
    satellites: tuple[int, ...]
    dilution_of_precision: float
    horizontal_dilution_of_precision: float
    vertical_dilution_of_precision: float
    checksum: int


@dataclass(frozen=True)
class GSVSatellite:
    """One satellite entry of a GSV sentence.

    ``signal_to_noise_ratio`` is None while the satellite is not tracked.
    """

    satellite_id: int
    elevation: int
    azimuth: int
    signal_to_noise_ratio: int | None


@dataclass(frozen=True)
class GSVSentence:
    """Decoded GSV (Satellites in View) sentence.

    A full sky view is paged over ``total_messages`` sentences. Each sentence
    is decoded on its own; pages are not merged.
    """

    total_messages: int
    message_number: int
    satellites_in_view: int
    satellites: tuple[GSVSatellite, ...]
    checksum: int


@dataclass(frozen=True)
class RMCSentence:
    """Decoded RMC (Recommended Minimum Specific GNSS Data) sentence.

    ``magnetic_variation`` and ``magnetic_variation_direction`` are decoded
    independently; well-formed input carries both or neither.
    """

    time: TimeOfDay
    data_status: DataStatus
    position: Position2D
    speed_over_ground_knots: float
    course_over_ground_degrees: float | None
    date: CalendarDate
    magnetic_variation: float | None
    magnetic_variation_direction: MagneticVariationDirection | None
    fix_mode: FixMode
    checksum: int


@dataclass(frozen=True)
class VTGSentence:
    """Decoded VTG (Track Made Good and Ground Speed) sentence.

    Both courses are None when the receiver is stationary, since GNSS cannot
    determine a heading without movement.
    """

    course_over_ground_true: float | None
    course_over_ground_magnetic: float | None
    speed_knots: float
    speed_kilometers_per_hour: float
    fix_mode: FixMode
    checksum: int


Sentence = (
    GGASentence
    | GLLSentence
    | GSASentence
    | GSVSentence
    | RMCSentence
    | VTGSentence
)

# Record class -> tag. Kept in lock-step with the dispatcher's grammar table.
SENTENCE_KINDS: dict[type, SentenceKind] = {
    GGASentence: SentenceKind.GGA,
    GLLSentence: SentenceKind.GLL,
    GSASentence: SentenceKind.GSA,
    GSVSentence: SentenceKind.GSV,
    RMCSentence: SentenceKind.RMC,
    VTGSentence: SentenceKind.VTG,
}


@dataclass(frozen=True)
class Decoded:
    """A line that matched one sentence grammar completely."""

    kind: SentenceKind
    sentence: Sentence


@dataclass(frozen=True)
class Failed:
    """A line that no sentence grammar could consume; ``text`` is unmodified."""

    text: str


ParseOutcome = Decoded | Failed
