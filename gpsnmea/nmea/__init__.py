"""NMEA 0183 sentence grammars for GGA, GLL, GSA, GSV, RMC and VTG."""

from gpsnmea.nmea.checksum import compute_checksum, validate_checksum
from gpsnmea.nmea.dispatcher import dispatch_sentence
from gpsnmea.nmea.gga import parse_gga
from gpsnmea.nmea.gll import parse_gll
from gpsnmea.nmea.gsa import parse_gsa
from gpsnmea.nmea.gsv import parse_gsv
from gpsnmea.nmea.rmc import parse_rmc
from gpsnmea.nmea.types import (
    SENTENCE_KINDS,
    CalendarDate,
    DataStatus,
    Decoded,
    Direction,
    Failed,
    FixMode,
    FixQuality,
    GGASentence,
    GLLSentence,
    GsaFixType,
    GsaMode,
    GSASentence,
    GSVSatellite,
    GSVSentence,
    Latitude,
    Longitude,
    MagneticVariationDirection,
    ParseOutcome,
    Position2D,
    RMCSentence,
    Sentence,
    SentenceKind,
    TimeOfDay,
    VTGSentence,
)
from gpsnmea.nmea.vtg import parse_vtg

__all__ = [
    "SENTENCE_KINDS",
    "CalendarDate",
    "DataStatus",
    "Decoded",
    "Direction",
    "Failed",
    "FixMode",
    "FixQuality",
    "GGASentence",
    "GLLSentence",
    "GSASentence",
    "GSVSatellite",
    "GSVSentence",
    "GsaFixType",
    "GsaMode",
    "Latitude",
    "Longitude",
    "MagneticVariationDirection",
    "ParseOutcome",
    "Position2D",
    "RMCSentence",
    "Sentence",
    "SentenceKind",
    "TimeOfDay",
    "VTGSentence",
    "compute_checksum",
    "dispatch_sentence",
    "parse_gga",
    "parse_gll",
    "parse_gsa",
    "parse_gsv",
    "parse_rmc",
    "parse_vtg",
    "validate_checksum",
]
