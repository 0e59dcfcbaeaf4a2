"""gpsnmea: NMEA 0183 GPS sentence decoding and handler routing."""

from gpsnmea.gnss import NMEAReader
from gpsnmea.nmea import (
    Decoded,
    Failed,
    GGASentence,
    GLLSentence,
    GSASentence,
    GSVSentence,
    RMCSentence,
    SentenceKind,
    VTGSentence,
    compute_checksum,
    dispatch_sentence,
    parse_gga,
    parse_gll,
    parse_gsa,
    parse_gsv,
    parse_rmc,
    parse_vtg,
    validate_checksum,
)
from gpsnmea.nmea_parser import NmeaParser, SentenceHandlers, UnroutableSentenceError

__all__ = [
    "Decoded",
    "Failed",
    "GGASentence",
    "GLLSentence",
    "GSASentence",
    "GSVSentence",
    "NMEAReader",
    "NmeaParser",
    "RMCSentence",
    "SentenceHandlers",
    "SentenceKind",
    "UnroutableSentenceError",
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
