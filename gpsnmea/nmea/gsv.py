"""GSV sentence grammar.

GSV (GNSS Satellites in View) pages the receiver's sky view over several
sentences, up to four satellites per sentence.

GSV Sentence Format:
    $GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75
           | | |  |  |  |   |
           | | |  +--+--+---+-- Satellite: PRN, elevation, azimuth, SNR
           | | |                (SNR is empty while not tracking); 1 to 4 per sentence
           | | +-- Satellites in view (all pages)
           | +-- This message's number
           +-- Total number of messages

Pages are decoded independently. Nothing here checks that the entries of all
pages add up to the satellites-in-view count.
"""

from gpsnmea.nmea.fields import COMMA, checksum, sentence_line, strip_line_ending
from gpsnmea.nmea.primitives import (
    build,
    literal,
    optional,
    parse_complete,
    preceded,
    repeat,
    sequence,
    uint,
)
from gpsnmea.nmea.types import GSVSatellite, GSVSentence

_MINIMUM_ENTRIES = 1
_MAXIMUM_ENTRIES = 4

satellite_entry = build(
    sequence(
        uint(), COMMA,  # PRN
        uint(), COMMA,  # elevation, degrees
        uint(), COMMA,  # azimuth, degrees
        optional(uint()),  # SNR, dB-Hz
    ),
    GSVSatellite,
)

GSV_GRAMMAR = build(
    sequence(
        literal("GSV"), COMMA,
        uint(), COMMA,
        uint(), COMMA,
        uint(),
        repeat(preceded(COMMA, satellite_entry), _MINIMUM_ENTRIES, _MAXIMUM_ENTRIES),
        checksum,
    ),
    GSVSentence,
)

_GSV_LINE = sentence_line(GSV_GRAMMAR)


def parse_gsv(sentence: str) -> GSVSentence | None:
    """Decode a complete GSV line, or return None if it is malformed."""
    return parse_complete(_GSV_LINE, strip_line_ending(sentence))
