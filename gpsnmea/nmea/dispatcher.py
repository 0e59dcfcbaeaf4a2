"""Top-level sentence dispatch.

A line is framed as ``$`` + talker ID + sentence body, optionally followed by
one line ending. The body is tried against each grammar in this fixed order:

    GGA, GLL, GSA, GSV, RMC, VTG

Every grammar starts with its own 3-letter code, so at most one of them can
match a given line; the order is nonetheless part of the contract. A match is
accepted only when it consumes the whole line.
"""

from gpsnmea.nmea.fields import sentence_line, strip_line_ending
from gpsnmea.nmea.gga import GGA_GRAMMAR
from gpsnmea.nmea.gll import GLL_GRAMMAR
from gpsnmea.nmea.gsa import GSA_GRAMMAR
from gpsnmea.nmea.gsv import GSV_GRAMMAR
from gpsnmea.nmea.primitives import Parser, apply, first_of, parse_complete
from gpsnmea.nmea.rmc import RMC_GRAMMAR
from gpsnmea.nmea.types import Decoded, Failed, ParseOutcome, SentenceKind
from gpsnmea.nmea.vtg import VTG_GRAMMAR

GRAMMARS: tuple[tuple[SentenceKind, Parser], ...] = (
    (SentenceKind.GGA, GGA_GRAMMAR),
    (SentenceKind.GLL, GLL_GRAMMAR),
    (SentenceKind.GSA, GSA_GRAMMAR),
    (SentenceKind.GSV, GSV_GRAMMAR),
    (SentenceKind.RMC, RMC_GRAMMAR),
    (SentenceKind.VTG, VTG_GRAMMAR),
)


def _tagged(kind: SentenceKind, grammar: Parser) -> Parser:
    return apply(grammar, lambda sentence: Decoded(kind=kind, sentence=sentence))


_ANY_SENTENCE = sentence_line(
    first_of(*(_tagged(kind, grammar) for kind, grammar in GRAMMARS))
)


def dispatch_sentence(line: str) -> ParseOutcome:
    """Decode one line into a tagged outcome.

    Args:
        line: A single NMEA line, optionally ending in ``\\r``, ``\\n`` or
            ``\\r\\n``.

    Returns:
        ``Decoded`` with the sentence kind and record, or ``Failed`` carrying
        ``line`` exactly as it was passed in.

    Example:
        >>> dispatch_sentence("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39").kind
        <SentenceKind.GSA: 'GSA'>
        >>> dispatch_sentence("$GPGGA,bad,data*00")
        Failed(text='$GPGGA,bad,data*00')
    """
    decoded = parse_complete(_ANY_SENTENCE, strip_line_ending(line))
    if decoded is None:
        return Failed(text=line)
    return decoded
