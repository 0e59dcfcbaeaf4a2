"""NMEA checksum computation and verification.

The transmitted checksum is the XOR of every character between ``$`` and
``*``, written as two hex digits after the ``*``::

    $GPGLL,4916.45,N,12311.12,W,225444,A,A*5C
     <------------ XOR-ed body ----------> ^^ 0x5C

The grammars only read those two digits into the ``checksum`` field of each
record. Comparing them with the body is this module's job, and ``NmeaParser``
does it only when built with ``verify_checksum=True``.
"""

import string

from gpsnmea.nmea.fields import strip_line_ending

_CHECKSUM_DIGITS = 2


def _split_frame(line: str) -> tuple[str, str] | None:
    """Split ``$<body>*<hh>`` into ``(body, hh)``.

    Returns None when the line does not start with ``$``, has no ``*``, or
    anything other than two characters follows the first ``*``.

    Example:
        >>> _split_frame("$GPGLL,4916.45*5C")
        ('GPGLL,4916.45', '5C')
    """
    if not line.startswith("$"):
        return None
    body, star, digits = line[1:].partition("*")
    if not star or len(digits) != _CHECKSUM_DIGITS:
        return None
    return body, digits


def compute_checksum(content: str) -> int:
    """XOR the character codes of ``content``.

    Args:
        content: Sentence body, without the leading ``$`` or the ``*hh`` tail.

    Returns:
        Checksum in the range 0-255.

    Example:
        >>> compute_checksum("GPGLL,4916.45,N,12311.12,W,225444,A,A")
        92
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result


def validate_checksum(sentence: str) -> bool:
    """Check that a framed line carries the checksum of its own body.

    One trailing line ending is ignored. Hex digits may be upper or lower
    case.

    Returns:
        False for a mismatch, for non-hex digits and for any line that is not
        framed as ``$<body>*<hh>``.

    Example:
        >>> validate_checksum("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39")
        True
        >>> validate_checksum("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*FF")
        False
    """
    frame = _split_frame(strip_line_ending(sentence))
    if frame is None:
        return False

    body, digits = frame
    if not all(digit in string.hexdigits for digit in digits):
        return False
    return compute_checksum(body) == int(digits, 16)
