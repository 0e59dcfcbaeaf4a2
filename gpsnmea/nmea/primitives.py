"""Field parsing primitives and combinators.

Every NMEA grammar in this package is composed from the small functions in
this module. A parser is a plain function::

    parser(text: str, position: int) -> tuple[value, next_position] | None

On success it returns the decoded value and the position just past what it
consumed. On failure it returns None and consumes nothing, so a caller can
always retry from the same position. Sequencing is all-or-nothing: a partial
match is discarded as a whole.

Example:
    >>> two_digits = fixed_uint(10, 2)
    >>> two_digits("1235", 0)
    (12, 2)
    >>> two_digits("1x", 0) is None
    True
"""

import re
from collections.abc import Callable, Mapping
from typing import Any

Parser = Callable[[str, int], tuple[Any, int] | None]

# Marker for values that sequence() drops (literals, separators).
SKIPPED = object()

_FIELD_SEPARATORS = ",*"

_DIGITS = {
    10: frozenset("0123456789"),
    16: frozenset("0123456789abcdefABCDEF"),
}

_UNSIGNED = re.compile(r"[0-9]+")

# Optional sign, then digits with an optional fraction, or a bare fraction.
_REAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def fixed_uint(radix: int, width: int) -> Parser:
    """Parse an unsigned integer of exactly ``width`` digits in ``radix``.

    Fails when fewer than ``width`` characters remain or when any character
    inside the window is not a digit of the radix. Characters after the
    window are left for the next parser.

    Args:
        radix: 10 or 16. Hexadecimal digits are accepted in either case.
        width: Number of digits to consume.
    """
    digits = _DIGITS[radix]

    def parse(text: str, position: int) -> tuple[int, int] | None:
        end = position + width
        window = text[position:end]
        if len(window) != width:
            return None
        if not all(character in digits for character in window):
            return None
        return int(window, radix), end

    return parse


def uint() -> Parser:
    """Parse an unsigned decimal integer of any width (at least one digit)."""

    def parse(text: str, position: int) -> tuple[int, int] | None:
        match = _UNSIGNED.match(text, position)
        if match is None:
            return None
        return int(match.group()), match.end()

    return parse


def real() -> Parser:
    """Parse an optionally signed decimal number with an optional fraction.

    Accepts ``545.4``, ``-30.0``, ``19``, ``5.`` and ``.5``. Exponents are not
    part of NMEA and are not accepted.
    """

    def parse(text: str, position: int) -> tuple[float, int] | None:
        match = _REAL.match(text, position)
        if match is None:
            return None
        return float(match.group()), match.end()

    return parse


def literal(token: str) -> Parser:
    """Match ``token`` exactly. The matched text is dropped by ``sequence``."""

    def parse(text: str, position: int) -> tuple[Any, int] | None:
        if not text.startswith(token, position):
            return None
        return SKIPPED, position + len(token)

    return parse


def symbol_table(mapping: Mapping[str, Any]) -> Parser:
    """Map one wire code from a closed set to its value.

    The longest matching code wins, so tables may mix code lengths.
    Unknown codes fail.
    """
    codes = sorted(mapping, key=len, reverse=True)

    def parse(text: str, position: int) -> tuple[Any, int] | None:
        for code in codes:
            if text.startswith(code, position):
                return mapping[code], position + len(code)
        return None

    return parse


def optional(parser: Parser) -> Parser:
    """Decode a field that may be empty.

    An empty field (end of input, or ``,``/``*`` straight away) yields None
    without consuming anything. A non-empty field must satisfy ``parser``;
    garbage is a failure, not an absent value.
    """

    def parse(text: str, position: int) -> tuple[Any, int] | None:
        if position == len(text) or text[position] in _FIELD_SEPARATORS:
            return None, position
        return parser(text, position)

    return parse


def sequence(*parsers: Parser) -> Parser:
    """Run ``parsers`` in order; yield the tuple of their kept values.

    Values produced by ``literal`` are not kept. If any parser fails, the
    whole sequence fails and nothing is consumed.
    """

    def parse(text: str, position: int) -> tuple[tuple[Any, ...], int] | None:
        values = []
        for parser in parsers:
            result = parser(text, position)
            if result is None:
                return None
            value, position = result
            if value is not SKIPPED:
                values.append(value)
        return tuple(values), position

    return parse


def preceded(prefix: Parser, parser: Parser) -> Parser:
    """Run ``prefix`` then ``parser``; keep only the value of ``parser``."""

    def parse(text: str, position: int) -> tuple[Any, int] | None:
        head = prefix(text, position)
        if head is None:
            return None
        return parser(text, head[1])

    return parse


def repeat(parser: Parser, minimum: int, maximum: int) -> Parser:
    """Apply ``parser`` greedily between ``minimum`` and ``maximum`` times.

    Yields a tuple of the decoded values. Fewer than ``minimum`` matches is a
    failure; matching stops after ``maximum``, leaving the rest of the input
    for the next parser.
    """

    def parse(text: str, position: int) -> tuple[tuple[Any, ...], int] | None:
        values = []
        while len(values) < maximum:
            result = parser(text, position)
            if result is None:
                break
            value, position = result
            values.append(value)
        if len(values) < minimum:
            return None
        return tuple(values), position

    return parse


def check(parser: Parser, predicate: Callable[[Any], bool]) -> Parser:
    """Fail when the value decoded by ``parser`` does not satisfy ``predicate``."""

    def parse(text: str, position: int) -> tuple[Any, int] | None:
        result = parser(text, position)
        if result is None or not predicate(result[0]):
            return None
        return result

    return parse


def apply(parser: Parser, function: Callable[[Any], Any]) -> Parser:
    """Transform the value decoded by ``parser`` with ``function``."""

    def parse(text: str, position: int) -> tuple[Any, int] | None:
        result = parser(text, position)
        if result is None:
            return None
        value, position = result
        return function(value), position

    return parse


def build(parser: Parser, constructor: Callable[..., Any]) -> Parser:
    """Unpack the tuple decoded by a ``sequence`` into ``constructor``."""
    return apply(parser, lambda values: constructor(*values))


def first_of(*parsers: Parser) -> Parser:
    """Ordered alternation: the first parser that succeeds wins."""

    def parse(text: str, position: int) -> tuple[Any, int] | None:
        for parser in parsers:
            result = parser(text, position)
            if result is not None:
                return result
        return None

    return parse


def parse_complete(parser: Parser, text: str) -> Any | None:
    """Run ``parser`` over ``text`` and accept only a full match.

    Returns the decoded value, or None if the parser failed or left
    characters unconsumed.
    """
    result = parser(text, 0)
    if result is None:
        return None
    value, position = result
    if position != len(text):
        return None
    return value
