"""
    tinyvalues.numbers
    ------------------

    Scanner for the number literals that start lengths, angles and
    color function arguments.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import math
import re

from .parsing import MalformedNumber


# Like the 'num' macro of the CSS tokenizer, but a trailing dot is allowed:
# 1. is the same as 1.0
# No exponent.
NUMBER_RE = re.compile(r'[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)')

_match_number = NUMBER_RE.match


def scan_number(source, pos=0):
    """Read a number at ``pos`` in ``source``.

    Whitespace is *not* skipped: the number must start exactly at ``pos``.
    The longest valid literal is consumed, whatever follows.

    :param source:
        An unicode string.
    :param pos:
        Where to start reading.
    :returns:
        A ``(value, new_pos)`` tuple where ``value`` is a float and
        ``source[new_pos:]`` is the unconsumed remainder.
    :raises:
        :class:`~.parsing.MalformedNumber` if there is no number at ``pos``.

    """
    match = _match_number(source, pos)
    if match is None:
        if pos >= len(source):
            raise MalformedNumber(pos, 'expected a number, got end of input')
        raise MalformedNumber(pos, 'expected a number, got {0!r}'.format(
            source[pos:]))
    value = float(match.group())
    if not math.isfinite(value):
        raise MalformedNumber(pos, 'number too large: {0!r}'.format(
            match.group()))
    return value, match.end()
