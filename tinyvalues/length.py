"""
    tinyvalues.length
    -----------------

    Parser for length values:

    * ``auto``
    * ``12px``: pixels
    * ``12%``: percentage
    * ``12vw``, ``12vh``, ``12vmin``, ``12vmax``: viewport units

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import collections

from .numbers import scan_number
from .units import resolve_length_unit
from .parsing import ParseError, skip_whitespace, expect_end


#: Returned instead of a :class:`Length` for the ``auto`` keyword.
AUTO = 'auto'


class Length(collections.namedtuple('Length', ['value', 'unit'])):
    """A length with its unit.

    ``value`` is the number as written, ``unit`` one of
    :data:`~.units.LENGTH_UNITS`.

    """


def parse_length_string(css_string):
    """Same as :func:`parse_length`, but return ``None`` for invalid
    lengths. (No exception is raised.)

    """
    try:
        return parse_length(css_string)
    except ParseError:
        return None


def parse_length(css_string):
    """Parse a whole string as a length value.

    Leading and trailing whitespace is ignored.

    :returns:
        A :class:`Length` or :data:`AUTO`.
    :raises:
        * :class:`~.parsing.MalformedNumber` if there is no number.
        * :class:`~.parsing.UnknownUnit` for a missing or unknown unit.
        * :class:`~.parsing.TrailingInput` if anything follows the unit.

    """
    value, pos = read_length(css_string, skip_whitespace(css_string))
    expect_end(css_string, pos, 'length')
    return value


def read_length(source, pos=0):
    """Read a single length at ``pos`` in ``source``.

    Whatever follows the length is left unconsumed.

    :returns: A ``(length, new_pos)`` tuple.

    """
    if source.startswith(AUTO, pos):
        return AUTO, pos + len(AUTO)
    value, pos = scan_number(source, pos)
    unit, pos = resolve_length_unit(source, pos)
    return Length(value, unit), pos
