"""
    tinyvalues.angle
    ----------------

    Parser for angle values, always returned in radians:

    * ``60deg``, ``-45.5deg``: degrees
    * ``3.1415rad``: radians
    * ``3.1415``: no unit, radians

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

from .numbers import scan_number
from .units import RADIANS_PER_UNIT, resolve_angle_unit
from .parsing import ParseError, skip_whitespace, expect_end


def parse_angle_string(css_string):
    """Same as :func:`parse_angle`, but return ``None`` for invalid
    angles. (No exception is raised.)

    """
    try:
        return parse_angle(css_string)
    except ParseError:
        return None


def parse_angle(css_string):
    """Parse a whole string as an angle.

    :returns: The angle in radians, as a float.
    :raises:
        * :class:`~.parsing.MalformedNumber` if there is no number.
        * :class:`~.parsing.TrailingInput` if anything but ``deg`` or ``rad``
          follows the number, eg. ``5degrees`` or ``5grad``.

    """
    angle, pos = read_angle(css_string, skip_whitespace(css_string))
    expect_end(css_string, pos, 'angle')
    return angle


def read_angle(source, pos=0):
    """Read a single angle at ``pos`` in ``source``.

    :returns: A ``(radians, new_pos)`` tuple.

    """
    value, pos = scan_number(source, pos)
    unit, pos = resolve_angle_unit(source, pos)
    return value * RADIANS_PER_UNIT[unit], pos
