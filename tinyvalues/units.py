"""
    tinyvalues.units
    ----------------

    Unit suffixes for lengths and angles.

    Units are case-sensitive: ``12px`` is a length, ``12PX`` is not.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import math

from .parsing import UnknownUnit


PIXEL = 'px'
PERCENT = '%'
VIEWPORT_WIDTH = 'vw'
VIEWPORT_HEIGHT = 'vh'
VIEWPORT_MIN = 'vmin'
VIEWPORT_MAX = 'vmax'

# Longest first, so that 'vmin' is never read as 'vm' + 'in'.
LENGTH_UNITS = tuple(sorted(
    [PIXEL, PERCENT, VIEWPORT_WIDTH, VIEWPORT_HEIGHT,
     VIEWPORT_MIN, VIEWPORT_MAX],
    key=len, reverse=True))

DEGREES = 'deg'
RADIANS = 'rad'

ANGLE_UNITS = (DEGREES, RADIANS)

RADIANS_PER_UNIT = {
    DEGREES: math.pi / 180,
    RADIANS: 1,
}


def _match_suffix(units, source, pos):
    for unit in units:
        if source.startswith(unit, pos):
            return unit


def resolve_length_unit(source, pos):
    """Read a length unit at ``pos`` in ``source``.

    :returns:
        A ``(unit, new_pos)`` tuple. ``unit`` is one of :data:`LENGTH_UNITS`.
    :raises:
        :class:`~.parsing.UnknownUnit` if no length unit starts at ``pos``.
        A length always needs a unit, even for zero.

    """
    unit = _match_suffix(LENGTH_UNITS, source, pos)
    if unit is None:
        if pos >= len(source):
            raise UnknownUnit(pos, 'missing length unit')
        raise UnknownUnit(pos, 'unknown length unit in {0!r}'.format(
            source[pos:]))
    return unit, pos + len(unit)


def resolve_angle_unit(source, pos):
    """Read an optional angle unit at ``pos`` in ``source``.

    A number without unit is in radians: when no unit starts at ``pos``,
    ``(RADIANS, pos)`` is returned and nothing is consumed.

    :returns:
        A ``(unit, new_pos)`` tuple. ``unit`` is one of :data:`ANGLE_UNITS`.

    """
    unit = _match_suffix(ANGLE_UNITS, source, pos)
    if unit is None:
        return RADIANS, pos
    return unit, pos + len(unit)
