"""
    tinyvalues.box
    --------------

    Parser for box-edge shorthands, like the values of the ``margin``
    or ``padding`` CSS properties: 1 to 4 lengths separated by whitespace,
    expanded to the four sides of a box.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import collections

from .length import parse_length
from .parsing import (
    ParseError, EmptyRect, InvalidEdgeCount, MalformedEdge,
    split_on_whitespace)


class BoxEdges(collections.namedtuple(
        'BoxEdges', ['top', 'right', 'bottom', 'left'])):
    """Four lengths, in the usual CSS order.

    Each side is a :class:`~.length.Length` or :data:`~.length.AUTO`.

    """

    @classmethod
    def all(cls, value):
        return cls(value, value, value, value)


def parse_box_edges_string(css_string):
    """Same as :func:`parse_box_edges`, but return ``None`` for invalid
    values. (No exception is raised.)

    """
    try:
        return parse_box_edges(css_string)
    except ParseError:
        return None


def parse_box_edges(css_string):
    """Parse a string of 1 to 4 lengths as a :class:`BoxEdges`.

    * ``top right bottom left``
    * ``top left-and-right bottom``
    * ``top-and-bottom left-and-right``
    * ``all-four-sides``

    :raises:
        * :class:`~.parsing.EmptyRect` if there is no length at all.
        * :class:`~.parsing.InvalidEdgeCount` for more than 4 lengths.
        * :class:`~.parsing.MalformedEdge` if one of the lengths is
          invalid. The length error is chained as ``__cause__``.

    """
    words = split_on_whitespace(css_string)
    if not words:
        raise EmptyRect(len(css_string), 'expected 1 to 4 lengths, got none')
    if len(words) > 4:
        raise InvalidEdgeCount(
            words[4][0], 'expected 1 to 4 lengths, got {0}'.format(len(words)))

    values = []
    for index, (position, word) in enumerate(words):
        try:
            values.append(parse_length(word))
        except ParseError as exc:
            raise MalformedEdge(
                position + exc.position,
                'invalid length {0!r} for edge {1}: {2}'.format(
                    word, index, exc.reason),
                index, word) from exc
    return expand_four_sides(values)


def expand_four_sides(values):
    """Expand 1 to 4 values to a :class:`BoxEdges`.

    Missing sides are copied from the opposite side, as in CSS.

    """
    values = list(values)
    if len(values) == 1:
        values *= 4
    elif len(values) == 2:
        values *= 2  # (bottom, left) defaults to (top, right)
    elif len(values) == 3:
        values.append(values[1])  # left defaults to right
    elif len(values) != 4:
        raise InvalidEdgeCount(
            0, 'expected 1 to 4 values, got {0}'.format(len(values)))
    return BoxEdges(*values)
