"""
    tinyvalues
    ----------

    Parsers for CSS-like color, length, angle and box-edge values,
    and nothing else.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

from .version import VERSION
__version__ = VERSION

from .parsing import (
    ParseError, MalformedNumber, UnknownUnit, TrailingInput,
    UnrecognizedColorSyntax, MalformedHex, MalformedFunction,
    EmptyRect, InvalidEdgeCount, MalformedEdge)
from .color import (
    RGBA, COLOR_KEYWORDS, parse_color, parse_color_string, format_hex)
from .length import AUTO, Length, parse_length, parse_length_string
from .angle import parse_angle, parse_angle_string
from .box import (
    BoxEdges, parse_box_edges, parse_box_edges_string, expand_four_sides)
from .units import (
    PIXEL, PERCENT, VIEWPORT_WIDTH, VIEWPORT_HEIGHT, VIEWPORT_MIN,
    VIEWPORT_MAX, DEGREES, RADIANS)
from .fields import FieldDecodeError, decode_field, decode_fields
