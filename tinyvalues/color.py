"""
    tinyvalues.color
    ----------------

    Parser for color values.

    The syntax is inspired by CSS 3 colors (http://www.w3.org/TR/css3-color/)
    but function arguments are plain numbers in the 0..1 range:

    * ``red``, ``RebeccaPurple``: named colors, case-insensitive
    * ``#f0f``, ``#ff00ff``: hex colors
    * ``#ff00ff80``: hex color with alpha
    * ``rgb(1, 0, 0)``, ``rgba(1, 0, 0, .5)``
    * ``hsl(0, 1, .5)``, ``hsla(0, 1, .5, .5)``: the hue is a fraction
      of a full turn, not degrees.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import collections
import itertools
import re
import types

from .numbers import scan_number
from .parsing import (
    WHITESPACE, ParseError, MalformedNumber, MalformedHex, MalformedFunction,
    TrailingInput, UnrecognizedColorSyntax, skip_whitespace, expect_end)


class RGBA(collections.namedtuple('RGBA', ['red', 'green', 'blue', 'alpha'])):
    """An RGBA color.

    A tuple of four floats in the 0..1 range: ``(r, g, b, a)``.
    Also has ``red``, ``green``, ``blue`` and ``alpha`` attributes to access
    the same values.

    """


def parse_color_string(css_string):
    """Parse a string as a color value.

    :param css_string:
        An unicode string.
    :returns:
        An :class:`RGBA` if the string is a valid color,
        ``None`` otherwise. (No exception is raised.)

    """
    try:
        return parse_color(css_string)
    except ParseError:
        return None


def parse_color(css_string):
    """Parse a string as a color value.

    Leading and trailing whitespace is ignored.

    :param css_string:
        An unicode string.
    :returns:
        An :class:`RGBA` object. Values of function arguments are kept as-is,
        so eg. ``rgb(2, -1, 0)`` is ``(2, -1, 0, 1)``.
    :raises:
        * :class:`~.parsing.MalformedHex` for ``#`` followed by anything
          but 3, 6 or 8 hex digits.
        * :class:`~.parsing.MalformedFunction` for invalid arguments
          in ``rgb()``, ``rgba()``, ``hsl()`` or ``hsla()``.
        * :class:`~.parsing.UnrecognizedColorSyntax` for anything else.

    """
    start = skip_whitespace(css_string)
    stripped = css_string.strip(WHITESPACE)

    # Only ASCII letters fold: the Kelvin sign is not a k.
    if stripped.isascii():
        color = COLOR_KEYWORDS.get(stripped.lower())
        if color is not None:
            return color

    if stripped.startswith('#'):
        return _parse_hex(stripped, start)

    match = FUNCTION_RE(css_string, start)
    if match is not None:
        name = match.group(1).lower()
        args, pos = _parse_arguments(css_string, match.end(), name)
        try:
            expect_end(css_string, pos, name + '()')
        except TrailingInput as exc:
            raise MalformedFunction(exc.position, exc.reason) from exc
        if name in ('rgb', 'rgba'):
            return RGBA(*args) if len(args) == 4 else RGBA(*args, alpha=1.)
        else:
            r, g, b = hsl_to_rgb(*args[:3])
            alpha = args[3] if len(args) == 4 else 1.
            return RGBA(r, g, b, alpha)

    if not stripped:
        raise UnrecognizedColorSyntax(start, 'expected a color, got nothing')
    raise UnrecognizedColorSyntax(
        start, 'not a color: {0!r}'.format(stripped))


def _parse_hex(stripped, start):
    for multiplier, regexp in HASH_REGEXPS:
        match = regexp(stripped)
        if match:
            channels = [int(group * multiplier, 16) / 255
                        for group in match.groups()]
            if len(channels) == 3:
                channels.append(1.)
            return RGBA(*channels)
    raise MalformedHex(
        start, 'expected 3, 6 or 8 hex digits, got {0!r}'.format(stripped))


def _parse_arguments(source, pos, name):
    """Read the arguments of a color function, up to the closing ``)``.

    Arguments are numbers separated by a comma, whitespace or both.

    :returns: A ``(list_of_floats, pos_after_the_parenthesis)`` tuple.

    """
    arity = FUNCTION_ARITY[name]
    args = []
    pos = skip_whitespace(source, pos)
    while True:
        if len(args) == arity:
            raise MalformedFunction(pos, 'too many arguments for {0}(), '
                                    'expected {1}'.format(name, arity))
        try:
            value, pos = scan_number(source, pos)
        except MalformedNumber as exc:
            raise MalformedFunction(
                exc.position, 'invalid argument {0} for {1}(): {2}'.format(
                    len(args) + 1, name, exc.reason)) from exc
        args.append(value)

        after_value = pos
        pos = skip_whitespace(source, pos)
        if pos >= len(source):
            raise MalformedFunction(pos, 'missing ) for {0}()'.format(name))
        if source[pos] == ')':
            pos += 1
            break
        if source[pos] == ',':
            pos = skip_whitespace(source, pos + 1)
        elif pos == after_value:
            raise MalformedFunction(pos, 'expected , or ) in {0}(), got {1!r}'
                                    .format(name, source[pos:]))

    if len(args) != arity:
        raise MalformedFunction(pos, '{0}() takes {1} arguments, got {2}'
                                .format(name, arity, len(args)))
    return args, pos


def hsl_to_rgb(hue, saturation, lightness):
    """
    :param hue: fraction of a full turn. Only the fractional part is used.
    :param saturation: 0..1
    :param lightness: 0..1
    :returns: (r, g, b) as floats in the 0..1 range
    """
    hue = hue % 1

    # Translated from ABC: http://www.w3.org/TR/css3-color/#hsl-color
    def hue_to_rgb(m1, m2, h):
        if h < 0:
            h += 1
        if h > 1:
            h -= 1
        if h * 6 < 1:
            return m1 + (m2 - m1) * h * 6
        if h * 2 < 1:
            return m2
        if h * 3 < 2:
            return m1 + (m2 - m1) * (2 / 3 - h) * 6
        return m1

    if lightness <= 0.5:
        m2 = lightness * (saturation + 1)
    else:
        m2 = lightness + saturation - lightness * saturation
    m1 = lightness * 2 - m2
    return (
        hue_to_rgb(m1, m2, hue + 1 / 3),
        hue_to_rgb(m1, m2, hue),
        hue_to_rgb(m1, m2, hue - 1 / 3),
    )


def format_hex(color):
    """Serialize a color as ``#rrggbbaa``, lower-case.

    Channels are rounded to the nearest byte and clipped to 0..255.

    """
    return '#' + ''.join(
        '{0:02x}'.format(min(255, max(0, int(round(channel * 255)))))
        for channel in color)


FUNCTION_RE = re.compile(r'(rgba?|hsla?)\(', re.I).match

FUNCTION_ARITY = {
    'rgb': 3,
    'rgba': 4,
    'hsl': 3,
    'hsla': 4,
}

HASH_REGEXPS = (
    (2, re.compile(r'^#([\da-f])([\da-f])([\da-f])$', re.I).match),
    (1, re.compile(r'^#([\da-f]{2})([\da-f]{2})([\da-f]{2})$', re.I).match),
    (1, re.compile(
        r'^#([\da-f]{2})([\da-f]{2})([\da-f]{2})([\da-f]{2})$', re.I).match),
)


# (r, g, b) in 0..255
BASIC_COLOR_KEYWORDS = [
    ('black', (0, 0, 0)),
    ('silver', (192, 192, 192)),
    ('gray', (128, 128, 128)),
    ('white', (255, 255, 255)),
    ('maroon', (128, 0, 0)),
    ('red', (255, 0, 0)),
    ('purple', (128, 0, 128)),
    ('fuchsia', (255, 0, 255)),
    ('green', (0, 128, 0)),
    ('lime', (0, 255, 0)),
    ('olive', (128, 128, 0)),
    ('yellow', (255, 255, 0)),
    ('navy', (0, 0, 128)),
    ('blue', (0, 0, 255)),
    ('teal', (0, 128, 128)),
    ('aqua', (0, 255, 255)),
]


# (r, g, b) in 0..255
EXTENDED_COLOR_KEYWORDS = [
    ('aliceblue', (240, 248, 255)),
    ('antiquewhite', (250, 235, 215)),
    ('aqua', (0, 255, 255)),
    ('aquamarine', (127, 255, 212)),
    ('azure', (240, 255, 255)),
    ('beige', (245, 245, 220)),
    ('bisque', (255, 228, 196)),
    ('black', (0, 0, 0)),
    ('blanchedalmond', (255, 235, 205)),
    ('blue', (0, 0, 255)),
    ('blueviolet', (138, 43, 226)),
    ('brown', (165, 42, 42)),
    ('burlywood', (222, 184, 135)),
    ('cadetblue', (95, 158, 160)),
    ('chartreuse', (127, 255, 0)),
    ('chocolate', (210, 105, 30)),
    ('coral', (255, 127, 80)),
    ('cornflowerblue', (100, 149, 237)),
    ('cornsilk', (255, 248, 220)),
    ('crimson', (220, 20, 60)),
    ('cyan', (0, 255, 255)),
    ('darkblue', (0, 0, 139)),
    ('darkcyan', (0, 139, 139)),
    ('darkgoldenrod', (184, 134, 11)),
    ('darkgray', (169, 169, 169)),
    ('darkgreen', (0, 100, 0)),
    ('darkgrey', (169, 169, 169)),
    ('darkkhaki', (189, 183, 107)),
    ('darkmagenta', (139, 0, 139)),
    ('darkolivegreen', (85, 107, 47)),
    ('darkorange', (255, 140, 0)),
    ('darkorchid', (153, 50, 204)),
    ('darkred', (139, 0, 0)),
    ('darksalmon', (233, 150, 122)),
    ('darkseagreen', (143, 188, 143)),
    ('darkslateblue', (72, 61, 139)),
    ('darkslategray', (47, 79, 79)),
    ('darkslategrey', (47, 79, 79)),
    ('darkturquoise', (0, 206, 209)),
    ('darkviolet', (148, 0, 211)),
    ('deeppink', (255, 20, 147)),
    ('deepskyblue', (0, 191, 255)),
    ('dimgray', (105, 105, 105)),
    ('dimgrey', (105, 105, 105)),
    ('dodgerblue', (30, 144, 255)),
    ('firebrick', (178, 34, 34)),
    ('floralwhite', (255, 250, 240)),
    ('forestgreen', (34, 139, 34)),
    ('fuchsia', (255, 0, 255)),
    ('gainsboro', (220, 220, 220)),
    ('ghostwhite', (248, 248, 255)),
    ('gold', (255, 215, 0)),
    ('goldenrod', (218, 165, 32)),
    ('gray', (128, 128, 128)),
    ('green', (0, 128, 0)),
    ('greenyellow', (173, 255, 47)),
    ('grey', (128, 128, 128)),
    ('honeydew', (240, 255, 240)),
    ('hotpink', (255, 105, 180)),
    ('indianred', (205, 92, 92)),
    ('indigo', (75, 0, 130)),
    ('ivory', (255, 255, 240)),
    ('khaki', (240, 230, 140)),
    ('lavender', (230, 230, 250)),
    ('lavenderblush', (255, 240, 245)),
    ('lawngreen', (124, 252, 0)),
    ('lemonchiffon', (255, 250, 205)),
    ('lightblue', (173, 216, 230)),
    ('lightcoral', (240, 128, 128)),
    ('lightcyan', (224, 255, 255)),
    ('lightgoldenrodyellow', (250, 250, 210)),
    ('lightgray', (211, 211, 211)),
    ('lightgreen', (144, 238, 144)),
    ('lightgrey', (211, 211, 211)),
    ('lightpink', (255, 182, 193)),
    ('lightsalmon', (255, 160, 122)),
    ('lightseagreen', (32, 178, 170)),
    ('lightskyblue', (135, 206, 250)),
    ('lightslategray', (119, 136, 153)),
    ('lightslategrey', (119, 136, 153)),
    ('lightsteelblue', (176, 196, 222)),
    ('lightyellow', (255, 255, 224)),
    ('lime', (0, 255, 0)),
    ('limegreen', (50, 205, 50)),
    ('linen', (250, 240, 230)),
    ('magenta', (255, 0, 255)),
    ('maroon', (128, 0, 0)),
    ('mediumaquamarine', (102, 205, 170)),
    ('mediumblue', (0, 0, 205)),
    ('mediumorchid', (186, 85, 211)),
    ('mediumpurple', (147, 112, 219)),
    ('mediumseagreen', (60, 179, 113)),
    ('mediumslateblue', (123, 104, 238)),
    ('mediumspringgreen', (0, 250, 154)),
    ('mediumturquoise', (72, 209, 204)),
    ('mediumvioletred', (199, 21, 133)),
    ('midnightblue', (25, 25, 112)),
    ('mintcream', (245, 255, 250)),
    ('mistyrose', (255, 228, 225)),
    ('moccasin', (255, 228, 181)),
    ('navajowhite', (255, 222, 173)),
    ('navy', (0, 0, 128)),
    ('oldlace', (253, 245, 230)),
    ('olive', (128, 128, 0)),
    ('olivedrab', (107, 142, 35)),
    ('orange', (255, 165, 0)),
    ('orangered', (255, 69, 0)),
    ('orchid', (218, 112, 214)),
    ('palegoldenrod', (238, 232, 170)),
    ('palegreen', (152, 251, 152)),
    ('paleturquoise', (175, 238, 238)),
    ('palevioletred', (219, 112, 147)),
    ('papayawhip', (255, 239, 213)),
    ('peachpuff', (255, 218, 185)),
    ('peru', (205, 133, 63)),
    ('pink', (255, 192, 203)),
    ('plum', (221, 160, 221)),
    ('powderblue', (176, 224, 230)),
    ('purple', (128, 0, 128)),
    ('rebeccapurple', (102, 51, 153)),
    ('red', (255, 0, 0)),
    ('rosybrown', (188, 143, 143)),
    ('royalblue', (65, 105, 225)),
    ('saddlebrown', (139, 69, 19)),
    ('salmon', (250, 128, 114)),
    ('sandybrown', (244, 164, 96)),
    ('seagreen', (46, 139, 87)),
    ('seashell', (255, 245, 238)),
    ('sienna', (160, 82, 45)),
    ('silver', (192, 192, 192)),
    ('skyblue', (135, 206, 235)),
    ('slateblue', (106, 90, 205)),
    ('slategray', (112, 128, 144)),
    ('slategrey', (112, 128, 144)),
    ('snow', (255, 250, 250)),
    ('springgreen', (0, 255, 127)),
    ('steelblue', (70, 130, 180)),
    ('tan', (210, 180, 140)),
    ('teal', (0, 128, 128)),
    ('thistle', (216, 191, 216)),
    ('tomato', (255, 99, 71)),
    ('turquoise', (64, 224, 208)),
    ('violet', (238, 130, 238)),
    ('wheat', (245, 222, 179)),
    ('white', (255, 255, 255)),
    ('whitesmoke', (245, 245, 245)),
    ('yellow', (255, 255, 0)),
    ('yellowgreen', (154, 205, 50)),
]


# (r, g, b, a) in 0..1
SPECIAL_COLOR_KEYWORDS = {
    'transparent': RGBA(0., 0., 0., 0.),
}


# (r, g, b, a) in 0..1, read-only
COLOR_KEYWORDS = dict(SPECIAL_COLOR_KEYWORDS)
COLOR_KEYWORDS.update(
    # 255 maps to 1, 0 to 0, the rest is linear.
    (keyword, RGBA(r / 255., g / 255., b / 255., 1.))
    for keyword, (r, g, b) in itertools.chain(
        BASIC_COLOR_KEYWORDS, EXTENDED_COLOR_KEYWORDS))
COLOR_KEYWORDS = types.MappingProxyType(COLOR_KEYWORDS)
