"""
    tinyvalues.parsing
    ------------------

    Errors and small utilities shared by the value grammars.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import re


# Same characters as the S token of the CSS core syntax.
WHITESPACE = ' \t\r\n\f'

_find_non_whitespace = re.compile('[^%s]' % WHITESPACE).search
_find_words = re.compile('[^%s]+' % WHITESPACE).finditer


class ParseError(ValueError):
    """Details about a value that could not be parsed.

    .. attribute:: position

        Index in the parsed string where the error occured.

    .. attribute:: reason

        What happend (a string).

    .. attribute:: kind

        The name of the error class, eg. ``'UnknownUnit'``.
        Allows to classify failures without ``isinstance`` checks.

    """
    def __init__(self, position, reason):
        self.position = position
        self.reason = reason
        self.msg = self.message = (
            'Parse error at {0.position}, {0.reason}'.format(self))
        super(ParseError, self).__init__(self.message)

    @property
    def kind(self):
        return type(self).__name__

    def __repr__(self):  # pragma: no cover
        return ('<{0.__class__.__name__}: {0.message}>'.format(self))


class MalformedNumber(ParseError):
    """No valid number literal where one was expected."""


class UnknownUnit(ParseError):
    """The suffix after a number is not a recognized unit."""


class TrailingInput(ParseError):
    """A value was parsed but something else follows it."""


class UnrecognizedColorSyntax(ParseError):
    """Not a named, hex or functional color."""


class MalformedHex(ParseError):
    """Starts with ``#`` but is not 3, 6 or 8 hex digits."""


class MalformedFunction(ParseError):
    """An ``rgb()``, ``rgba()``, ``hsl()`` or ``hsla()`` with bad arguments."""


class EmptyRect(ParseError):
    """A box-edge value with no component."""


class InvalidEdgeCount(ParseError):
    """A box-edge value with more than 4 components."""


class MalformedEdge(ParseError):
    """One of the components of a box-edge value is invalid.

    .. attribute:: index

        The 0-based index of the invalid component.

    .. attribute:: token

        The invalid component, as a string.

    The error raised for the component itself is available as
    ``__cause__``.

    """
    def __init__(self, position, reason, index, token):
        self.index = index
        self.token = token
        super(MalformedEdge, self).__init__(position, reason)


def skip_whitespace(source, pos=0):
    """Return the position of the first non-whitespace character
    at or after ``pos``, or ``len(source)``.

    """
    match = _find_non_whitespace(source, pos)
    return match.start() if match else len(source)


def expect_end(source, pos, what):
    """Raise :class:`TrailingInput` if there is anything but whitespace
    after ``pos``.

    :param what: Describes what was parsed, for the error message.

    """
    end = skip_whitespace(source, pos)
    if end != len(source):
        raise TrailingInput(end, 'unexpected {0!r} after {1}'.format(
            source[end:], what))


def split_on_whitespace(source):
    """Split a string on runs of whitespace.

    :returns:
        A list of ``(position, word)`` tuples, in source order.
        Empty if the string is empty or only whitespace.

    """
    return [(match.start(), match.group()) for match in _find_words(source)]
