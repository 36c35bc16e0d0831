"""
    tinyvalues.fields
    -----------------

    Glue to decode the string fields of structured data (eg. loaded
    from JSON) with the value parsers.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

from .angle import parse_angle
from .box import parse_box_edges
from .color import parse_color
from .length import parse_length
from .parsing import ParseError


FIELD_PARSERS = {
    'color': parse_color,
    'length': parse_length,
    'angle': parse_angle,
    'box': parse_box_edges,
}


class FieldDecodeError(ValueError):
    """A field could not be decoded.

    .. attribute:: field

        The name of the field.

    .. attribute:: value

        The raw value found for this field.

    .. attribute:: reason

        What happend (a string).

    """
    def __init__(self, field, value, reason):
        self.field = field
        self.value = value
        self.reason = reason
        self.msg = self.message = (
            'Invalid field {0.field!r}: {0.reason}'.format(self))
        super(FieldDecodeError, self).__init__(self.message)

    def __repr__(self):  # pragma: no cover
        return ('<{0.__class__.__name__}: {0.message}>'.format(self))


def decode_field(field, value, kind):
    """Parse the raw ``value`` of ``field`` as a ``kind`` value.

    :param kind: A key of :data:`FIELD_PARSERS`.
    :returns: Whatever the parser for ``kind`` returns.
    :raises:
        :class:`FieldDecodeError`, with the :class:`~.parsing.ParseError`
        (if any) as ``__cause__``.

    """
    parser = FIELD_PARSERS.get(kind)
    if parser is None:
        raise FieldDecodeError(field, value, 'unknown kind {0!r}'.format(kind))
    if not isinstance(value, str):
        raise FieldDecodeError(field, value, 'expected a {0} string, got {1}'
                               .format(kind, type(value).__name__))
    try:
        return parser(value)
    except ParseError as exc:
        raise FieldDecodeError(
            field, value, 'invalid {0} string'.format(kind)) from exc


def decode_fields(data, schema):
    """Decode some fields of a mapping.

    :param data: A mapping of field names to raw values.
    :param schema: A mapping of field names to kinds.
    :returns:
        A new dict. Fields in ``schema`` are decoded, other fields are
        copied as-is. Fields in ``schema`` but not in ``data`` are ignored.

    """
    result = dict(data)
    for field, kind in schema.items():
        if field in result:
            result[field] = decode_field(field, result[field], kind)
    return result
