"""
    Tests for decoding fields of structured data
    --------------------------------------------

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import json
import math

import pytest

from tinyvalues.box import BoxEdges
from tinyvalues.color import RGBA
from tinyvalues.fields import (
    FIELD_PARSERS, FieldDecodeError, decode_field, decode_fields)
from tinyvalues.length import Length
from tinyvalues.parsing import MalformedEdge, UnrecognizedColorSyntax


@pytest.mark.parametrize(('json_source', 'kind', 'expected_result'), [
    ('{"value": "red"}', 'color', RGBA(1, 0, 0, 1)),
    ('{"value": "42px"}', 'length', Length(42, 'px')),
    ('{"value": "42px"}', 'box', BoxEdges.all(Length(42, 'px'))),
    ('{"value": "180deg"}', 'angle', math.pi),
])
def test_decode_json_field(json_source, kind, expected_result):
    data = json.loads(json_source)
    result = decode_field('value', data['value'], kind)
    if kind == 'angle':
        assert result == pytest.approx(expected_result)
    else:
        assert result == expected_result


@pytest.mark.parametrize(('value', 'kind', 'reason'), [
    ('nope', 'color', 'invalid color string'),
    ('12', 'length', 'invalid length string'),
    ('5grad', 'angle', 'invalid angle string'),
    ('1px 2px 3px 4px 5px', 'box', 'invalid box string'),
])
def test_decode_field_errors(value, kind, reason):
    with pytest.raises(FieldDecodeError) as exc_info:
        decode_field('value', value, kind)
    error = exc_info.value
    assert error.field == 'value'
    assert error.value == value
    assert error.reason == reason
    assert error.message == "Invalid field 'value': " + reason
    assert isinstance(error.__cause__, ValueError)


def test_decode_field_cause():
    with pytest.raises(FieldDecodeError) as exc_info:
        decode_field('background', 'not-a-color', 'color')
    assert isinstance(exc_info.value.__cause__, UnrecognizedColorSyntax)

    with pytest.raises(FieldDecodeError) as exc_info:
        decode_field('margin', '1px bad', 'box')
    assert isinstance(exc_info.value.__cause__, MalformedEdge)
    assert exc_info.value.__cause__.index == 1


@pytest.mark.parametrize('value', [42, None, 1.5, ['red'], b'red'])
def test_decode_field_not_a_string(value):
    with pytest.raises(FieldDecodeError) as exc_info:
        decode_field('color', value, 'color')
    assert exc_info.value.reason.startswith('expected a color string, got ')
    assert exc_info.value.__cause__ is None


def test_decode_field_unknown_kind():
    with pytest.raises(FieldDecodeError) as exc_info:
        decode_field('value', 'red', 'colour')
    assert exc_info.value.reason == "unknown kind 'colour'"


def test_field_parsers():
    assert sorted(FIELD_PARSERS) == ['angle', 'box', 'color', 'length']


def test_decode_fields():
    data = json.loads('''{
        "name": "button",
        "background": "#f00",
        "padding": "1px 2px",
        "width": "auto",
        "rotation": "90deg"
    }''')
    result = decode_fields(data, {
        'background': 'color',
        'padding': 'box',
        'width': 'length',
        'rotation': 'angle',
        'border-color': 'color',
    })
    assert result['name'] == 'button'
    assert result['background'] == RGBA(1, 0, 0, 1)
    assert result['padding'] == BoxEdges(
        Length(1, 'px'), Length(2, 'px'), Length(1, 'px'), Length(2, 'px'))
    assert result['width'] == 'auto'
    assert result['rotation'] == pytest.approx(math.pi / 2)
    assert 'border-color' not in result
    # The input is not modified
    assert data['background'] == '#f00'


def test_decode_fields_error():
    with pytest.raises(FieldDecodeError) as exc_info:
        decode_fields({'a': 'red', 'b': 'blue-ish'},
                      {'a': 'color', 'b': 'color'})
    assert exc_info.value.field == 'b'
