"""
    Tests for the box-edge shorthand parser
    ---------------------------------------

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import pytest

from tinyvalues.box import (
    BoxEdges, parse_box_edges, parse_box_edges_string, expand_four_sides)
from tinyvalues.length import AUTO, Length
from tinyvalues.parsing import (
    InvalidEdgeCount, MalformedEdge, MalformedNumber, UnknownUnit)

from . import assert_error


def px(value):
    return Length(value, 'px')


@pytest.mark.parametrize(('css_source', 'expected_result'), [
    ('auto auto auto auto', BoxEdges.all(AUTO)),
    ('auto auto auto', BoxEdges.all(AUTO)),
    ('auto auto', BoxEdges.all(AUTO)),
    ('auto', BoxEdges.all(AUTO)),
    ('1px', BoxEdges.all(px(1))),
    ('1px 2px', BoxEdges(px(1), px(2), px(1), px(2))),
    ('1px 2px 3px', BoxEdges(px(1), px(2), px(3), px(2))),
    ('1px 2px 3px 4px', BoxEdges(px(1), px(2), px(3), px(4))),
    # First value for top and bottom, second for left and right
    ('50px 100px', BoxEdges(px(50), px(100), px(50), px(100))),
    ('  10px\t20%\n', BoxEdges(
        px(10), Length(20, '%'), px(10), Length(20, '%'))),
    ('auto 5vw 0px', BoxEdges(AUTO, Length(5, 'vw'), px(0), Length(5, 'vw'))),
    ('1vmin   2vmax 3vh 4%', BoxEdges(
        Length(1, 'vmin'), Length(2, 'vmax'), Length(3, 'vh'),
        Length(4, '%'))),
])
def test_box_edges(css_source, expected_result):
    assert parse_box_edges(css_source) == expected_result
    assert parse_box_edges_string(css_source) == expected_result


@pytest.mark.parametrize(('short', 'full'), [
    ('10px', '10px 10px 10px 10px'),
    ('10px 20px', '10px 20px 10px 20px'),
    ('10px 20px 30px', '10px 20px 30px 20px'),
    ('auto 1%', 'auto 1% auto 1%'),
])
def test_shorthand_expansion(short, full):
    assert parse_box_edges(short) == parse_box_edges(full)


@pytest.mark.parametrize(('css_source', 'expected_error'), [
    ('', 'EmptyRect'),
    ('  \n\t', 'EmptyRect'),
    ('1px 2px 3px 4px 5px', 'InvalidEdgeCount'),
    ('1px 2px 3px 4px 5px 6px', 'InvalidEdgeCount'),
    ('1px 2px 3px 4px foo', 'InvalidEdgeCount'),
    ('1px 2em', 'MalformedEdge'),
    ('foo', 'MalformedEdge'),
    ('1px, 2px', 'MalformedEdge'),
    ('1px 2', 'MalformedEdge'),
])
def test_box_edges_errors(css_source, expected_error):
    with pytest.raises(ValueError) as exc_info:
        parse_box_edges(css_source)
    assert_error(exc_info, expected_error)
    assert parse_box_edges_string(css_source) is None


def test_malformed_edge_details():
    with pytest.raises(MalformedEdge) as exc_info:
        parse_box_edges('1px 2em')
    error = exc_info.value
    assert error.index == 1
    assert error.token == '2em'
    assert error.position == 5
    assert isinstance(error.__cause__, UnknownUnit)

    with pytest.raises(MalformedEdge) as exc_info:
        parse_box_edges(' 1px  foo 3px')
    error = exc_info.value
    assert error.index == 1
    assert error.token == 'foo'
    assert error.position == 6
    assert isinstance(error.__cause__, MalformedNumber)

    with pytest.raises(InvalidEdgeCount) as exc_info:
        parse_box_edges('1px 2px 3px 4px 5px')
    assert exc_info.value.position == 16


def test_expand_four_sides():
    assert expand_four_sides('a') == ('a', 'a', 'a', 'a')
    assert expand_four_sides(['a', 'b']) == ('a', 'b', 'a', 'b')
    assert expand_four_sides(('a', 'b', 'c')) == ('a', 'b', 'c', 'b')
    assert expand_four_sides('abcd') == ('a', 'b', 'c', 'd')
    result = expand_four_sides([1, 2])
    assert isinstance(result, BoxEdges)
    assert (result.top, result.right, result.bottom, result.left) == (
        1, 2, 1, 2)
    for values in ([], [1, 2, 3, 4, 5]):
        with pytest.raises(InvalidEdgeCount):
            expand_four_sides(values)
