"""
    Test suite for tinyvalues
    -------------------------

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import pytest


def assert_close(result, expected):
    """Compare tuples of floats (eg. colors) with some tolerance."""
    assert result is not None
    assert len(result) == len(expected)
    assert tuple(result) == pytest.approx(tuple(expected), abs=1e-6)


def assert_error(exc_info, expected_kind):
    """Check the class of a raised :class:`~tinyvalues.ParseError`."""
    assert exc_info.value.kind == expected_kind
    assert exc_info.value.message.startswith('Parse error at ')
