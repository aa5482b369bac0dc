'''
Number formatting and helper tests
'''

import math

from rpncalc.util import RPNError, divide, format_number, rejects_user_errors

from pytest import mark, raises


@mark.parametrize('number, text', [
    (0.0, '0'),
    (-0.0, '-0'),
    (123.0, '123'),
    (-42.0, '-42'),
    (0.5, '0.5'),
    (-2.25, '-2.25'),
    (0.1 + 0.2, '0.30000000000000004'),
    (1.5e-07, '0.00000015'),
    (1e20, '100000000000000000000'),
    (1e23, '100000000000000000000000'),
    (-1e23, '-100000000000000000000000'),
    (math.inf, 'inf'),
    (-math.inf, '-inf'),
    (math.nan, 'NaN'),
])
def test_format_number(number, text):
    assert format_number(number) == text


def test_divide():
    assert divide(9.0, 3.0) == 3.0
    assert divide(1.0, 0.0) == math.inf
    assert divide(-1.0, 0.0) == -math.inf
    assert divide(1.0, -0.0) == -math.inf
    assert math.isnan(divide(0.0, 0.0))


def test_rejects_user_errors(caplog):
    @rejects_user_errors
    def refuse():
        raise RPNError('No thanks.')

    @rejects_user_errors
    def accept():
        pass

    assert refuse() is False
    assert 'refuse: No thanks.' in caplog.text
    assert accept() is True


def test_rejects_only_user_errors():
    @rejects_user_errors
    def broken():
        raise ValueError('bug')

    with raises(ValueError):
        broken()
