from pytest import fixture

from bigrpn.lexer import Lexer
from bigrpn.machine import Machine


# Zero, units, both sides of the limb boundary, and values well past 64 bits.
EDGE_VALUES = [
    0, 1, -1, 7, -7,
    10 ** 9 - 1, 10 ** 9, -(10 ** 9), 10 ** 9 + 1,
    2 ** 63 - 1, -(2 ** 63),
    10 ** 18, 10 ** 18 - 1,
    999999999999999999999999999,
    -123456789012345678901234567890,
    10 ** 45 + 10 ** 9,
]


@fixture(params=EDGE_VALUES)
def a(request):
    '''
    Each edge value in turn, as a plain int.
    '''
    return request.param


@fixture(params=EDGE_VALUES)
def b(request):
    '''
    Each edge value in turn, independently of a.
    '''
    return request.param


@fixture
def lexer():
    return Lexer()


@fixture
def machine():
    return Machine()

