'''
BigNum construction, rendering, and comparison tests
'''

import regex

from bigrpn.bignum import BigNum
from bigrpn.util import ParseError

from pytest import mark, raises


def test_limbs_little_endian():
    n = BigNum.from_string('1234567890123456789')
    assert list(n.limbs) == [123456789, 234567890, 1]
    assert not n.negative


def test_from_string_negative():
    n = BigNum.from_string('-42')
    assert list(n.limbs) == [42]
    assert n.negative


def test_leading_zeros_skipped():
    assert list(BigNum.from_string('000000000000000000123').limbs) == [123]
    assert BigNum.from_string('-007').to_string() == '-7'


def test_zero_forms():
    for text in '0', '000', '-0', '-000':
        n = BigNum.from_string(text)
        assert list(n.limbs) == [0]
        assert not n.negative
        assert n.is_zero()
        assert n.to_string() == '0'


@mark.parametrize('text', ['', '-', '--1', '+1', '1-', '12a', ' 1', '1 ',
                           '1.5', '0x10', '\N{ARABIC-INDIC DIGIT THREE}'])
def test_from_string_rejects(text):
    with raises(ParseError, match=regex.escape(repr(text))):
        BigNum.from_string(text)


def test_parse_error_is_value_error():
    with raises(ValueError):
        BigNum.from_string('x')


def test_from_int(a):
    n = BigNum.from_int(a)
    assert int(n) == a
    assert n.to_string() == str(a)
    assert n.negative == (a < 0)


def test_from_int_zero_is_single_limb():
    assert list(BigNum.from_int(0).limbs) == [0]


def test_render_pads_inner_limbs():
    n = BigNum([5, 0, 7])
    assert n.to_string() == '7000000000000000005'
    assert str(BigNum([1, 1], negative=True)) == '-1000000001'


@mark.parametrize('text', ['0', '1', '-1', '999999999', '1000000000',
                           '-1000000000000000000',
                           '100000000000000000000000000000000000000001',
                           '-31415926535897932384626433832795028841971'])
def test_round_trip(text):
    assert BigNum.from_string(text).to_string() == text


def test_normalize_trims_high_zero_limbs():
    n = BigNum.__new__(BigNum)
    n.limbs = BigNum([0]).limbs
    n.limbs.resize(4)
    n.limbs.set(1, 3)
    n.negative = True
    n.normalize()
    assert list(n.limbs) == [0, 3]
    assert n.negative


def test_normalize_zero_sign():
    n = BigNum([0, 0, 0], negative=True)
    assert list(n.limbs) == [0]
    assert not n.negative


def test_normalize_empty():
    n = BigNum([])
    assert list(n.limbs) == [0]


def test_normalize_idempotent(a):
    n = BigNum.from_int(a)
    before = (list(n.limbs), n.negative)
    n.normalize()
    assert (list(n.limbs), n.negative) == before


def test_clone_is_deep():
    n = BigNum.from_int(10 ** 20)
    clone = n.clone()
    clone.limbs.set(0, 1)
    assert int(n) == 10 ** 20
    assert int(clone) == 10 ** 20 + 1


def test_negate_copies():
    n = BigNum.from_int(5)
    m = n.negate()
    assert int(m) == -5
    assert int(n) == 5
    assert int(-m) == 5
    assert int(BigNum.from_int(0).negate()) == 0
    assert not BigNum.from_int(0).negate().negative


def test_compare_magnitude():
    assert BigNum.from_int(-5).compare_magnitude(BigNum.from_int(3)) == 1
    assert BigNum.from_int(3).compare_magnitude(BigNum.from_int(-5)) == -1
    assert BigNum.from_int(-5).compare_magnitude(BigNum.from_int(5)) == 0
    # Limb count decides first
    assert BigNum.from_int(10 ** 9).compare_magnitude(
        BigNum.from_int(10 ** 9 - 1)) == 1


def _sign(value):
    return (value > 0) - (value < 0)


@mark.parametrize('b', [0, 1, -1, 10 ** 9, -(10 ** 18), 2 ** 63 - 1])
def test_compare(a, b):
    assert BigNum.from_int(a).compare(BigNum.from_int(b)) == _sign(a - b)


def test_rich_comparisons():
    small, large = BigNum.from_int(-10 ** 30), BigNum.from_int(2)
    assert small < large
    assert large > small
    assert small <= small.clone()
    assert small == -10 ** 30
    assert large != 3
    assert large == BigNum.from_string('00002')


def test_hash_agrees_with_int():
    assert hash(BigNum.from_int(10 ** 25)) == hash(10 ** 25)
    assert len({BigNum.from_int(3), BigNum.from_string('3')}) == 1


def test_bool():
    assert not BigNum()
    assert BigNum.from_int(-1)


def test_repr():
    assert repr(BigNum.from_int(-12)) == "BigNum('-12')"


def test_owns_limb_buffer():
    limbs = BigNum.from_int(9).limbs
    n = BigNum(limbs)
    assert n.limbs is limbs
