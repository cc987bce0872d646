from functools import total_ordering

import regex

from .limbs import LimbBuffer
from .util import ParseError
from . import arithmetic


@total_ordering
class BigNum:
    '''
    Signed arbitrary-precision integer.

    Stored as little-endian base 10**9 limbs (limb 0 is the least
    significant group of nine decimal digits) and a sign flag. Always kept
    normalized: at least one limb, no high-order zero limbs, and zero is
    never negative.
    '''
    BASE = 10 ** 9
    BASE_DIGITS = 9

    # Deliberately ASCII digits only, not \d.
    LITERAL = regex.compile(r'''
                            (?<sign>-)?
                            # Leading zeros, but keep the last digit of "000"
                            0*
                            (?<digits>[0-9]+)
                            ''', flags=regex.VERSION1 | regex.VERBOSE)

    def __init__(self, limbs=None, negative=False):
        '''
        Take ownership of limbs (a LimbBuffer, or any iterable of limbs).

        :param negative: Sign flag, ignored when the value is zero.
        '''
        if limbs is None:
            limbs = LimbBuffer([0])
        elif not isinstance(limbs, LimbBuffer):
            limbs = LimbBuffer(limbs)
        self.limbs = limbs
        self.negative = bool(negative)
        self.normalize()

    @classmethod
    def from_string(cls, text):
        '''
        Parse an optionally negative decimal integer, e.g. -0012345.

        Raises ParseError on anything else, including "" and "-".
        '''
        match = cls.LITERAL.fullmatch(text)
        if match is None:
            raise ParseError('Cannot parse {!r} as an integer'.format(text))
        digits = match.group('digits')
        limbs = LimbBuffer()
        # Chunk from the right, least significant limb first.
        for end in range(len(digits), 0, -cls.BASE_DIGITS):
            limbs.append(int(digits[max(end - cls.BASE_DIGITS, 0):end]))
        return cls(limbs, match.group('sign') is not None)

    @classmethod
    def from_int(cls, value):
        negative = value < 0
        value = abs(value)
        limbs = LimbBuffer()
        while True:
            value, limb = divmod(value, cls.BASE)
            limbs.append(limb)
            if not value:
                break
        return cls(limbs, negative)

    def normalize(self):
        '''
        Trim high-order zero limbs and make zero non-negative.

        Idempotent. Returns self.
        '''
        limbs = self.limbs
        while len(limbs) > 1 and limbs.get(len(limbs) - 1) == 0:
            limbs.pop()
        if not len(limbs):
            limbs.append(0)
        if self.is_zero():
            self.negative = False
        return self

    def is_zero(self):
        return len(self.limbs) == 1 and self.limbs.get(0) == 0

    def clone(self):
        '''
        Independent deep copy.
        '''
        return type(self)(self.limbs.clone(), self.negative)

    __copy__ = clone

    def negate(self):
        '''
        Return a copy with the opposite sign.
        '''
        return type(self)(self.limbs.clone(), not self.negative)

    def compare_magnitude(self, other):
        '''
        Compare |self| with |other|: -1, 0 or 1.
        '''
        size, other_size = len(self.limbs), len(other.limbs)
        # Normalized, so more limbs means bigger.
        if size != other_size:
            return 1 if size > other_size else -1
        for limb, other_limb in zip(reversed(self.limbs),
                                    reversed(other.limbs)):
            if limb != other_limb:
                return 1 if limb > other_limb else -1
        return 0

    def compare(self, other):
        '''
        Compare self with other: -1, 0 or 1.
        '''
        if self.negative != other.negative:
            return -1 if self.negative else 1
        cmp = self.compare_magnitude(other)
        return -cmp if self.negative else cmp

    def to_string(self):
        '''
        Render as plain decimal, round-tripping through from_string.
        '''
        limbs = self.limbs
        width = type(self).BASE_DIGITS
        rendered = [str(limbs[-1])]
        rendered.extend('{:0{}d}'.format(limb, width)
                        for limb in reversed(limbs[:-1]))
        sign = '-' if self.negative and not self.is_zero() else ''
        return sign + ''.join(rendered)

    __str__ = to_string

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.to_string())

    def __int__(self):
        value = 0
        for limb in reversed(self.limbs):
            value = value * type(self).BASE + limb
        return -value if self.negative else value

    def _coerce(self, other):
        '''
        Return other as a BigNum, or None if it can't be one.
        '''
        if isinstance(other, BigNum):
            return other
        elif isinstance(other, int):
            return type(self).from_int(other)
        return None

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self):
        return hash(int(self))

    def __bool__(self):
        return not self.is_zero()

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return type(self)(self.limbs.clone())

    def _binary(f):
        '''
        Lift an arithmetic function to a dunder accepting ints too.
        '''
        def wrapped(self, other):
            other = self._coerce(other)
            if other is None:
                return NotImplemented
            return f(self, other)
        wrapped.__name__ = f.__name__
        wrapped.__doc__ = f.__doc__
        return wrapped

    def _rbinary(f):
        def wrapped(self, other):
            other = self._coerce(other)
            if other is None:
                return NotImplemented
            return f(other, self)
        wrapped.__name__ = f.__name__
        wrapped.__doc__ = f.__doc__
        return wrapped

    __add__ = _binary(arithmetic.add)
    __sub__ = _binary(arithmetic.subtract)
    __mul__ = _binary(arithmetic.multiply)
    __radd__ = _rbinary(arithmetic.add)
    __rsub__ = _rbinary(arithmetic.subtract)
    __rmul__ = _rbinary(arithmetic.multiply)

    del _binary, _rbinary
