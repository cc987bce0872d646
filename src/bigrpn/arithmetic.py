'''
Schoolbook arithmetic on BigNum limbs.

Every function returns a new, normalized BigNum and leaves its operands
untouched. Python integers never overflow, so limb products and carries are
computed directly.
'''

from .limbs import LimbBuffer


def _build(like, limbs, negative=False):
    '''
    Wrap limbs into a normalized number of the same type as like.
    '''
    return type(like)(limbs, negative)


def add_magnitudes(a, b):
    '''
    Return |a| + |b|.
    '''
    base = a.BASE
    size_a, size_b = len(a.limbs), len(b.limbs)
    limbs = LimbBuffer()
    carry = 0
    i = 0
    while i < size_a or i < size_b or carry:
        total = carry
        if i < size_a:
            total += a.limbs.get(i)
        if i < size_b:
            total += b.limbs.get(i)
        carry, limb = divmod(total, base)
        limbs.append(limb)
        i += 1
    return _build(a, limbs)


def subtract_magnitudes(a, b):
    '''
    Return |a| - |b|.

    The caller orders the operands: raises ValueError if |a| < |b|.
    '''
    if a.compare_magnitude(b) < 0:
        raise ValueError('Cannot subtract a larger magnitude from a smaller '
                         'magnitude')
    base = a.BASE
    size_b = len(b.limbs)
    limbs = LimbBuffer()
    borrow = 0
    for i in range(len(a.limbs)):
        difference = a.limbs.get(i) - borrow
        if i < size_b:
            difference -= b.limbs.get(i)
        if difference < 0:
            difference += base
            borrow = 1
        else:
            borrow = 0
        limbs.append(difference)
    return _build(a, limbs)


def add(a, b):
    '''
    Signed a + b.
    '''
    if a.negative == b.negative:
        result = add_magnitudes(a, b)
        return _build(a, result.limbs, a.negative)

    cmp = a.compare_magnitude(b)
    if cmp == 0:
        return type(a).from_int(0)
    elif cmp > 0:
        result = subtract_magnitudes(a, b)
        return _build(a, result.limbs, a.negative)
    else:
        result = subtract_magnitudes(b, a)
        return _build(a, result.limbs, b.negative)


def subtract(a, b):
    '''
    Signed a - b, as a + (-b). b itself is not modified.
    '''
    return add(a, b.negate())


def multiply(a, b):
    '''
    Signed a * b, by long multiplication over base 10**9 limbs.
    '''
    base = a.BASE
    size_a, size_b = len(a.limbs), len(b.limbs)
    limbs = LimbBuffer()
    limbs.resize(size_a + size_b)
    for i in range(size_a):
        digit_a = a.limbs.get(i)
        carry = 0
        j = 0
        while j < size_b or carry:
            digit_b = b.limbs.get(j) if j < size_b else 0
            product = limbs.get(i + j) + digit_a * digit_b + carry
            carry, limb = divmod(product, base)
            limbs.set(i + j, limb)
            j += 1
    return _build(a, limbs, a.negative != b.negative)
