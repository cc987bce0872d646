'''
Limb buffer tests
'''

from bigrpn.limbs import LimbBuffer


def test_empty():
    limbs = LimbBuffer()
    assert len(limbs) == 0
    assert list(limbs) == []


def test_append_and_get():
    limbs = LimbBuffer()
    for value in range(20):
        limbs.append(value * 3)
    assert len(limbs) == 20
    assert limbs.get(0) == 0
    assert limbs.get(19) == 57


def test_pop():
    limbs = LimbBuffer([1, 2, 3])
    assert limbs.pop() == 3
    assert list(limbs) == [1, 2]


def test_pop_empty_is_zero():
    limbs = LimbBuffer()
    assert limbs.pop() == 0
    assert len(limbs) == 0


def test_out_of_range_get_and_set():
    limbs = LimbBuffer([5])
    assert limbs.get(1) == 0
    assert limbs.get(-1) == 0
    limbs.set(3, 9)
    assert list(limbs) == [5]


def test_set():
    limbs = LimbBuffer([5, 6])
    limbs.set(1, 999999999)
    assert list(limbs) == [5, 999999999]


def test_clear():
    limbs = LimbBuffer([1, 2, 3])
    limbs.clear()
    assert len(limbs) == 0
    limbs.append(4)
    assert list(limbs) == [4]


def test_resize():
    limbs = LimbBuffer([1, 2])
    limbs.resize(5)
    assert list(limbs) == [1, 2, 0, 0, 0]
    limbs.resize(1)
    assert list(limbs) == [1]
    limbs.resize(1)
    assert list(limbs) == [1]


def test_clone_is_independent():
    limbs = LimbBuffer([1, 2])
    clone = limbs.clone()
    assert clone == limbs
    clone.set(0, 7)
    clone.append(8)
    assert list(limbs) == [1, 2]
    assert list(clone) == [7, 2, 8]


def test_holds_full_limb_range():
    limbs = LimbBuffer([0, 10 ** 9 - 1, 2 ** 32 - 1])
    assert list(limbs) == [0, 10 ** 9 - 1, 2 ** 32 - 1]
