from iteradapt.size_hint import (
    USIZE_MAX,
    add,
    add_scalar,
    maximum,
    minimum,
    mul,
    mul_scalar,
    sub_scalar,
)


def test_mul_size_hints():
    assert mul((3, 4), (3, 4)) == (9, 16)
    assert mul((3, 4), (USIZE_MAX, None)) == (USIZE_MAX, None)
    assert mul((3, None), (0, 0)) == (0, 0)


def test_mul_overflowing_upper_is_unknown():
    assert mul((1, USIZE_MAX), (1, 2)) == (1, None)


def test_add_known_and_unknown():
    assert add((1, 2), (3, 4)) == (4, 6)
    assert add((1, 2), (3, None)) == (4, None)


def test_add_saturates_and_overflows():
    assert add((USIZE_MAX, USIZE_MAX), (1, 1)) == (USIZE_MAX, None)


def test_add_scalar():
    assert add_scalar((2, 5), 3) == (5, 8)
    assert add_scalar((2, None), 3) == (5, None)
    assert add_scalar((USIZE_MAX, USIZE_MAX), 1) == (USIZE_MAX, None)


def test_sub_scalar_saturates_at_zero():
    assert sub_scalar((2, 5), 3) == (0, 2)
    assert sub_scalar((2, None), 1) == (1, None)
    assert sub_scalar((0, 0), 4) == (0, 0)


def test_mul_scalar():
    assert mul_scalar((2, 3), 4) == (8, 12)
    assert mul_scalar((2, None), 4) == (8, None)
    assert mul_scalar((USIZE_MAX, USIZE_MAX), 2) == (USIZE_MAX, None)


def test_maximum():
    assert maximum((1, 5), (3, 4)) == (3, 5)
    assert maximum((1, 5), (3, None)) == (3, None)


def test_minimum():
    assert minimum((1, 5), (3, 4)) == (1, 4)
    assert minimum((1, 5), (3, None)) == (1, 5)
    assert minimum((1, None), (3, 7)) == (1, 7)
    assert minimum((1, None), (3, None)) == (1, None)