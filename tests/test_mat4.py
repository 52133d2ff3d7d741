import random

import pytest

from pbrtlite.mat4 import Mat4

IDENTITY = [1.0 if r == c else 0.0 for r in range(4) for c in range(4)]


def _flat(m):
    return [v for row in m for v in row]


def _random_values(rng, lo, hi):
    return [rng.uniform(lo, hi) for _ in range(16)]


def test_default_constructor_is_identity():
    assert _flat(Mat4()) == IDENTITY


def test_array_constructor():
    elems = list(range(1, 17))
    m = Mat4(elems)
    for i, e in enumerate(elems):
        assert m[i // 4, i % 4] == e


def test_nested_constructor():
    rows = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
    assert Mat4(rows) == Mat4(range(1, 17))
    assert Mat4(rows)[1] == (5.0, 6.0, 7.0, 8.0)


@pytest.mark.parametrize("bad", [[1, 2, 3], [[1, 2], [3, 4], [5, 6], [7, 8]], []])
def test_bad_shape_raises(bad):
    with pytest.raises(ValueError):
        Mat4(bad)


def test_transpose():
    m = Mat4(range(1, 17))
    mt = m.transpose()
    for i in range(4):
        for j in range(4):
            assert mt[i, j] == m[j, i]


def test_multiply_identity():
    identity = Mat4()
    a = Mat4([2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53])
    assert identity @ a == a
    assert a @ identity == a


def test_inverse_diagonal():
    b = Mat4([2, 0, 0, 0, 0, 3, 0, 0, 0, 0, 4, 0, 0, 0, 0, 1])
    b_inv = b.inverse()
    assert b_inv[0, 0] == pytest.approx(0.5)
    assert b_inv[1, 1] == pytest.approx(1.0 / 3.0)
    assert b_inv[2, 2] == pytest.approx(0.25)
    assert b_inv[3, 3] == pytest.approx(1.0)
    assert _flat(b @ b_inv) == pytest.approx(IDENTITY, abs=1e-6)


def test_associativity():
    rng = random.Random(54321)
    for _ in range(10):
        a, b, c = (Mat4(_random_values(rng, -5, 5)) for _ in range(3))
        assert _flat((a @ b) @ c) == pytest.approx(_flat(a @ (b @ c)), rel=1e-9, abs=1e-9)


def test_transpose_involution():
    rng = random.Random(98765)
    for _ in range(10):
        a = Mat4(_random_values(rng, -7, 7))
        assert a.transpose().transpose() == a


def test_transpose_multiply_commute():
    rng = random.Random(19283)
    for _ in range(10):
        a = Mat4(_random_values(rng, -4, 4))
        b = Mat4(_random_values(rng, -4, 4))
        lhs = (a @ b).transpose()
        rhs = b.transpose() @ a.transpose()
        assert _flat(lhs) == pytest.approx(_flat(rhs), rel=1e-9, abs=1e-9)


def test_random_inverse():
    rng = random.Random(55555)
    for _ in range(10):
        values = _random_values(rng, -5, 5)
        for i in range(4):
            row_sum = sum(abs(v) for v in values[i * 4:(i + 1) * 4])
            values[i * 4 + i] += row_sum + 1.0
        a = Mat4(values)
        a_inv = a.inverse()
        assert _flat(a @ a_inv) == pytest.approx(IDENTITY, abs=1e-4)
        assert _flat(a_inv @ a) == pytest.approx(IDENTITY, abs=1e-4)


def test_zero_multiplication():
    a = Mat4(range(1, 17))
    zero = Mat4([0.0] * 16)
    assert _flat(a @ zero) == [0.0] * 16
    assert _flat(zero @ a) == [0.0] * 16


def test_inverse_of_identity():
    assert _flat(Mat4().inverse()) == IDENTITY


def test_singular_inverse_is_identity():
    assert Mat4([0.0] * 16).inverse() == Mat4()
    assert Mat4(range(1, 17)).inverse() == Mat4()


def test_str_format():
    lines = str(Mat4()).splitlines()
    assert len(lines) == 4
    assert lines[0] == "1.000000 0.000000 0.000000 0.000000"
    assert lines[3] == "0.000000 0.000000 0.000000 1.000000"


def test_matmul_rejects_non_matrix():
    with pytest.raises(TypeError):
        Mat4() @ 3