import math
import operator

import pytest

from amber_engine.matrix import Matrix
from amber_engine.quaternion import (
    Quaternion,
    conjugate,
    euler_angle_to_quat,
    inverse,
    quat_from_angle_vec_of_rotation,
    quat_from_rotation3,
    quat_rotate_vec,
    quat_to_angle_of_rotation,
    quat_to_euler_angle,
    quat_to_rotation3,
    quat_to_rotation4,
    quat_to_vec_of_rotation,
)
from amber_engine.vector import Vector, dot, normalize


def test_indexing_and_imag():
    q = Quaternion(1, 2, 3, 4)
    assert [q[0], q[1], q[2], q[3]] == [1, 2, 3, 4]
    assert q.imag() == Vector(2, 3, 4)


def test_str_format():
    assert str(Quaternion(1, 2, 3, 4)) == "Quat(1 + 2i + 3j + 4k)"


def test_scalar_addition_touches_real_part():
    q = Quaternion(1, 2, 3, 4)
    assert list(q + 5) == [6, 2, 3, 4]
    assert 5 + q == q + 5
    assert list(q - 1) == [0, 2, 3, 4]


def test_scalar_minus_quaternion():
    q = Quaternion(1, 2, 3, 4)
    assert 2 - q == -q + 2


def test_negation():
    q = Quaternion(1, -2, 3, -4)
    assert list(-q) == [-1, 2, -3, 4]


def test_scaling_and_division():
    q = Quaternion(1, 2, 3, 4)
    assert 3 * q == q * 3
    assert list((q * 3) / 3) == pytest.approx([1, 2, 3, 4], abs=1e-9)


def test_addition_subtraction_round_trip():
    a = Quaternion(1, 2, 3, 4)
    b = Quaternion(0.5, -1, 2, 7)
    result = (a + b) - b
    assert list(result) == pytest.approx([1, 2, 3, 4], abs=1e-9)


def test_product_norm_is_multiplicative():
    a = Quaternion(1, 2, 3, 4)
    b = Quaternion(-2, 0.5, 1, 3)
    assert (a * b).norm() == pytest.approx(a.norm() * b.norm())


def test_inverse_gives_identity():
    q = Quaternion(1, 2, 3, 4)
    product = q * inverse(q)
    assert list(product) == pytest.approx([1, 0, 0, 0], abs=1e-9)


def test_conjugate_negates_imaginary():
    q = Quaternion(1, 2, 3, 4)
    assert conjugate(q) == Quaternion(1, -2, -3, -4)
    assert conjugate(conjugate(q)) == q


def test_identity_rotation_matrix():
    identity = Matrix(3, 3, [1, 0, 0, 0, 1, 0, 0, 0, 1])
    assert quat_to_rotation3(Quaternion(1, 0, 0, 0)) == identity


def test_rotation4_extends_rotation3():
    q = quat_from_angle_vec_of_rotation(0.7, Vector(1, 2, 3))
    m3 = quat_to_rotation3(q)
    m4 = quat_to_rotation4(q)
    for i in range(3):
        for j in range(3):
            assert m4[i, j] == pytest.approx(m3[i, j])
        assert m4[i, 3] == 0
        assert m4[3, i] == 0
    assert m4[3, 3] == 1


def test_rotation_matrix_is_orthonormal():
    m = quat_to_rotation3(quat_from_angle_vec_of_rotation(1.1, Vector(0.3, -1, 2)))
    for a in range(3):
        for b in range(3):
            expected = 1.0 if a == b else 0.0
            assert dot(m.column(a), m.column(b)) == pytest.approx(expected, abs=1e-9)


def test_rotation_matrix_agrees_with_vector_rotation():
    q = quat_from_angle_vec_of_rotation(0.9, Vector(1, -1, 0.5))
    m = quat_to_rotation3(q)
    v = Vector(0.2, 1.5, -0.7)
    by_matrix = m.column(0) * v[0] + m.column(1) * v[1] + m.column(2) * v[2]
    assert list(by_matrix) == pytest.approx(list(quat_rotate_vec(q, v)), abs=1e-9)


@pytest.mark.parametrize(
    "q",
    [
        quat_from_angle_vec_of_rotation(0.8, Vector(1, 2, 3)),
        Quaternion(0, 1, 0, 0),
        Quaternion(0, 0, 1, 0),
        Quaternion(0, 0, 0, 1),
    ],
)
def test_rotation_matrix_round_trip(q):
    rebuilt = quat_from_rotation3(quat_to_rotation3(q))
    assert list(rebuilt) == pytest.approx(list(q), abs=1e-9)


def test_rotate_x_axis_quarter_turn_about_z():
    q = quat_from_angle_vec_of_rotation(math.pi / 2, Vector(0, 0, 5))
    assert list(quat_rotate_vec(q, Vector(1, 0, 0))) == pytest.approx([0, 1, 0], abs=1e-9)


def test_rotation_preserves_length():
    q = quat_from_angle_vec_of_rotation(2.3, Vector(-1, 4, 2))
    v = Vector(3, -2, 1)
    assert quat_rotate_vec(q, v).norm() == pytest.approx(v.norm())


def test_angle_and_axis_round_trip():
    axis = Vector(1, 2, 2)
    q = quat_from_angle_vec_of_rotation(1.2, axis)
    assert q.norm() == pytest.approx(1.0)
    assert quat_to_angle_of_rotation(q) == pytest.approx(1.2)
    assert list(normalize(quat_to_vec_of_rotation(q))) == pytest.approx(list(normalize(axis)))


def test_euler_round_trip():
    q = euler_angle_to_quat(0.3, 0.2, 0.1)
    assert q.norm() == pytest.approx(1.0)
    assert quat_to_euler_angle(q) == pytest.approx((0.3, 0.2, 0.1))


def test_division_by_quaternion_unsupported():
    with pytest.raises(TypeError):
        operator.truediv(Quaternion(1, 0, 0, 0), Quaternion(1, 0, 0, 0))