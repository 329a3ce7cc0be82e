"""Quaternions and the rotation helpers built on them."""

import math
from numbers import Number

from .matrix import Matrix
from .vector import Vector, normalize


def _fmt(value):
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class Quaternion:
    """A quaternion ``r + i·i + j·j + k·k``; index 0 is the real part."""

    def __init__(self, r=0, i=0, j=0, k=0):
        self._c = [r, i, j, k]

    def __iter__(self):
        return iter(self._c)

    def __getitem__(self, index):
        return self._c[index]

    def __setitem__(self, index, value):
        self._c[index] = value

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self._c == other._c

    __hash__ = None

    def __add__(self, other):
        if isinstance(other, Quaternion):
            return Quaternion(*(a + b for a, b in zip(self, other)))
        if isinstance(other, Number):
            r, i, j, k = self._c
            return Quaternion(r + other, i, j, k)
        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, Quaternion):
            return Quaternion(*(a - b for a, b in zip(self, other)))
        if isinstance(other, Number):
            r, i, j, k = self._c
            return Quaternion(r - other, i, j, k)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, Number):
            return -self + other
        return NotImplemented

    def __mul__(self, other):
        """Hamilton product, or scaling by a number."""
        if isinstance(other, Quaternion):
            r1, i1, j1, k1 = self._c
            r2, i2, j2, k2 = other._c
            return Quaternion(
                r1 * r2 - i1 * i2 - j1 * j2 - k1 * k2,
                r1 * i2 + i1 * r2 + j1 * k2 - k1 * j2,
                r1 * j2 - i1 * k2 + j1 * r2 + k1 * i2,
                r1 * k2 + i1 * j2 - j1 * i2 + k1 * r2,
            )
        if isinstance(other, Number):
            return Quaternion(*(a * other for a in self))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Number):
            return Quaternion(*(other * a for a in self))
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Number):
            return Quaternion(*(a / other for a in self))
        return NotImplemented

    def __neg__(self):
        return Quaternion(*(-a for a in self))

    def __repr__(self):
        return f"Quaternion({', '.join(repr(c) for c in self)})"

    def __str__(self):
        r, i, j, k = (_fmt(c) for c in self)
        return f"Quat({r} + {i}i + {j}j + {k}k)"

    def imag(self):
        """Imaginary part as a 3-vector."""
        return Vector(self._c[1:])

    def norm2(self):
        """Squared norm."""
        return sum(c * c for c in self)

    def norm(self):
        """Norm."""
        return math.sqrt(self.norm2())


def quat_to_rotation3(q):
    """3x3 rotation matrix of a unit quaternion."""
    q0, q1, q2, q3 = q
    return Matrix(3, 3, [
        2 * (q0 * q0 + q1 * q1) - 1, 2 * (q1 * q2 + q0 * q3), 2 * (q1 * q3 - q0 * q2),
        2 * (q1 * q2 - q0 * q3), 2 * (q0 * q0 + q2 * q2) - 1, 2 * (q2 * q3 + q0 * q1),
        2 * (q1 * q3 + q0 * q2), 2 * (q2 * q3 - q0 * q1), 2 * (q0 * q0 + q3 * q3) - 1,
    ])


def quat_from_rotation3(m):
    """Unit quaternion of a 3x3 rotation matrix."""
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    if trace > 0:
        s = math.sqrt(trace + 1) * 2
        return Quaternion(
            s * 0.25,
            (m[2, 1] - m[1, 2]) / s,
            (m[0, 2] - m[2, 0]) / s,
            (m[1, 0] - m[0, 1]) / s,
        )
    if m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
        s = math.sqrt(1 + m[0, 0] - m[1, 1] - m[2, 2]) * 2
        return Quaternion(
            (m[2, 1] - m[1, 2]) / s,
            s * 0.25,
            (m[0, 1] + m[1, 0]) / s,
            (m[0, 2] + m[2, 0]) / s,
        )
    if m[1, 1] > m[2, 2]:
        s = math.sqrt(1 + m[1, 1] - m[0, 0] - m[2, 2]) * 2
        return Quaternion(
            (m[0, 2] - m[2, 0]) / s,
            (m[0, 1] + m[1, 0]) / s,
            s * 0.25,
            (m[1, 2] + m[2, 1]) / s,
        )
    s = math.sqrt(1 + m[2, 2] - m[0, 0] - m[1, 1]) * 2
    return Quaternion(
        (m[1, 0] - m[0, 1]) / s,
        (m[0, 2] + m[2, 0]) / s,
        (m[1, 2] + m[2, 1]) / s,
        s * 0.25,
    )


def quat_to_rotation4(q):
    """4x4 homogeneous rotation matrix of a unit quaternion."""
    q0, q1, q2, q3 = q
    return Matrix(4, 4, [
        2 * (q0 * q0 + q1 * q1) - 1, 2 * (q1 * q2 + q0 * q3), 2 * (q1 * q3 - q0 * q2), 0,
        2 * (q1 * q2 - q0 * q3), 2 * (q0 * q0 + q2 * q2) - 1, 2 * (q2 * q3 + q0 * q1), 0,
        2 * (q1 * q3 + q0 * q2), 2 * (q2 * q3 - q0 * q1), 2 * (q0 * q0 + q3 * q3) - 1, 0,
        0, 0, 0, 1,
    ])


def quat_to_vec_of_rotation(q):
    """Rotation axis scaled by the sine of half the angle."""
    return q.imag()


def quat_to_angle_of_rotation(q):
    """Rotation angle of a unit quaternion."""
    return 2 * math.acos(max(-1.0, min(1.0, q[0])))


def quat_from_angle_vec_of_rotation(angle, vec):
    """Unit quaternion rotating by ``angle`` around axis ``vec``."""
    axis = normalize(vec)
    c = math.cos(angle / 2)
    s = math.sin(angle / 2)
    return Quaternion(c, s * axis[0], s * axis[1], s * axis[2])


def euler_angle_to_quat(roll, pitch, yaw):
    """Quaternion from roll (x), pitch (y) and yaw (z) angles."""
    cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
    cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
    cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
    return Quaternion(
        cr * cp * cy + sr * sp * sy,
        sr * cp * cy - cr * sp * sy,
        cr * sp * cy + sr * cp * sy,
        cr * cp * sy - sr * sp * cy,
    )


def quat_to_euler_angle(q):
    """Return ``(roll, pitch, yaw)`` of a unit quaternion."""
    q0, q1, q2, q3 = q
    roll = math.atan2(2 * (q0 * q1 + q2 * q3), 1 - 2 * (q1 * q1 + q2 * q2))
    t = 2 * (q0 * q2 - q1 * q3)
    pitch = -math.pi / 2 + 2 * math.atan2(math.sqrt(max(0.0, 1 + t)), math.sqrt(max(0.0, 1 - t)))
    yaw = math.atan2(2 * (q0 * q3 + q1 * q2), 1 - 2 * (q2 * q2 + q3 * q3))
    return roll, pitch, yaw


def quat_rotate_vec(q, v):
    """Rotate the 3-vector ``v`` by ``q``."""
    vq = Quaternion(0, v[0], v[1], v[2])
    return (q * vq * conjugate(q)).imag()


def conjugate(q):
    """Conjugate: the imaginary part negated."""
    r, i, j, k = q
    return Quaternion(r, -i, -j, -k)


def inverse(q):
    """Multiplicative inverse."""
    return conjugate(q) * (1.0 / q.norm2())