"""Fixed-size mathematical vectors and the functions that work on them."""

import math
from collections.abc import Iterable
from numbers import Number


def _fmt(value):
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class Vector:
    """A mutable vector of numeric components.

    Build it from components, ``Vector(1, 2, 3)``, or from one iterable,
    ``Vector([1, 2, 3])``.
    """

    __slots__ = ("_components",)

    def __init__(self, *args):
        if len(args) == 1 and isinstance(args[0], Iterable) and not isinstance(args[0], (str, bytes)):
            self._components = list(args[0])
        else:
            self._components = list(args)

    def __len__(self):
        return len(self._components)

    def __iter__(self):
        return iter(self._components)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self._components[index])
        return self._components[index]

    def __setitem__(self, index, value):
        self._components[index] = value

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._components == other._components

    __hash__ = None

    def _combine(self, other, op):
        if isinstance(other, Vector):
            if len(other) != len(self):
                raise ValueError(f"vector sizes differ: {len(self)} and {len(other)}")
            return Vector(op(a, b) for a, b in zip(self, other))
        if isinstance(other, Number):
            return Vector(op(a, other) for a in self)
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._combine(other, lambda a, b: b + a)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __rsub__(self, other):
        """Scalar minus vector subtracts the scalar from every component."""
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other):
        """Scalar product, or component-wise product with another vector."""
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._combine(other, lambda a, b: b * a)

    def __truediv__(self, other):
        return self._combine(other, lambda a, b: a / b)

    def __neg__(self):
        return Vector(-a for a in self)

    def __repr__(self):
        return f"Vector({', '.join(repr(c) for c in self)})"

    def __str__(self):
        return f"Vec[{len(self)}]({', '.join(_fmt(c) for c in self)})"

    def norm2(self):
        """Squared Euclidean length."""
        return sum(c * c for c in self)

    def norm(self):
        """Euclidean length."""
        return math.sqrt(self.norm2())

    def normalize(self):
        """Scale this vector in place to unit length."""
        length = self.norm()
        self._components = [c / length for c in self._components]


def _same_size(v1, v2):
    if len(v1) != len(v2):
        raise ValueError(f"vector sizes differ: {len(v1)} and {len(v2)}")


def normalize(vec):
    """Return a unit-length copy of ``vec``."""
    result = Vector(vec)
    result.normalize()
    return result


def component_sum(v):
    """Sum of all components."""
    return sum(v, 0)


def merge(v1, v2):
    """Concatenate two vectors."""
    return Vector([*v1, *v2])


def append(v, value):
    """Return ``v`` with ``value`` added at the end."""
    return Vector([*v, value])


def insert(v, value, index):
    """Return ``v`` with ``value`` inserted before position ``index``."""
    if not 0 <= index <= len(v):
        raise IndexError(f"insert index {index} out of range for size {len(v)}")
    items = list(v)
    items.insert(index, value)
    return Vector(items)


def remove(v, index):
    """Return ``v`` without the component at ``index``."""
    if not 0 <= index < len(v):
        raise IndexError(f"remove index {index} out of range for size {len(v)}")
    items = list(v)
    del items[index]
    return Vector(items)


def sub_vector(v, first, last):
    """Components ``first`` to ``last``, both included."""
    if not 0 <= first <= last < len(v):
        raise IndexError(f"sub-vector [{first}, {last}] out of range for size {len(v)}")
    return Vector(list(v)[first:last + 1])


def dot(v1, v2):
    """Dot product."""
    _same_size(v1, v2)
    return sum((a * b for a, b in zip(v1, v2)), 0)


def cross(v1, v2):
    """Cross product: a scalar for 2-vectors, a vector for 3-vectors."""
    _same_size(v1, v2)
    if len(v1) == 2:
        return v1[0] * v2[1] - v1[1] * v2[0]
    if len(v1) == 3:
        return Vector(
            v1[1] * v2[2] - v1[2] * v2[1],
            v1[2] * v2[0] - v1[0] * v2[2],
            v1[0] * v2[1] - v1[1] * v2[0],
        )
    raise ValueError("cross product needs vectors of size 2 or 3")


def angle(v1, v2):
    """Angle between two 2- or 3-vectors (signed for 2-vectors)."""
    c = cross(v1, v2)
    if isinstance(c, Vector):
        return math.atan2(c.norm(), dot(v1, v2))
    return math.atan2(c, dot(v1, v2))


def polar(v):
    """Polar form ``(radius, theta)`` of a 2-vector."""
    return v.norm(), math.atan2(v[1], v[0])


def cylindrical(v):
    """Cylindrical form ``(radius, theta, z)`` of a 3-vector."""
    return math.sqrt(v[0] * v[0] + v[1] * v[1]), math.atan2(v[1], v[0]), v[2]


def spherical(v):
    """Spherical form ``(radius, theta, phi)`` of a 3-vector."""
    radius = v.norm()
    theta = math.atan2(math.sqrt(v[0] * v[0] + v[1] * v[1]), v[2])
    phi = math.atan2(v[1], v[0])
    return radius, theta, phi


def distance(v1, v2):
    """Euclidean distance between two vectors."""
    return (v1 - v2).norm()


def reflect(incident, surface_normal):
    """Reflect ``incident`` about the (normalised) surface normal."""
    n = normalize(surface_normal)
    return incident - 2 * dot(incident, n) * n


def refract(incident, surface_normal, n1, n2):
    """Refract ``incident`` through a surface with indices ``n1`` and ``n2``."""
    n = normalize(surface_normal)
    eta = n1 / n2
    d = dot(n, incident)
    return math.sqrt(1 - eta * eta * (1 - d * d)) * n + eta * (incident - d * n)


def face_same_direction(v1, v2):
    """True when the dot product of the two vectors is positive."""
    return dot(v1, v2) > 0


def cast(v, kind):
    """Convert each component with ``kind``, e.g. ``int`` or ``float``."""
    return Vector(kind(c) for c in v)


def vmin(v, other=None):
    """Smallest component, or component-wise minimum with a scalar or vector."""
    if other is None:
        return min(v)
    if isinstance(other, Vector):
        _same_size(v, other)
        return Vector(b if b < a else a for a, b in zip(v, other))
    return Vector(other if other < a else a for a in v)


def vmax(v, other=None):
    """Largest component, or component-wise maximum with a scalar or vector."""
    if other is None:
        return max(v)
    if isinstance(other, Vector):
        _same_size(v, other)
        return Vector(b if b > a else a for a, b in zip(v, other))
    return Vector(other if other > a else a for a in v)


def vabs(v):
    """Component-wise absolute value."""
    return Vector(-a if a < 0 else a for a in v)


def sign(v):
    """Component-wise sign: -1, 0 or 1."""
    return Vector(-1 if a < 0 else 1 if a > 0 else 0 for a in v)