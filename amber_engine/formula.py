"""Scalar helpers: fade curves, interpolation and a centred sigmoid."""

import math

# Component indices.
X = 0
Y = 1
Z = 2
W = 3

PI = math.pi
PI_2 = 0.5 * PI
PI_4 = 0.25 * PI


def fade_function_3(t):
    """Cubic smoothstep curve 3t^2 - 2t^3."""
    return 3 * t * t - 2 * t * t * t


def fade_function_5(t):
    """Quintic smootherstep curve 6t^5 - 15t^4 + 10t^3."""
    return 6 * t ** 5 - 15 * t ** 4 + 10 * t ** 3


def linear_interpolation(a, b, t):
    """Blend ``a`` and ``b``: ``t == 1`` gives ``a`` and ``t == 0`` gives ``b``."""
    return a * t + b * (1.0 - t)


def inverse_linear_interpolation(a, b, v):
    """Position of ``v`` between ``a`` (0) and ``b`` (1)."""
    return (v - a) / (b - a)


def cubic_interpolation(a, b, t):
    """Interpolate from ``a`` to ``b`` along the cubic fade curve."""
    fade = fade_function_3(t)
    return (1.0 - fade) * a + fade * b


def quintic_interpolation(a, b, t):
    """Interpolate from ``a`` to ``b`` along the quintic fade curve."""
    fade = fade_function_5(t)
    return (1.0 - fade) * a + fade * b


def sigmoid(x):
    """Sigmoid rescaled to the open interval (-1, 1)."""
    return 2 / (1 + math.exp(-x)) - 1