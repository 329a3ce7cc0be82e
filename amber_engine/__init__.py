"""Game engine core: vector, matrix and quaternion maths, a typed data hierarchy, configuration, asset storage and input state."""

__version__ = "0.1.0"