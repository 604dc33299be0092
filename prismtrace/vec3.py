"""
Three-component vector type.

One class serves as:
- Points in 3D space
- Direction vectors
- RGB color values
"""

from __future__ import annotations
from typing import Union
import numpy as np


class Vec3:
    """A 3D vector value type.

    Uses numpy internally for the component storage while providing
    a clean, Pythonic API. Every operation returns a new vector.
    """

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Wrap an existing 3-element array without copying its values."""
        v = cls.__new__(cls)
        v._data = np.asarray(arr, dtype=np.float64)
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    # Aliases for color operations
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.allclose(self._data, other._data))

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    # Vec3 operands combine component-wise, scalars broadcast
    def __add__(self, other: Union[Vec3, float]) -> Vec3:
        return Vec3.from_array(self._data + _operand(other))

    def __radd__(self, other: float) -> Vec3:
        return Vec3.from_array(_operand(other) + self._data)

    def __sub__(self, other: Union[Vec3, float]) -> Vec3:
        return Vec3.from_array(self._data - _operand(other))

    def __rsub__(self, other: float) -> Vec3:
        return Vec3.from_array(_operand(other) - self._data)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        return Vec3.from_array(self._data * _operand(other))

    def __rmul__(self, other: float) -> Vec3:
        return Vec3.from_array(_operand(other) * self._data)

    def __truediv__(self, other: Union[Vec3, float]) -> Vec3:
        return Vec3.from_array(self._data / _operand(other))

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def length(self) -> float:
        """Euclidean length."""
        return float(np.sqrt(np.dot(self._data, self._data)))

    def length_squared(self) -> float:
        return float(np.dot(self._data, self._data))

    def normalize(self) -> Vec3:
        """Return a unit vector in the same direction.

        A zero-length vector normalizes to the zero vector rather than NaN.
        """
        length = self.length()
        if length == 0:
            return Vec3(0, 0, 0)
        return Vec3.from_array(self._data / length)

    def dot(self, other: Vec3) -> float:
        return float(np.dot(self._data, other._data))

    def cross(self, other: Vec3) -> Vec3:
        """Compute the right-handed cross product with another vector."""
        return Vec3.from_array(np.cross(self._data, other._data))

    def reflect(self, normal: Vec3) -> Vec3:
        """Mirror this direction about a unit normal."""
        return self - normal * (2 * self.dot(normal))

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()

    def clamp(self, min_val: float = 0.0, max_val: float = 1.0) -> Vec3:
        """Clamp all components to the given range."""
        return Vec3.from_array(np.clip(self._data, min_val, max_val))


def _operand(value: Union[Vec3, float]):
    """Unwrap a Vec3 to its array so numpy handles both vectors and scalars."""
    return value._data if isinstance(value, Vec3) else value


# Convenience type aliases
Point3 = Vec3
Color = Vec3
