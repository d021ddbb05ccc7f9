"""Numeric vectors and the common operations on them."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Callable, Union, overload

Scalar = Union[int, float]

_EPS = 1e-12


def _is_equal(a: float, b: float) -> bool:
    return abs(a - b) <= _EPS * max(1.0, abs(a), abs(b))


class Vector(Sequence):
    """A fixed-length vector of numbers with element-wise arithmetic."""

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[Scalar] = ()) -> None:
        self._data: list[Scalar] = list(values)

    @classmethod
    def zeros(cls, size: int) -> Vector:
        """A vector of ``size`` real zeros."""
        return cls([0.0] * size)

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._data)

    @overload
    def __getitem__(self, index: int) -> Scalar: ...

    @overload
    def __getitem__(self, index: slice) -> Vector: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self._data[index])
        return self._data[index]

    def __setitem__(self, index: int, value: Scalar) -> None:
        self._data[index] = value

    def __repr__(self) -> str:
        return f"Vector({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self._data == other._data
        return NotImplemented

    # Named components

    @property
    def x(self) -> Scalar:
        """First component."""
        return self._data[0]

    @x.setter
    def x(self, value: Scalar) -> None:
        self._data[0] = value

    @property
    def y(self) -> Scalar:
        """Second component."""
        return self._data[1]

    @y.setter
    def y(self, value: Scalar) -> None:
        self._data[1] = value

    @property
    def z(self) -> Scalar:
        """Third component."""
        return self._data[2]

    @z.setter
    def z(self, value: Scalar) -> None:
        self._data[2] = value

    # Arithmetic

    def _combine(self, other: Any, op: Callable[[Any, Any], Any], reflected: bool = False):
        if isinstance(other, Vector):
            if len(other) != len(self):
                raise ValueError(
                    f"Vector sizes differ: {len(self)} and {len(other)}."
                )
            pairs = zip(other._data, self._data) if reflected else zip(self._data, other._data)
            return [op(a, b) for a, b in pairs]
        if isinstance(other, numbers.Real):
            if reflected:
                return [op(other, a) for a in self._data]
            return [op(a, other) for a in self._data]
        return NotImplemented

    def _binary(self, other, op, reflected=False):
        result = self._combine(other, op, reflected)
        if result is NotImplemented:
            return result
        return Vector(result)

    def _inplace(self, other, op):
        result = self._combine(other, op)
        if result is NotImplemented:
            return result
        self._data = result
        return self

    def __add__(self, other):
        return self._binary(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._binary(other, lambda a, b: a + b, reflected=True)

    def __sub__(self, other):
        return self._binary(other, lambda a, b: a - b)

    def __rsub__(self, other):
        return self._binary(other, lambda a, b: a - b, reflected=True)

    def __mul__(self, other):
        return self._binary(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._binary(other, lambda a, b: a * b, reflected=True)

    def __truediv__(self, other):
        return self._binary(other, lambda a, b: a / b)

    def __rtruediv__(self, other):
        return self._binary(other, lambda a, b: a / b, reflected=True)

    def __iadd__(self, other):
        return self._inplace(other, lambda a, b: a + b)

    def __isub__(self, other):
        return self._inplace(other, lambda a, b: a - b)

    def __imul__(self, other):
        return self._inplace(other, lambda a, b: a * b)

    def __itruediv__(self, other):
        return self._inplace(other, lambda a, b: a / b)

    def __neg__(self) -> Vector:
        return Vector(-a for a in self._data)

    def __pos__(self) -> Vector:
        return Vector(self._data)


X_AXIS2 = Vector([1.0, 0.0])
Y_AXIS2 = Vector([0.0, 1.0])
X_AXIS3 = Vector([1.0, 0.0, 0.0])
Y_AXIS3 = Vector([0.0, 1.0, 0.0])
Z_AXIS3 = Vector([0.0, 0.0, 1.0])


def to_vector(vector: Sequence[Scalar], n: int) -> Vector:
    """Truncate or zero-pad ``vector`` to ``n`` components."""
    head = list(vector)[:n]
    return Vector(head + [0.0] * (n - len(head)))


def inner_product(v0: Sequence[Scalar], v1: Sequence[Scalar]) -> Scalar:
    """Dot product of two vectors of equal size."""
    if len(v0) != len(v1):
        raise ValueError(f"Vector sizes differ: {len(v0)} and {len(v1)}.")
    return sum((a * b for a, b in zip(v0, v1)), 0)


def cross_product(v0: Sequence[Scalar], v1: Sequence[Scalar]) -> Vector:
    """Cross product of two 2D or 3D vectors, always returned in 3D."""
    if len(v0) != len(v1) or len(v0) not in (2, 3):
        raise ValueError("Cross products can only be computed for 2D or 3D vectors.")
    if len(v0) == 2:
        return Vector([0.0, 0.0, v0[0] * v1[1] - v0[1] * v1[0]])
    return Vector([
        v0[1] * v1[2] - v0[2] * v1[1],
        v0[2] * v1[0] - v0[0] * v1[2],
        v0[0] * v1[1] - v0[1] * v1[0],
    ])


def l1_norm(v: Sequence[Scalar]) -> Scalar:
    """Sum of the entries of ``v``."""
    return sum(v, 0)


def l2_norm(v: Sequence[Scalar]) -> float:
    """Euclidean norm of ``v``."""
    return math.sqrt(inner_product(v, v))


def linf_norm(v: Sequence[Scalar]) -> Scalar:
    """Largest entry of ``v``."""
    return max(v)


def magnitude(v: Sequence[Scalar]) -> float:
    """Euclidean length of ``v``."""
    return l2_norm(v)


def is_normalised(v: Sequence[Scalar]) -> bool:
    """Whether ``v`` has unit length."""
    return _is_equal(magnitude(v), 1.0)


def normalise(v: Sequence[Scalar]) -> Vector:
    """``v`` scaled to unit length."""
    magn = magnitude(v)
    if _is_equal(magn, 0.0):
        raise ValueError("Cannot normalise a vector of zero magnitude.")
    return Vector(v) / magn


def compute_angle(
    v0: Sequence[Scalar],
    v1: Sequence[Scalar],
    oriented: bool = False,
    orient: Sequence[Scalar] = Z_AXIS3,
) -> float:
    """Angle between two vectors, signed about ``orient`` when ``oriented``."""
    cosine = inner_product(normalise(v0), normalise(v1))
    small_angle = math.acos(max(-1.0, min(1.0, cosine)))
    if not oriented:
        return small_angle
    # A zero orientation counts as positive.
    if inner_product(cross_product(v0, v1), orient) < 0:
        return -small_angle
    return small_angle


def is_aligned(
    v0: Sequence[Scalar],
    v1: Sequence[Scalar],
    angle_thresh: float = math.pi / 12,
) -> bool:
    """Whether two vectors are parallel or anti-parallel within ``angle_thresh``."""
    if not 0.0 < angle_thresh < math.pi / 2:
        raise ValueError("Angle threshold is out of bounds.")
    angle = compute_angle(v0, v1)
    return angle < angle_thresh or angle > math.pi - angle_thresh