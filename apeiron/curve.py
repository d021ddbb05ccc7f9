"""Parametric curves: lines, rays, segments, segment chains, circles, arcs and ellipses."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from apeiron.vector import Vector, cross_product, magnitude, to_vector

_TWO_PI = 2.0 * math.pi


def _inverse(value: float) -> float:
    return math.inf if value == 0 else 1.0 / value


def _in_closed(value: float, low: float, high: float) -> bool:
    return low <= value <= high


def _ellipse_perimeter(a: float, b: float) -> float:
    """Exact perimeter of an ellipse via the arithmetic-geometric mean."""
    if a == b:
        return _TWO_PI * a
    an, bn = a, b
    total = 0.5 * (a * a - b * b)
    power = 0.5
    while abs(an - bn) > 1e-15 * an:
        cn = 0.5 * (an - bn)
        an, bn = 0.5 * (an + bn), math.sqrt(an * bn)
        power *= 2.0
        total += power * cn * cn
    return _TWO_PI / an * (a * a - total)


class Curve(ABC):
    """A curve embedded in an ambient Euclidean space."""

    def __init__(self) -> None:
        self._unit_speed = False

    @abstractmethod
    def point(self, t: float) -> Vector:
        """Point on the curve at parameter ``t``."""

    @abstractmethod
    def length(self) -> float:
        """Total length of the curve."""

    def binormal(self, tangent: Sequence[float], normal: Sequence[float]) -> Vector:
        """Cross product of a tangent and a normal."""
        return cross_product(tangent, normal)

    def make_unit_speed(self) -> None:
        """Parametrise the curve by arc length."""
        self._unit_speed = True

    @property
    def unit_speed(self) -> bool:
        """Whether the curve is parametrised by arc length."""
        return self._unit_speed


class Line(Curve):
    """An infinite line through ``point`` along ``direction``."""

    def __init__(self, direction: Sequence[float], point: Sequence[float] | None = None) -> None:
        super().__init__()
        self.direction = Vector(direction)
        self.start = Vector(point) if point is not None else Vector.zeros(len(self.direction))
        if len(self.start) != len(self.direction):
            raise ValueError("The direction and the point must have the same dimension.")
        self._direction_norm = magnitude(self.direction)
        self._normaliser = _inverse(self._direction_norm)

    def _scale(self) -> float:
        return self._normaliser if self._unit_speed else 1.0

    def point(self, t: float) -> Vector:
        return self.start + t * self._scale() * self.direction

    def tangent(self, t: float) -> Vector:
        """Tangent vector, the same at every parameter."""
        return self._scale() * self.direction

    def length(self) -> float:
        return math.inf


class Ray(Line):
    """A half-line starting at ``start`` along ``direction``."""

    def __init__(self, direction: Sequence[float], start: Sequence[float] | None = None) -> None:
        super().__init__(direction, start)

    def point(self, t: float) -> Vector:
        if t < 0:
            raise ValueError("The parameter must be positive for rays.")
        return super().point(t)


class LineSegment(Line):
    """The straight segment from ``start`` to ``end``."""

    def __init__(self, start: Sequence[float], end: Sequence[float]) -> None:
        start_vector = Vector(start)
        super().__init__(Vector(end) - start_vector, start_vector)

    def point(self, t: float) -> Vector:
        max_bound = self.length() if self._unit_speed else 1.0
        if not _in_closed(t, 0.0, max_bound):
            raise ValueError(f"The parameter must be in the range [0, {max_bound}] for this segment.")
        return super().point(t)

    def length(self) -> float:
        return self._direction_norm


class LineSegmentChain(Curve):
    """A polyline through ``vertices``, optionally closed back to the first vertex."""

    def __init__(self, vertices: Iterable[Sequence[float]], closed: bool = False) -> None:
        super().__init__()
        points = [Vector(v) for v in vertices]
        if len(points) < 2:
            raise ValueError("A segment chain needs at least two vertices.")
        self.closed = closed
        count = len(points) if closed else len(points) - 1
        self._segments: list[LineSegment] = []
        self._cumulative_lengths: list[float] = []
        self._chain_length = 0.0
        for i in range(count):
            segment = LineSegment(points[i], points[(i + 1) % len(points)])
            segment.make_unit_speed()
            self._segments.append(segment)
            self._chain_length += segment.length()
            self._cumulative_lengths.append(self._chain_length)

    def point(self, t: float) -> Vector:
        upper_bound = self._chain_length if self._unit_speed else 1.0
        if not _in_closed(t, 0.0, upper_bound):
            raise ValueError(f"The parameter must be in the range [0, {upper_bound}] for this segment.")
        param_length = t * (1.0 if self._unit_speed else self._chain_length)
        index = next(
            (i for i, cumulative in enumerate(self._cumulative_lengths) if param_length <= cumulative),
            len(self._cumulative_lengths) - 1,
        )
        previous = self._cumulative_lengths[index - 1] if index else 0.0
        param = param_length - previous
        segment = self._segments[index]
        tolerance = 1e-9 * max(1.0, self._chain_length)
        if not _in_closed(param, -tolerance, segment.length() + tolerance):
            raise ValueError(f"The parameter for segment {index} in the chain is out of bounds.")
        return segment.point(min(max(param, 0.0), segment.length()))

    def length(self) -> float:
        return self._chain_length


class Circle(Curve):
    """A circle of ``radius`` about ``centre``, starting at ``start_angle``."""

    def __init__(
        self,
        radius: float,
        centre: Sequence[float] | None = None,
        start_angle: float = 0.0,
        dim: int = 2,
    ) -> None:
        super().__init__()
        if radius < 0:
            raise ValueError("A circle's radius cannot be negative.")
        self.centre = Vector(centre) if centre is not None else Vector.zeros(dim)
        self.radius = radius
        self.start_angle = start_angle
        self._normaliser = _inverse(radius)
        self._length = _TWO_PI * radius

    def _embed(self, x: float, y: float) -> Vector:
        return to_vector([x, y, 0.0], len(self.centre))

    def point(self, t: float) -> Vector:
        max_bound = _TWO_PI * self.radius if self._unit_speed else 1.0
        if not _in_closed(t, 0.0, max_bound):
            raise ValueError("The parameter exceeds the expected bounds.")
        theta = self.angle(t)
        return self._embed(self.radius * math.cos(theta), self.radius * math.sin(theta)) + self.centre

    def tangent(self, t: float) -> Vector:
        """Tangent vector at parameter ``t``."""
        theta = self.angle(t)
        return self._embed(-self.radius * math.sin(theta), self.radius * math.cos(theta))

    def normal(self, t: float) -> Vector:
        """Inward normal vector at parameter ``t``."""
        theta = self.angle(t)
        return self._embed(-self.radius * math.cos(theta), -self.radius * math.sin(theta))

    def length(self) -> float:
        return self._length

    def angle(self, t: float) -> float:
        """Polar angle reached at parameter ``t``."""
        return self.start_angle + t * (self._normaliser if self._unit_speed else _TWO_PI)


class Arc(Circle):
    """A circular arc between two angles in [0, 2*pi].

    With ``end_angle`` omitted, ``start_angle`` is the end angle and the arc starts at zero.
    """

    def __init__(
        self,
        radius: float,
        start_angle: float,
        end_angle: float | None = None,
        centre: Sequence[float] | None = None,
        dim: int = 2,
    ) -> None:
        if end_angle is None:
            start_angle, end_angle = 0.0, start_angle
        super().__init__(radius, centre, start_angle, dim)
        if not _in_closed(start_angle, 0.0, _TWO_PI):
            raise ValueError("An arc's start angle must be in the range [0, 2*PI].")
        if not _in_closed(end_angle, 0.0, _TWO_PI):
            raise ValueError("An arc's end angle must be in the range [0, 2*PI].")
        self.end_angle = end_angle
        self._length = radius * abs(end_angle - start_angle)

    def point(self, t: float) -> Vector:
        self.check_angle(t)
        return super().point(t)

    def tangent(self, t: float) -> Vector:
        self.check_angle(t)
        return super().tangent(t)

    def normal(self, t: float) -> Vector:
        self.check_angle(t)
        return super().normal(t)

    def check_angle(self, t: float) -> None:
        """Raise ValueError if ``t`` maps outside the arc's angle range."""
        theta = self.angle(t)
        low, high = sorted((self.start_angle, self.end_angle))
        if not _in_closed(theta, low, high):
            raise ValueError(
                f"The computed angle {theta} lies outside the min/max angle range [{low}, {high}] of the arc."
            )


class Ellipse(Curve):
    """An axis-aligned ellipse about ``centre``."""

    def __init__(
        self,
        radius_x: float,
        radius_y: float,
        centre: Sequence[float] | None = None,
        dim: int = 2,
    ) -> None:
        super().__init__()
        if radius_x < 0 or radius_y < 0:
            raise ValueError("An ellipse's radii cannot be negative.")
        self.centre = Vector(centre) if centre is not None else Vector.zeros(dim)
        self.radius_x = radius_x
        self.radius_y = radius_y
        self._length = _ellipse_perimeter(max(radius_x, radius_y), min(radius_x, radius_y))

    def point(self, t: float) -> Vector:
        embedded = to_vector([self.radius_x * math.cos(t), self.radius_y * math.sin(t), 0.0], len(self.centre))
        return embedded + self.centre

    def length(self) -> float:
        return self._length