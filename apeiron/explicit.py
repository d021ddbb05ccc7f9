"""Explicit functions from R to R and from R to R^n."""

from __future__ import annotations

import math
from collections.abc import Sequence

from apeiron.vector import Vector


def linear(x: float, c0: float, c1: float) -> float:
    """``c0 + c1 x``."""
    return c0 + c1 * x


def quadratic(x: float, c0: float, c1: float, c2: float) -> float:
    """``c0 + c1 x + c2 x^2``."""
    return c0 + c1 * x + c2 * x * x


def cubic(x: float, c0: float, c1: float, c2: float, c3: float) -> float:
    """``c0 + c1 x + c2 x^2 + c3 x^3``."""
    return c0 + c1 * x + c2 * x * x + c3 * x * x * x


def ellipse(radii: Sequence[float], theta: float) -> Vector:
    """Point on an axis-aligned ellipse at angle ``theta``."""
    return Vector([radii[0] * math.cos(theta), radii[1] * math.sin(theta)])


def circle(radius: float, theta: float) -> Vector:
    """Point on a circle about the origin at angle ``theta``."""
    return ellipse((radius, radius), theta)


def ellipsoid(radii: Sequence[float], theta: float, phi: float) -> Vector:
    """Point on an axis-aligned ellipsoid at azimuth ``theta`` and polar angle ``phi``."""
    return Vector([
        radii[0] * math.cos(theta) * math.sin(phi),
        radii[1] * math.sin(theta) * math.sin(phi),
        radii[2] * math.cos(phi),
    ])


def sphere(radius: float, theta: float, phi: float) -> Vector:
    """Point on a sphere about the origin at azimuth ``theta`` and polar angle ``phi``."""
    return ellipsoid((radius, radius, radius), theta, phi)