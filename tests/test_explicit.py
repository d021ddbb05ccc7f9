import math

import pytest

from apeiron.explicit import (
    circle,
    cubic,
    ellipse,
    ellipsoid,
    linear,
    quadratic,
    sphere,
)
from apeiron.vector import Vector, magnitude

XS = [-3.5, -1.0, 0.0, 0.25, 2.0, 7.75]
ANGLES = [0.0, 0.3, math.pi / 4, 1.7, math.pi, 5.1]


def test_linear_at_zero_is_constant_term():
    assert linear(0.0, 2.5, -4.0) == 2.5


@pytest.mark.parametrize("x", XS)
def test_linear_slope_is_c1(x):
    assert linear(x + 1.0, 2.5, -4.0) - linear(x, 2.5, -4.0) == pytest.approx(-4.0)


@pytest.mark.parametrize("x", XS)
def test_quadratic_without_square_term_is_linear(x):
    assert quadratic(x, 1.5, 3.0, 0.0) == pytest.approx(linear(x, 1.5, 3.0))


@pytest.mark.parametrize("x", XS)
def test_cubic_without_cube_term_is_quadratic(x):
    assert cubic(x, 1.5, 3.0, -2.0, 0.0) == pytest.approx(quadratic(x, 1.5, 3.0, -2.0))


def test_polynomials_at_zero():
    assert quadratic(0.0, 6.0, 1.0, 1.0) == 6.0
    assert cubic(0.0, -2.0, 1.0, 1.0, 1.0) == -2.0


def test_ellipse_at_axes():
    radii = (3.0, 2.0)
    assert ellipse(radii, 0.0) == Vector([3.0, 0.0])
    top = ellipse(radii, math.pi / 2)
    assert top[0] == pytest.approx(0.0, abs=1e-12)
    assert top[1] == pytest.approx(2.0)


@pytest.mark.parametrize("theta", ANGLES)
def test_ellipse_satisfies_its_equation(theta):
    p = ellipse((3.0, 2.0), theta)
    assert len(p) == 2
    assert (p[0] / 3.0) ** 2 + (p[1] / 2.0) ** 2 == pytest.approx(1.0)


@pytest.mark.parametrize("theta", ANGLES)
def test_circle_lies_at_radius(theta):
    assert magnitude(circle(4.0, theta)) == pytest.approx(4.0)


@pytest.mark.parametrize("theta", ANGLES)
def test_circle_is_ellipse_with_equal_radii(theta):
    assert circle(1.5, theta) == ellipse((1.5, 1.5), theta)


def test_ellipsoid_pole():
    p = ellipsoid((3.0, 2.0, 5.0), 0.7, 0.0)
    assert p == Vector([0.0, 0.0, 5.0])


@pytest.mark.parametrize("theta", ANGLES)
@pytest.mark.parametrize("phi", [0.2, 1.0, 2.5])
def test_ellipsoid_satisfies_its_equation(theta, phi):
    p = ellipsoid((3.0, 2.0, 5.0), theta, phi)
    assert len(p) == 3
    assert (p[0] / 3.0) ** 2 + (p[1] / 2.0) ** 2 + (p[2] / 5.0) ** 2 == pytest.approx(1.0)


@pytest.mark.parametrize("theta", ANGLES)
@pytest.mark.parametrize("phi", [0.2, 1.0, 2.5])
def test_sphere_lies_at_radius(theta, phi):
    assert magnitude(sphere(2.5, theta, phi)) == pytest.approx(2.5)


@pytest.mark.parametrize("theta", ANGLES)
def test_sphere_is_ellipsoid_with_equal_radii(theta):
    assert sphere(2.5, theta, 1.1) == ellipsoid((2.5, 2.5, 2.5), theta, 1.1)