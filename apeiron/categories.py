"""Polytope categories, their counting properties and face-vertex connectivity."""

from __future__ import annotations

from enum import Enum

from apeiron.vector import Vector


class PolytopeCategory(Enum):
    """Known kinds of 2- and 3-polytopes."""

    # 2-polytopes
    TRIANGLE = "triangle"
    QUADRILATERAL = "quadrilateral"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    SEPTAGON = "septagon"
    OCTAGON = "octagon"
    ARBITRARY_2D = "arbitrary_2d"

    # 3-polytopes
    TETRAHEDRON = "tetrahedron"
    CUBOID = "cuboid"
    OCTAHEDRON = "octahedron"
    DODECAHEDRON = "dodecahedron"
    ICOSAHEDRON = "icosahedron"
    ARBITRARY_3D = "arbitrary_3d"


_C = PolytopeCategory

_DIMENSIONS = {
    _C.TRIANGLE: 2,
    _C.QUADRILATERAL: 2,
    _C.PENTAGON: 2,
    _C.HEXAGON: 2,
    _C.SEPTAGON: 2,
    _C.OCTAGON: 2,
    _C.ARBITRARY_2D: 2,
    _C.TETRAHEDRON: 3,
    _C.CUBOID: 3,
    _C.OCTAHEDRON: 3,
    _C.DODECAHEDRON: 3,
    _C.ICOSAHEDRON: 3,
    _C.ARBITRARY_3D: 3,
}

_VERTEX_COUNTS = {
    _C.TRIANGLE: 3,
    _C.QUADRILATERAL: 4,
    _C.PENTAGON: 5,
    _C.HEXAGON: 6,
    _C.SEPTAGON: 7,
    _C.OCTAGON: 8,
    _C.TETRAHEDRON: 4,
    _C.CUBOID: 8,
    _C.OCTAHEDRON: 6,
    _C.DODECAHEDRON: 20,
    _C.ICOSAHEDRON: 12,
}

_POLYHEDRON_FACE_COUNTS = {
    _C.TETRAHEDRON: 4,
    _C.CUBOID: 6,
    _C.OCTAHEDRON: 8,
    _C.DODECAHEDRON: 12,
    _C.ICOSAHEDRON: 20,
}

# Face-vertex connectivity in Gambit neutral ordering.
_POLYHEDRON_FACES: dict[PolytopeCategory, tuple[tuple[int, ...], ...]] = {
    _C.TETRAHEDRON: ((1, 0, 2), (0, 1, 3), (1, 2, 3), (2, 0, 3)),
    _C.CUBOID: (
        (0, 1, 5, 4),
        (1, 3, 7, 5),
        (3, 2, 6, 7),
        (2, 0, 4, 6),
        (1, 0, 2, 3),
        (4, 5, 7, 6),
    ),
    _C.OCTAHEDRON: (
        (0, 1, 4),
        (1, 3, 4),
        (3, 2, 4),
        (2, 0, 4),
        (1, 0, 5),
        (3, 1, 5),
        (2, 3, 5),
        (0, 2, 5),
    ),
    _C.DODECAHEDRON: (),
    _C.ICOSAHEDRON: (),
}


def _category(category: object) -> PolytopeCategory:
    if not isinstance(category, PolytopeCategory):
        raise TypeError(f"Expected a PolytopeCategory, got {category!r}.")
    return category


def polytope_dimension(category: PolytopeCategory) -> int:
    """Dimension of polytopes in ``category``."""
    return _DIMENSIONS[_category(category)]


def is_static_polytope(category: PolytopeCategory) -> bool:
    """Whether the category's vertex and face counts are fixed."""
    return _category(category) not in (_C.ARBITRARY_2D, _C.ARBITRARY_3D)


def is_dynamic_polytope(category: PolytopeCategory) -> bool:
    """Whether the category's vertex and face counts vary."""
    return not is_static_polytope(category)


def is_n_polytope(category: PolytopeCategory, n: int) -> bool:
    """Whether polytopes in ``category`` are ``n``-polytopes."""
    return polytope_dimension(category) == n


def polytope_vertex_count(category: PolytopeCategory) -> int:
    """Number of vertices of a polytope in a static category."""
    try:
        return _VERTEX_COUNTS[_category(category)]
    except KeyError:
        raise ValueError(
            "The vertex count cannot be determined for the given polytope category."
        ) from None


def polytope_face_count(category: PolytopeCategory) -> int:
    """Number of faces of a polytope in a static category."""
    if polytope_dimension(category) == 2 and is_static_polytope(category):
        return polytope_vertex_count(category)
    try:
        return _POLYHEDRON_FACE_COUNTS[category]
    except KeyError:
        raise ValueError(
            "The face count cannot be determined for the given polytope category."
        ) from None


def polytope_face_vertex_count(category: PolytopeCategory) -> int:
    """Size of the face entries reserved for a polytope in ``category``."""
    if polytope_dimension(category) == 2:
        return 2
    try:
        return _POLYHEDRON_FACE_COUNTS[category]
    except KeyError:
        raise ValueError(
            "The face vertex count cannot be determined for the given polytope category."
        ) from None


def polytope_faces(category: PolytopeCategory) -> tuple[tuple[int, ...], ...]:
    """Vertex indices of each face of a static polytope.

    Polygon faces are their edges; categories without known connectivity give no faces.
    """
    if not is_static_polytope(category):
        raise ValueError("The face vertices can only be determined for static polytopes.")
    if is_n_polytope(category, 2):
        n_faces = polytope_face_count(category)
        return tuple((i, (i + 1) % n_faces) for i in range(n_faces))
    return _POLYHEDRON_FACES[category]


class StaticPolytope:
    """A polytope whose vertex count and face connectivity are fixed by its category."""

    def __init__(self, category: PolytopeCategory, dim: int = 3) -> None:
        if not is_static_polytope(category):
            raise ValueError("The polytope's information must be known in advance.")
        if dim < polytope_dimension(category):
            raise ValueError("The ambient dimension is smaller than the polytope's dimension.")
        self.category = category
        self.dim = dim
        self.vertices: list[Vector] = [
            Vector.zeros(dim) for _ in range(polytope_vertex_count(category))
        ]
        self.faces: tuple[tuple[int, ...], ...] = polytope_faces(category)

    def __repr__(self) -> str:
        return f"StaticPolytope({self.category.name}, dim={self.dim})"


class DynamicPolytope:
    """A polytope of an arbitrary category with freely chosen vertices and faces."""

    def __init__(self, category: PolytopeCategory, dim: int = 3) -> None:
        if not is_dynamic_polytope(category):
            raise ValueError(
                "Use StaticPolytope when the polytope's information is known in advance."
            )
        if dim < polytope_dimension(category):
            raise ValueError("The ambient dimension is smaller than the polytope's dimension.")
        self.category = category
        self.dim = dim
        self.vertices: list[Vector] = []
        self.faces: list[list[int]] = []

    def __repr__(self) -> str:
        return f"DynamicPolytope({self.category.name}, dim={self.dim})"