import pytest

from apeiron.categories import (
    DynamicPolytope,
    PolytopeCategory,
    StaticPolytope,
    is_dynamic_polytope,
    is_n_polytope,
    is_static_polytope,
    polytope_dimension,
    polytope_face_count,
    polytope_face_vertex_count,
    polytope_faces,
    polytope_vertex_count,
)

C = PolytopeCategory
POLYGONS = [C.TRIANGLE, C.QUADRILATERAL, C.PENTAGON, C.HEXAGON, C.SEPTAGON, C.OCTAGON]
POLYHEDRA = [C.TETRAHEDRON, C.CUBOID, C.OCTAHEDRON, C.DODECAHEDRON, C.ICOSAHEDRON]


@pytest.mark.parametrize("category", POLYGONS + [C.ARBITRARY_2D])
def test_two_dimensional(category):
    assert polytope_dimension(category) == 2
    assert is_n_polytope(category, 2)
    assert not is_n_polytope(category, 3)


@pytest.mark.parametrize("category", POLYHEDRA + [C.ARBITRARY_3D])
def test_three_dimensional(category):
    assert polytope_dimension(category) == 3
    assert is_n_polytope(category, 3)


def test_static_and_dynamic():
    for category in C:
        assert is_static_polytope(category) != is_dynamic_polytope(category)
    assert is_dynamic_polytope(C.ARBITRARY_2D)
    assert is_dynamic_polytope(C.ARBITRARY_3D)
    assert is_static_polytope(C.CUBOID)


@pytest.mark.parametrize(
    "category, count",
    [
        (C.TRIANGLE, 3),
        (C.QUADRILATERAL, 4),
        (C.OCTAGON, 8),
        (C.TETRAHEDRON, 4),
        (C.CUBOID, 8),
        (C.OCTAHEDRON, 6),
        (C.DODECAHEDRON, 20),
        (C.ICOSAHEDRON, 12),
    ],
)
def test_vertex_count(category, count):
    assert polytope_vertex_count(category) == count


@pytest.mark.parametrize("category", [C.ARBITRARY_2D, C.ARBITRARY_3D])
def test_counts_of_arbitrary_raise(category):
    with pytest.raises(ValueError):
        polytope_vertex_count(category)
    with pytest.raises(ValueError):
        polytope_face_count(category)


@pytest.mark.parametrize("category", POLYGONS)
def test_polygon_face_counts_match_vertices(category):
    assert polytope_face_count(category) == polytope_vertex_count(category)
    assert polytope_face_vertex_count(category) == 2


@pytest.mark.parametrize(
    "category, count",
    [(C.TETRAHEDRON, 4), (C.CUBOID, 6), (C.OCTAHEDRON, 8), (C.DODECAHEDRON, 12), (C.ICOSAHEDRON, 20)],
)
def test_polyhedron_face_count(category, count):
    assert polytope_face_count(category) == count


@pytest.mark.parametrize("category", POLYGONS)
def test_polygon_faces_form_closed_loop(category):
    faces = polytope_faces(category)
    n = polytope_vertex_count(category)
    assert len(faces) == n
    assert faces[0][0] == 0
    assert faces[-1][1] == 0
    for first, second in zip(faces, faces[1:]):
        assert first[1] == second[0]


def test_tetrahedron_faces():
    assert polytope_faces(C.TETRAHEDRON) == ((1, 0, 2), (0, 1, 3), (1, 2, 3), (2, 0, 3))


@pytest.mark.parametrize("category", [C.TETRAHEDRON, C.CUBOID, C.OCTAHEDRON])
def test_polyhedron_faces_use_every_vertex(category):
    faces = polytope_faces(category)
    assert len(faces) == polytope_face_count(category)
    used = {index for face in faces for index in face}
    assert used == set(range(polytope_vertex_count(category)))


def test_faces_of_arbitrary_raise():
    with pytest.raises(ValueError):
        polytope_faces(C.ARBITRARY_3D)


def test_non_category_raises():
    with pytest.raises(TypeError):
        polytope_dimension("triangle")


def test_static_polytope():
    cube = StaticPolytope(C.CUBOID)
    assert len(cube.vertices) == polytope_vertex_count(C.CUBOID)
    assert all(len(v) == 3 for v in cube.vertices)
    assert cube.faces == polytope_faces(C.CUBOID)


def test_static_polytope_rejects_arbitrary():
    with pytest.raises(ValueError):
        StaticPolytope(C.ARBITRARY_2D)


def test_static_polytope_rejects_small_dimension():
    with pytest.raises(ValueError):
        StaticPolytope(C.CUBOID, dim=2)


def test_dynamic_polytope():
    shape = DynamicPolytope(C.ARBITRARY_2D, dim=2)
    assert shape.vertices == []
    assert shape.faces == []
    with pytest.raises(ValueError):
        DynamicPolytope(C.TRIANGLE)