import pytest

from polygraph.core import generators as gen
from polygraph.core.conformity import check_mesh_conformity
from polygraph.core.diagnostics import degree_histogram, euler_characteristic, face_size_histogram, mesh_counts


@pytest.mark.parametrize("build, counts", [
    (gen.tetrahedron, (4, 6, 4)),
    (gen.cube, (8, 12, 6)),
    (gen.octahedron, (6, 12, 8)),
    (lambda: gen.prism(5), (10, 15, 7)),
    (lambda: gen.pyramid(5), (6, 10, 6)),
    (lambda: gen.antiprism(5), (10, 20, 12)),
    (lambda: gen.bipyramid(5), (7, 15, 10)),
    (lambda: gen.trapezohedron(5), (12, 20, 10)),
    (lambda: gen.cupola(5), (15, 25, 12)),
    (lambda: gen.rotunda(5), (20, 35, 17)),
    (lambda: gen.elongated_pyramid(4), (9, 16, 9)),
    (lambda: gen.elongated_bipyramid(5), (12, 25, 15)),
    (lambda: gen.gyroelongated_bipyramid(5), (12, 30, 20)),
    (gen.regular_dodecahedron, (20, 30, 12)),
    (gen.regular_icosahedron, (12, 30, 20)),
    (gen.cucurbituril, (50, 65, 17)),
])
def test_generator_counts_and_invariants(build, counts):
    mesh = build()
    assert mesh_counts(mesh) == counts
    assert euler_characteristic(mesh) == 2
    ok, msgs = check_mesh_conformity(mesh)
    assert ok, msgs


def test_truncated_icosahedron():
    mesh = gen.truncated_icosahedron()
    assert mesh_counts(mesh) == (60, 90, 32)
    assert face_size_histogram(mesh) == {5: 12, 6: 20}
    assert degree_histogram(mesh) == {3: 60}


def test_regular_solids_are_regular():
    assert face_size_histogram(gen.regular_dodecahedron()) == {5: 12}
    assert degree_histogram(gen.regular_dodecahedron()) == {3: 20}
    assert degree_histogram(gen.regular_icosahedron()) == {5: 12}


def test_cupola_top_face_vertices_come_from_contractions():
    mesh = gen.cupola(5)
    top = mesh.face_list[0]
    assert top.sorted_members() == ['AB', 'CD', 'EF', 'GH', 'IJ']
    assert face_size_histogram(mesh) == {3: 5, 4: 5, 5: 1, 10: 1}


def test_bipyramid_centre_named_after_base():
    mesh = gen.bipyramid(4)
    assert 'BCDE' in mesh
    assert mesh.degree('BCDE') == 4


def test_labels_switch_to_two_letters():
    mesh = gen.prism(14)
    assert mesh.vertices()[:3] == ['AA', 'AB', 'AC']


@pytest.mark.parametrize("name, number", [
    ('pentagonal', 5), ('pentagon', 5), ('penta', 5), ('Hexagonal', 6), ('icosagon', 20),
    ('blob', None), ('gonal', None),
])
def test_polygon_number(name, number):
    assert gen.polygon_number(name) == number


def test_sizes_accept_polygon_names():
    assert mesh_counts(gen.prism('pentagonal')) == (10, 15, 7)
    assert mesh_counts(gen.make('cupola', 'pentagonal')) == (15, 25, 12)


@pytest.mark.parametrize("bad", [2, 0, -1, 'digonal', 'blob', 3.0])
def test_invalid_sizes(bad):
    with pytest.raises(ValueError):
        gen.prism(bad)


def test_make_unknown_family():
    with pytest.raises(ValueError, match="unknown polyhedron family"):
        gen.make('hyperprism', 4)
