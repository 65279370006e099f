import pytest

from polygraph.core.conformity import check_mesh_conformity
from polygraph.core.diagnostics import face_size_histogram, mesh_counts
from polygraph.core.errors import InvalidSelection, StructuralViolation
from polygraph.core.generators import cube, tetrahedron
from polygraph.core.naming import LabelFactory
from polygraph.core.operations import op_carve_edge, op_truncate, truncated


def test_truncate_single_cube_vertex():
    mesh = op_truncate(cube(), ['A'])
    assert mesh_counts(mesh) == (10, 15, 7)
    assert 'A' not in mesh
    assert mesh.find_face({'AB', 'AD', 'AE'}) == 6
    assert mesh.find_face({'AB', 'AD', 'B', 'C', 'D'}) == 0
    ok, msgs = check_mesh_conformity(mesh, require_manifold=True)
    assert ok, msgs


def test_truncated_cube():
    mesh = op_truncate(cube())
    assert mesh_counts(mesh) == (24, 36, 14)
    assert face_size_histogram(mesh) == {3: 8, 8: 6}
    ok, msgs = check_mesh_conformity(mesh, require_manifold=True)
    assert ok, msgs


def test_truncated_tetrahedron_keeps_original():
    original = tetrahedron()
    result = truncated(original)
    assert mesh_counts(result) == (12, 18, 8)
    assert face_size_histogram(result) == {3: 4, 6: 4}
    assert mesh_counts(original) == (4, 6, 4)


def test_truncate_labels_keep_vertex_first():
    mesh = op_truncate(cube(), ['C'])
    assert {'CB', 'CD', 'CG'} <= set(mesh.vertices())


def test_truncate_degree_two_vertex_rejected():
    mesh = op_carve_edge(cube(), 'A', 'B')
    before = mesh_counts(mesh)
    with pytest.raises(StructuralViolation, match="degree 2"):
        op_truncate(mesh, ['AB'])
    assert mesh_counts(mesh) == before


def test_truncate_unknown_vertex():
    with pytest.raises(InvalidSelection):
        op_truncate(cube(), ['Q'])


def test_truncate_opaque_labels_record_provenance():
    mesh = cube()
    mesh.labels = LabelFactory('opaque')
    op_truncate(mesh, ['A'])
    assert sorted(v for v in mesh.vertices() if v.startswith('v')) == ['v1', 'v2', 'v3']
    assert mesh.labels.origin('v1') == ('A', 'B')
    assert mesh.labels.roots('v3') == ['A', 'E']
