import pytest

from polygraph.core.conformity import check_mesh_conformity
from polygraph.core.diagnostics import face_size_histogram, mesh_counts
from polygraph.core.errors import InvalidSelection, StructuralViolation
from polygraph.core.generators import cube, octahedron, prism, tetrahedron
from polygraph.core.mesh import Mesh
from polygraph.core.operations import op_contract_edge, op_contract_face, op_contract_vertex


# ------------------------
# Contract-Vertex
# ------------------------
def test_contract_cube_vertex_merges_three_faces():
    mesh = op_contract_vertex(cube(), 'A')
    assert mesh_counts(mesh) == (7, 9, 4)
    # Merged face goes last.
    assert mesh.faces()[-1] == ['B', 'C', 'D', 'E', 'F', 'H']
    assert mesh.face_list[-1].cycle(mesh) == ['B', 'C', 'D', 'H', 'E', 'F']
    ok, msgs = check_mesh_conformity(mesh, require_manifold=True)
    assert ok, msgs


def test_contract_octahedron_apex():
    mesh = op_contract_vertex(octahedron(), 'A')
    assert mesh_counts(mesh) == (5, 8, 5)
    assert face_size_histogram(mesh) == {3: 4, 4: 1}


def test_contract_vertex_with_chord_is_rejected_before_mutation():
    mesh = prism(3)
    with pytest.raises(StructuralViolation, match="non-cycle"):
        op_contract_vertex(mesh, 'A')
    assert mesh_counts(mesh) == (6, 9, 5)


def test_contract_unknown_vertex():
    with pytest.raises(InvalidSelection):
        op_contract_vertex(cube(), 'Z')


# ------------------------
# Contract-Edge
# ------------------------
def test_contract_cube_edge():
    mesh = op_contract_edge(cube(), 'B', 'A')
    assert mesh_counts(mesh) == (7, 11, 6)
    assert 'AB' in mesh
    assert mesh.degree('AB') == 4
    assert sum(len(f) for f in mesh.face_list) == 22
    assert face_size_histogram(mesh) == {3: 2, 4: 4}
    ok, msgs = check_mesh_conformity(mesh, require_manifold=True)
    assert ok, msgs


def test_contract_edge_collapsing_triangle_rejected():
    mesh = tetrahedron()
    with pytest.raises(StructuralViolation, match="2 vertices"):
        op_contract_edge(mesh, 'A', 'B')
    assert mesh_counts(mesh) == (4, 6, 4)


def test_contract_missing_edge():
    with pytest.raises(InvalidSelection):
        op_contract_edge(cube(), 'A', 'G')


def test_contract_edge_label_collision_leaves_mesh_unchanged():
    mesh = Mesh()
    mesh.add_cycle('A', 'B', 'C', 'D')
    mesh.add_face(['A', 'B', 'C', 'D'])
    mesh.add_vertex('AB')
    with pytest.raises(StructuralViolation, match="collides"):
        op_contract_edge(mesh, 'A', 'B')
    assert mesh_counts(mesh) == (5, 4, 1)
    assert mesh.has_edge('A', 'B')
    assert mesh.faces() == [['A', 'B', 'C', 'D']]


# ------------------------
# Contract-Face
# ------------------------
def test_contract_cube_face():
    mesh = op_contract_face(cube(), ['A', 'B', 'C', 'D'])
    assert mesh_counts(mesh) == (5, 8, 5)
    assert mesh.degree('ABCD') == 4
    assert sorted(mesh.neighbours('ABCD')) == ['E', 'F', 'G', 'H']
    assert face_size_histogram(mesh) == {3: 4, 4: 1}
    ok, msgs = check_mesh_conformity(mesh, require_manifold=True)
    assert ok, msgs


def test_contract_tetrahedron_face_rejected():
    mesh = tetrahedron()
    with pytest.raises(StructuralViolation):
        op_contract_face(mesh, ['B', 'C', 'D'])
    assert mesh_counts(mesh) == (4, 6, 4)


def test_contract_unknown_face():
    with pytest.raises(InvalidSelection):
        op_contract_face(cube(), ['A', 'B', 'C'])


def test_contract_face_label_collision_leaves_mesh_unchanged():
    mesh = cube()
    mesh.add_vertex('ABCD')
    with pytest.raises(StructuralViolation, match="collides"):
        op_contract_face(mesh, ['A', 'B', 'C', 'D'])
    assert mesh_counts(mesh) == (9, 12, 6)
    assert mesh.degree('A') == 3
