"""Local mesh operations (truncate, stellate, carve, rectify, contractions).

Every ``op_*`` function takes the mesh it edits in place, validates its
selection and mints every new label before the first mutation, and returns
the mesh. Selections are vertex labels, label pairs for edges, or face
memberships (a list, tuple or set of labels, or a Face; never a bare string);
faces must match an existing face exactly.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .constants import MIN_FACE_SIZE, MIN_TRUNCATION_DEGREE
from .errors import InvalidSelection, StructuralViolation
from .face import Face
from .logging_utils import get_logger
from .naming import Label, sort_labels
from .perimeter import cycle_defect

logger = get_logger('polygraph.operations')

__all__ = [
    'op_truncate',
    'op_stellate',
    'op_carve_edge',
    'op_subdivide_edge',
    'op_rectify_face',
    'op_contract_vertex',
    'op_contract_edge',
    'op_contract_face',
    'truncated',
    'stellated',
]


# ------------------------
# Internal helpers
# ------------------------
def _require_vertex(mesh, vertex):
    if vertex not in mesh:
        raise InvalidSelection(f"vertex {vertex!r} not in mesh")


def _require_edge(mesh, u, v):
    if not mesh.has_edge(u, v):
        raise InvalidSelection(f"edge ({u!r}, {v!r}) not in mesh")


def _unique(seq: Iterable[Label]) -> List[Label]:
    seen = set()
    out = []
    for x in seq:
        if x not in seen:
            seen.add(x)
            out.append(x)
    return out


def _cyclic_pairs(cycle):
    return list(zip(cycle, cycle[1:] + cycle[:1]))


def _mint_all(mesh, groups) -> List[Label]:
    """Mint one label per source group, each distinct from the mesh and from the others."""
    taken = set(mesh.vertices())
    out = []
    for sources in groups:
        label = mesh.labels.mint(sources, taken=taken)
        taken.add(label)
        out.append(label)
    return out


def _carve(mesh, u, v, mid: Optional[Label] = None) -> Label:
    """Split edge (u, v) with a new vertex and thread it through every face using the edge."""
    _require_edge(mesh, u, v)
    if mid is None:
        mid = mesh.labels.mint((u, v), taken=mesh)
    mesh.remove_edge(u, v)
    mesh.add_path(u, mid, v)
    mesh.set_faces(Face(f.members | {mid}) if (u in f and v in f) else f
                   for f in mesh.face_list)
    return mid


# ------------------------
# Truncation
# ------------------------
def _truncate_vertex(mesh, vertex) -> None:
    neighbours = mesh.neighbours(vertex)
    if len(neighbours) < MIN_TRUNCATION_DEGREE:
        raise StructuralViolation(
            f"cannot truncate {vertex!r}: degree {len(neighbours)} < {MIN_TRUNCATION_DEGREE}")
    faces = mesh.face_list
    incident = mesh.faces_containing(vertex)
    local: Dict[int, List[Label]] = {}
    for idx in incident:
        pair = [n for n in neighbours if n in faces[idx]]
        if len(pair) != 2:
            raise StructuralViolation(
                f"vertex {vertex!r} has {len(pair)} neighbours in face {faces[idx].sorted_members()}, expected 2")
        local[idx] = pair
    # The truncation facet is stitched from one edge per incident face.
    reason = cycle_defect([tuple(p) for p in local.values()], expected=neighbours)
    if reason is not None:
        raise StructuralViolation(f"faces around {vertex!r} do not close into a cycle: {reason}")

    minted: Dict[Label, Label] = {}
    for n in neighbours:
        label = mesh.labels.mint((vertex, n), taken=mesh, keep_order=True)
        if label in minted.values():
            raise StructuralViolation(f"minted label {label!r} repeats while truncating {vertex!r}")
        minted[n] = label

    for n in neighbours:
        mesh.add_edge(n, minted[n])
    for idx, (v1, v2) in local.items():
        mesh.add_edge(minted[v1], minted[v2])
        faces[idx] = faces[idx].replace(vertex, (minted[v1], minted[v2]))
    faces.append(Face(minted.values()))
    mesh.set_faces(faces)
    mesh.remove_vertex(vertex)
    logger.debug("truncated %r into %s", vertex, list(minted.values()))


def op_truncate(mesh, vertices: Optional[Iterable[Label]] = None):
    """Truncate vertices, each replaced by a facet with one vertex per incident edge.

    Parameters
    ----------
    mesh : Mesh
    vertices : iterable of labels, optional
        Vertices to truncate. Defaults to every vertex present when the call
        starts; vertices minted along the way are never truncated.

    Each truncation is validated before it mutates anything, but a failure
    on a later vertex leaves the earlier truncations in place.
    """
    selection = _unique(vertices) if vertices else mesh.vertices()
    for v in selection:
        _require_vertex(mesh, v)
    for v in selection:
        _truncate_vertex(mesh, v)
    return mesh


# ------------------------
# Stellation
# ------------------------
def op_stellate(mesh, faces: Optional[Iterable] = None):
    """Raise a pyramid of triangles on each selected face (all faces by default)."""
    current = mesh.face_list
    if faces:
        selected = {mesh.find_face(f) for f in faces}
    else:
        selected = set(range(len(current)))
    # Resolve every boundary cycle and centre label before touching the mesh.
    order = sorted(selected)
    cycles = {idx: current[idx].cycle(mesh) for idx in order}
    centres = dict(zip(order, _mint_all(mesh, (current[idx].members for idx in order))))

    out: List[Face] = []
    for idx, face in enumerate(current):
        if idx not in selected:
            out.append(face)
            continue
        cycle = cycles[idx]
        centre = centres[idx]
        for v in cycle:
            mesh.add_edge(centre, v)
        for a, b in _cyclic_pairs(cycle):
            out.append(Face((centre, a, b)))
        logger.debug("stellated %s around %r", face.sorted_members(), centre)
    mesh.set_faces(out)
    return mesh


# ------------------------
# Edge subdivision and local rectification
# ------------------------
def op_carve_edge(mesh, u, v):
    """Subdivide edge (u, v) with a vertex named after both endpoints."""
    mid = _carve(mesh, u, v)
    logger.debug("carved (%r, %r) at %r", u, v, mid)
    return mesh


op_subdivide_edge = op_carve_edge


def op_rectify_face(mesh, face):
    """Rectify a single face.

    Every boundary edge is carved in cyclic order; the midpoints form a new
    central face and each original corner becomes a triangle with its two
    adjacent midpoints. The original face is discarded.
    """
    idx = mesh.find_face(face)
    target = mesh.face_list[idx]
    cycle = target.cycle(mesh)
    pairs = _cyclic_pairs(cycle)
    mids = _mint_all(mesh, pairs)
    faces = mesh.face_list
    del faces[idx]
    mesh.set_faces(faces)

    for (a, b), mid in zip(pairs, mids):
        _carve(mesh, a, b, mid)
    mesh.add_cycle(mids)
    for i, corner in enumerate(cycle):
        mesh.add_face((corner, mids[i - 1], mids[i]))
    mesh.add_face(mids)
    logger.debug("rectified %s into %s", target.sorted_members(), mids)
    return mesh


# ------------------------
# Contractions
# ------------------------
def op_contract_vertex(mesh, vertex):
    """Delete a vertex and merge every face around it into one face.

    The merged face must induce a simple cycle once the vertex is gone;
    otherwise StructuralViolation is raised and the mesh is left unchanged.
    """
    _require_vertex(mesh, vertex)
    faces = mesh.face_list
    incident = set(mesh.faces_containing(vertex))
    merged = None
    if incident:
        members = set()
        for idx in incident:
            members |= faces[idx].members
        members.discard(vertex)
        reason = cycle_defect(mesh.induced_edges(members), expected=members)
        if reason is not None:
            raise StructuralViolation(
                f"contracting {vertex!r} would merge faces into a non-cycle {sort_labels(members)}: {reason}")
        merged = Face(members)

    mesh.remove_vertex(vertex)
    out = [f for i, f in enumerate(faces) if i not in incident]
    if merged is not None:
        out.append(merged)
    mesh.set_faces(out)
    logger.debug("contracted vertex %r, merged %d faces", vertex, len(incident))
    return mesh


def op_contract_edge(mesh, u, v):
    """Merge the endpoints of edge (u, v) into one vertex."""
    _require_edge(mesh, u, v)
    neighbours = _unique(n for n in mesh.neighbours(u) + mesh.neighbours(v) if n not in (u, v))
    faces = mesh.face_list
    touched = [i for i, f in enumerate(faces) if u in f or v in f]
    # Sizes after the merge: the two endpoints collapse into one member.
    for i in touched:
        size = len(faces[i].members - {u, v}) + 1
        if size < MIN_FACE_SIZE:
            raise StructuralViolation(
                f"contracting ({u!r}, {v!r}) would shrink face {faces[i].sorted_members()} to {size} vertices")

    merged = mesh.labels.mint((u, v), taken=mesh)
    mesh.remove_vertex(u)
    mesh.remove_vertex(v)
    mesh.add_vertex(merged)
    for n in neighbours:
        mesh.add_edge(merged, n)
    for i in touched:
        faces[i] = Face((faces[i].members - {u, v}) | {merged})
    mesh.set_faces(faces)
    logger.debug("contracted edge (%r, %r) into %r", u, v, merged)
    return mesh


def op_contract_face(mesh, face):
    """Collapse a whole face into one vertex joined to all its external neighbours."""
    idx = mesh.find_face(face)
    faces = mesh.face_list
    members = faces[idx].members
    ordered = faces[idx].sorted_members()
    external = _unique(n for m in ordered for n in mesh.neighbours(m) if n not in members)
    others = [f for i, f in enumerate(faces) if i != idx]
    for f in others:
        if f.members.isdisjoint(members):
            continue
        size = len(f.members - members) + 1
        if size < MIN_FACE_SIZE:
            raise StructuralViolation(
                f"contracting face {ordered} would shrink face {f.sorted_members()} to {size} vertices")

    label = mesh.labels.mint(members, taken=mesh)
    for m in ordered:
        mesh.remove_vertex(m)
    centre = mesh.add_vertex(label)
    for n in external:
        mesh.add_edge(centre, n)
    mesh.set_faces(Face((f.members - members) | {centre}) if not f.members.isdisjoint(members) else f
                   for f in others)
    logger.debug("contracted face %s into %r (%d external neighbours)", ordered, centre, len(external))
    return mesh


# ------------------------
# Copy-then-mutate helpers
# ------------------------
def truncated(mesh, vertices: Optional[Iterable[Label]] = None):
    """Deep copy of ``mesh`` with the given (default: all) vertices truncated."""
    return op_truncate(mesh.copy(), vertices)


def stellated(mesh, faces: Optional[Iterable] = None):
    """Deep copy of ``mesh`` with the given (default: all) faces stellated."""
    return op_stellate(mesh.copy(), faces)
