"""Conformity and structural checks for face-tracking meshes."""
from __future__ import annotations

from collections import Counter
from typing import Dict, List, Set, Tuple

from .constants import MIN_FACE_SIZE
from .logging_utils import get_logger
from .naming import sort_labels
from .perimeter import cycle_defect

__all__ = [
    'build_edge_to_face_map', 'build_vertex_to_face_map', 'check_mesh_conformity',
    'non_manifold_edges',
]


def build_edge_to_face_map(mesh) -> Dict[frozenset, Set[int]]:
    """Map every mesh edge to the indices of faces whose boundary uses it."""
    edge_map: Dict[frozenset, Set[int]] = {frozenset(e): set() for e in mesh.edges()}
    for f_idx, face in enumerate(mesh.face_list):
        for e in mesh.induced_edges(face.members):
            edge_map.setdefault(frozenset(e), set()).add(f_idx)
    return edge_map


def build_vertex_to_face_map(mesh) -> Dict[object, Set[int]]:
    v_map: Dict[object, Set[int]] = {v: set() for v in mesh.vertices()}
    for f_idx, face in enumerate(mesh.face_list):
        for v in face.members:
            v_map.setdefault(v, set()).add(f_idx)
    return v_map


def non_manifold_edges(mesh) -> List[Tuple[tuple, int]]:
    """Edges not lying on exactly two faces, with their face count."""
    out = []
    for e, faces in build_edge_to_face_map(mesh).items():
        if len(faces) != 2:
            out.append((tuple(sort_labels(e)), len(faces)))
    return out


def check_mesh_conformity(mesh, require_manifold: bool = False, verbose: bool = False):
    """Check the face invariants of ``mesh``.

    Every face must reference existing vertices only, hold at least three of
    them, appear once, and induce a simple cycle. With ``require_manifold``
    every edge must also lie on exactly two faces.

    Returns (ok, messages).
    """
    msgs: List[str] = []
    ok = True
    faces = mesh.face_list
    dup = [members for members, c in Counter(f.members for f in faces).items() if c > 1]
    for members in dup[:10]:
        msgs.append(f"Duplicate face {sort_labels(members)}.")
        ok = False
    for f_idx, face in enumerate(faces):
        missing = [v for v in face.members if v not in mesh]
        if missing:
            msgs.append(f"Face {f_idx} references missing vertices {sort_labels(missing)}.")
            ok = False
            continue
        if len(face) < MIN_FACE_SIZE:
            msgs.append(f"Face {f_idx} has only {len(face)} vertices.")
            ok = False
            continue
        reason = cycle_defect(mesh.induced_edges(face.members), expected=face.members)
        if reason is not None:
            msgs.append(f"Face {f_idx} {face.sorted_members()} is not a simple cycle: {reason}.")
            ok = False
    if require_manifold:
        bad = non_manifold_edges(mesh)
        for e, count in bad[:10]:
            msgs.append(f"Edge {e} lies on {count} faces (expected 2).")
        if bad:
            ok = False
    if verbose:
        logger = get_logger('polygraph.conformity')
        for m in msgs:
            logger.info("Conformity: %s", m)
    return ok, msgs
