"""Boundary cycle extraction for single faces and unions of faces."""
from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from .errors import InvalidSelection, NoSingleBoundary, StructuralViolation
from .face import as_face
from .logging_utils import get_logger
from .naming import Label, label_sort_key, sort_labels

logger = get_logger('polygraph.perimeter')

__all__ = [
    'boundary_edges',
    'cycle_defect',
    'trace_cycle',
    'face_in_order',
    'perimeter',
]


def boundary_edges(mesh, faces: Iterable) -> List[Tuple[Label, Label]]:
    """Symmetric difference of the induced edge sets of ``faces``.

    An edge shared by two selected faces cancels out; what remains is the
    boundary of their union. Edges are returned in first-seen order.
    """
    counts: Counter = Counter()
    order: Dict[frozenset, Tuple[Label, Label]] = {}
    for face in faces:
        members = as_face(face).members
        missing = [v for v in members if v not in mesh]
        if missing:
            raise InvalidSelection(f"face vertices not in mesh: {sort_labels(missing)}")
        for e in mesh.induced_edges(members):
            key = frozenset(e)
            counts[key] += 1
            order.setdefault(key, e)
    return [order[k] for k in order if counts[k] % 2 == 1]


def _adjacency(edges: Sequence[Tuple[Label, Label]]) -> Dict[Label, List[Label]]:
    adj: Dict[Label, List[Label]] = {}
    for a, b in edges:
        adj.setdefault(a, []).append(b)
        adj.setdefault(b, []).append(a)
    return adj


def _component_count(adj: Dict[Label, List[Label]]) -> int:
    index = {v: i for i, v in enumerate(adj)}
    rows = []
    cols = []
    for v, nbrs in adj.items():
        for w in nbrs:
            rows.append(index[v])
            cols.append(index[w])
    n = len(index)
    graph = coo_matrix((np.ones(len(rows), dtype=np.int8), (rows, cols)), shape=(n, n)).tocsr()
    n_comp, _ = connected_components(graph, directed=False)
    return int(n_comp)


def cycle_defect(edges: Sequence[Tuple[Label, Label]],
                 expected: Optional[Iterable[Label]] = None) -> Optional[str]:
    """Describe why ``edges`` do not form one simple cycle, or return None.

    When ``expected`` is given the cycle must also visit exactly those labels.
    """
    if not edges:
        return "no edges"
    adj = _adjacency(edges)
    if expected is not None:
        expected = set(expected)
        isolated = expected - set(adj)
        if isolated:
            return f"vertices without edges: {sort_labels(isolated)}"
    bad = {v: len(n) for v, n in adj.items() if len(n) != 2}
    if bad:
        shown = ', '.join(f"{v!r}:{d}" for v, d in sorted(bad.items(), key=lambda kv: label_sort_key(kv[0]))[:10])
        return f"vertices with degree != 2: {shown}"
    n_comp = _component_count(adj)
    if n_comp != 1:
        return f"{n_comp} connected components"
    return None


def trace_cycle(edges: Sequence[Tuple[Label, Label]]) -> List[Label]:
    """Walk a simple cycle given as an edge list.

    Starts at the smallest label and steps to its smallest neighbour first,
    so the result is deterministic. Callers validate with cycle_defect().
    """
    adj = _adjacency(edges)
    start = min(adj, key=label_sort_key)
    cycle = [start]
    prev = start
    curr = min(adj[start], key=label_sort_key)
    while curr != start:
        cycle.append(curr)
        a, b = adj[curr]
        prev, curr = curr, (b if a == prev else a)
        if len(cycle) > len(adj):
            raise StructuralViolation("cycle walk did not close")
    return cycle


def face_in_order(mesh, face) -> List[Label]:
    """Ordered boundary cycle of a single face.

    Raises StructuralViolation if the face's members are not all in the mesh
    or do not induce a simple cycle.
    """
    members = as_face(face).members
    missing = [v for v in members if v not in mesh]
    if missing:
        raise StructuralViolation(f"face references missing vertices {sort_labels(missing)}")
    edges = mesh.induced_edges(members)
    reason = cycle_defect(edges, expected=members)
    if reason is not None:
        raise StructuralViolation(f"face {sort_labels(members)} is not a simple cycle: {reason}")
    return trace_cycle(edges)


def perimeter(mesh, faces: Iterable) -> List[Label]:
    """Single boundary cycle enclosing the union of ``faces``.

    Raises NoSingleBoundary when the boundary is empty, touches itself at a
    vertex, or splits into several loops.
    """
    faces = list(faces)
    edges = boundary_edges(mesh, faces)
    reason = cycle_defect(edges)
    if reason is not None:
        logger.debug("no single boundary for %d faces: %s", len(faces), reason)
        raise NoSingleBoundary(f"boundary of {len(faces)} faces is not a single cycle: {reason}")
    return trace_cycle(edges)
