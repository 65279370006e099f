"""Dual construction: faces become vertices, vertices become faces."""
from __future__ import annotations

from typing import Dict, List

import numpy as np
from scipy.sparse import csr_matrix

from .face import Face
from .logging_utils import get_logger
from .mesh import Mesh
from .naming import LabelFactory

logger = get_logger('polygraph.dual')

__all__ = ['face_edge_incidence', 'face_adjacency_pairs', 'build_dual']


def face_edge_incidence(mesh) -> csr_matrix:
    """Sparse (F, E) matrix with a 1 where face f's induced subgraph holds edge e.

    Columns follow first appearance of each edge while scanning faces in order.
    """
    edge_index: Dict[frozenset, int] = {}
    rows: List[int] = []
    cols: List[int] = []
    for f_idx, face in enumerate(mesh.face_list):
        for e in mesh.induced_edges(face.members):
            col = edge_index.setdefault(frozenset(e), len(edge_index))
            rows.append(f_idx)
            cols.append(col)
    data = np.ones(len(rows), dtype=np.int32)
    return csr_matrix((data, (rows, cols)), shape=(mesh.face_count, len(edge_index)))


def face_adjacency_pairs(mesh) -> List[tuple]:
    """Index pairs (i, j), i < j, of faces sharing at least one edge."""
    inc = face_edge_incidence(mesh)
    if inc.nnz == 0:
        return []
    shared = (inc @ inc.T).tocoo()
    mask = (shared.row < shared.col) & (shared.data > 0)
    pairs = zip(shared.row[mask].tolist(), shared.col[mask].tolist())
    return sorted(pairs)


def build_dual(mesh) -> Mesh:
    """Return the dual of ``mesh`` as a new, independent Mesh.

    One dual vertex per face, labelled from the face's sorted members by a
    fresh label factory in the same naming mode. Dual vertices are joined when
    their faces share an edge. Each original vertex contributes the dual face
    made of the faces around it; their cyclic order is recovered later from
    the dual's own edges, so the input must be a manifold polyhedron for the
    result to satisfy the face invariants.
    """
    factory = LabelFactory(mode=mesh.labels.mode, opaque_prefix=mesh.labels.opaque_prefix)
    dual = Mesh(labels=factory)
    labels = []
    for face in mesh.face_list:
        label = factory.mint(face.members, taken=dual)
        dual.add_vertex(label)
        labels.append(label)

    for i, j in face_adjacency_pairs(mesh):
        dual.add_edge(labels[i], labels[j])

    dual_faces = []
    for v in mesh.vertices():
        around = mesh.faces_containing(v)
        if not around:
            logger.debug("vertex %r lies on no face; no dual face emitted", v)
            continue
        dual_faces.append(Face(labels[i] for i in around))
    dual.set_faces(dual_faces)
    logger.debug("dual of %r is %r", mesh, dual)
    return dual
