"""Diagnostics helpers: counts and histograms for a mesh.

Functions take a Mesh (or a MeshEditor, via its ``mesh`` attribute) and
return plain Python containers so results compare and print cleanly.
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

import numpy as np

from .constants import SPHERE_EULER_CHARACTERISTIC
from .logging_utils import get_logger

logger = get_logger('polygraph.diagnostics')

__all__ = [
    'mesh_counts', 'euler_characteristic', 'face_size_histogram', 'degree_histogram', 'summarize',
]


def _unwrap(obj):
    return getattr(obj, 'mesh', obj)


def _histogram(values) -> Dict[int, int]:
    arr = np.asarray(values, dtype=np.int64)
    if arr.size == 0:
        return {}
    counts = np.bincount(arr)
    nz = np.nonzero(counts)[0]
    return {int(k): int(counts[k]) for k in nz}


def mesh_counts(mesh) -> Tuple[int, int, int]:
    """(V, E, F) of a mesh."""
    mesh = _unwrap(mesh)
    return mesh.vertex_count, mesh.edge_count, mesh.face_count


def euler_characteristic(mesh) -> int:
    v, e, f = mesh_counts(mesh)
    return v - e + f


def face_size_histogram(mesh) -> Dict[int, int]:
    """Map face size -> number of faces of that size."""
    mesh = _unwrap(mesh)
    return _histogram([len(f) for f in mesh.face_list])


def degree_histogram(mesh) -> Dict[int, int]:
    """Map vertex degree -> number of vertices with that degree."""
    mesh = _unwrap(mesh)
    return _histogram([mesh.degree(v) for v in mesh.vertices()])


def summarize(mesh, log: bool = False) -> Dict[str, Any]:
    mesh = _unwrap(mesh)
    v, e, f = mesh_counts(mesh)
    chi = v - e + f
    out = {
        'vertices': v,
        'edges': e,
        'faces': f,
        'euler_characteristic': chi,
        'spherical': chi == SPHERE_EULER_CHARACTERISTIC,
        'face_sizes': face_size_histogram(mesh),
        'degrees': degree_histogram(mesh),
    }
    if log:
        logger.info("V=%d E=%d F=%d chi=%d faces=%s degrees=%s",
                    v, e, f, chi, out['face_sizes'], out['degrees'])
    return out
