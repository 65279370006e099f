"""Named polyhedron families assembled from primitive mesh operations.

Every generator returns a fresh :class:`~polygraph.core.mesh.Mesh` whose
vertices are named ``A, B, C, ...`` (``AA, AB, ...`` once more letters are
needed) and whose derived vertices follow the concat naming rules of the
operators used to build it. Sizes may be given as an integer or as a polygon
name (``prism('pentagonal')``).
"""
from __future__ import annotations

import re
from typing import Callable, Dict, Optional, Union

from .constants import MIN_FACE_SIZE, POLYGON_NAMES
from .dual import build_dual
from .logging_utils import get_logger
from .mesh import Mesh
from .naming import names
from .operations import op_contract_edge, op_rectify_face, op_stellate, op_truncate

logger = get_logger('polygraph.generators')

Sides = Union[int, str]

__all__ = [
    'polygon_number',
    'tetrahedron', 'prism', 'pyramid', 'antiprism', 'bipyramid', 'trapezohedron',
    'cupola', 'rotunda', 'octahedron', 'cube', 'pentagonal_trapezohedron',
    'regular_dodecahedron', 'regular_icosahedron', 'truncated_icosahedron',
    'cucurbituril', 'elongated_pyramid', 'elongated_bipyramid', 'gyroelongated_bipyramid',
    'GENERATORS', 'make',
]


def polygon_number(name: str) -> Optional[int]:
    """Number of sides for a polygon name ('pentagonal', 'pentagon', 'penta' -> 5), else None."""
    stem = re.sub(r'gon(al)?$', '', name.strip().lower())
    if not stem:
        return None
    try:
        return POLYGON_NAMES.index(stem)
    except ValueError:
        return None


def _sides(n: Sides) -> int:
    if isinstance(n, str):
        number = polygon_number(n)
        if number is None:
            raise ValueError(f"unknown polygon name {n!r}")
        n = number
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"polygon size must be an int or a polygon name, got {n!r}")
    if n < MIN_FACE_SIZE:
        raise ValueError(f"polygon size must be >= {MIN_FACE_SIZE}, got {n}")
    return n


# ------------------------
# Primitive families
# ------------------------
def tetrahedron() -> Mesh:
    vertices = names(4)
    mesh = Mesh()
    mesh.add_vertices(*vertices)
    for v1 in vertices:
        for v2 in vertices:
            if v1 != v2:
                mesh.add_edge(v1, v2)
        mesh.add_face([v for v in vertices if v != v1])
    return mesh


def prism(n: Sides) -> Mesh:
    """N-gonal prism: two N-gon caps joined by N quadrilaterals."""
    n = _sides(n)
    vertices = names(2 * n)
    top, bottom = vertices[:n], vertices[n:]
    mesh = Mesh()
    mesh.add_cycle(top)
    mesh.add_cycle(bottom)
    mesh.add_face(top)
    mesh.add_face(bottom)
    for i in range(n):
        j = (i + 1) % n
        mesh.add_edge(top[i], bottom[i])
        mesh.add_face((top[i], bottom[i], top[j], bottom[j]))
    return mesh


def cube() -> Mesh:
    return prism(4)


def pyramid(n: Sides) -> Mesh:
    """N-gonal pyramid; the apex is the first label."""
    n = _sides(n)
    apex, *base = names(n + 1)
    mesh = Mesh()
    mesh.add_vertex(apex)
    mesh.add_vertices(*base)
    mesh.add_cycle(base)
    mesh.add_face(base)
    for i in range(n):
        mesh.add_edge(apex, base[i])
        mesh.add_face((apex, base[i], base[(i + 1) % n]))
    return mesh


def antiprism(n: Sides) -> Mesh:
    """N-gonal antiprism: caps on even and odd labels of a 2N zig-zag band."""
    n = _sides(n)
    vertices = names(2 * n)
    cap1 = vertices[0::2]
    cap2 = vertices[1::2]
    mesh = Mesh()
    mesh.add_vertices(*vertices)
    mesh.add_cycle(cap1)
    mesh.add_cycle(cap2)
    mesh.add_cycle(vertices)
    mesh.add_face(cap1)
    mesh.add_face(cap2)
    for i in range(n):
        mesh.add_face([vertices[(2 * i + k) % (2 * n)] for k in range(0, 3)])
        mesh.add_face([vertices[(2 * i + k) % (2 * n)] for k in range(1, 4)])
    return mesh


def trapezohedron(n: Sides) -> Mesh:
    """N-gonal trapezohedron: 2N kites between two apices ('A' and 'B')."""
    n = _sides(n)
    apex1, apex2, *equator = names(2 * n + 2)
    mesh = Mesh()
    mesh.add_vertices(apex1, apex2, *equator)
    mesh.add_cycle(equator)
    for i, v in enumerate(equator):
        mesh.add_edge(v, apex1 if i % 2 == 0 else apex2)
    for i in range(n):
        mesh.add_face([apex1] + [equator[(2 * i + k) % (2 * n)] for k in range(0, 3)])
        mesh.add_face([apex2] + [equator[(2 * i + k) % (2 * n)] for k in range(1, 4)])
    return mesh


def pentagonal_trapezohedron() -> Mesh:
    return trapezohedron(5)


def cucurbituril(n: Sides = 5) -> Mesh:
    """Cucurbit[n]uril ring: n glycoluril units, each contributing two
    pentagons and one octagon, closed by two n*4-gon caps.

    Not a polyhedron in the strict sense (the caps are not simple polygons
    of a convex solid) but every face is still a simple cycle.
    """
    n = _sides(n)
    total = 10 * n
    v = names(total)
    mesh = Mesh()
    mesh.add_vertices(*v)
    cap1, cap2, unit_faces = [], [], []
    for i in range(n):
        b = 10 * i
        nxt = 10 * (i + 1)
        f51 = v[b:b + 5]
        f52 = v[b + 4:b + 8] + [v[b]]
        f8 = v[b + 3:b + 6] + [v[b + 9], v[(nxt + 7) % total], v[nxt % total],
                               v[(nxt + 1) % total], v[b + 8]]
        for ring in (f51, f52, f8):
            mesh.add_cycle(ring)
            unit_faces.append(ring)
        cap1.extend(v[b + 1:b + 4] + [v[b + 8]])
        cap2.extend([v[b + 9]] + v[b + 5:b + 8])
    mesh.set_faces([cap1, cap2] + unit_faces)
    return mesh


# ------------------------
# Derived families
# ------------------------
def bipyramid(n: Sides) -> Mesh:
    """Pyramid with its base stellated."""
    mesh = pyramid(n)
    base = mesh.face_list[0]
    return op_stellate(mesh, [base])


def octahedron() -> Mesh:
    return bipyramid(4)


def cupola(n: Sides) -> Mesh:
    """N-gonal cupola: a 2N-prism with every other edge of one cap contracted."""
    n = _sides(n)
    mesh = prism(2 * n)
    cap = next(f for f in mesh.face_list if len(f) == 2 * n)
    ring = cap.cycle(mesh)
    for u, v in zip(ring[0::2], ring[1::2]):
        op_contract_edge(mesh, u, v)
    return mesh


def rotunda(n: Sides) -> Mesh:
    """N-gonal rotunda: a cupola with its top N-gon rectified.

    The top face is the N-gon whose vertices have degree sum 4N; every one of
    its vertices was produced by an edge contraction and has degree 4.
    """
    n = _sides(n)
    mesh = cupola(n)
    for face in mesh.face_list:
        if len(face) == n and sum(mesh.degree(v) for v in face) == 4 * n:
            return op_rectify_face(mesh, face)
    raise ValueError(f"no top face found in the {n}-gonal cupola")


def regular_dodecahedron() -> Mesh:
    mesh = pentagonal_trapezohedron()
    return op_truncate(mesh, ['A', 'B'])


def regular_icosahedron() -> Mesh:
    return build_dual(regular_dodecahedron())


def truncated_icosahedron() -> Mesh:
    return op_truncate(regular_icosahedron())


def elongated_pyramid(n: Sides) -> Mesh:
    """Prism with one cap stellated."""
    mesh = prism(n)
    return op_stellate(mesh, [mesh.face_list[0]])


def elongated_bipyramid(n: Sides) -> Mesh:
    """Prism with both caps stellated."""
    mesh = prism(n)
    return op_stellate(mesh, mesh.face_list[:2])


def gyroelongated_bipyramid(n: Sides) -> Mesh:
    """Antiprism with both caps stellated."""
    mesh = antiprism(n)
    return op_stellate(mesh, mesh.face_list[:2])


GENERATORS: Dict[str, Callable[..., Mesh]] = {
    'antiprism': antiprism,
    'bipyramid': bipyramid,
    'cucurbituril': cucurbituril,
    'cupola': cupola,
    'elongated_bipyramid': elongated_bipyramid,
    'elongated_pyramid': elongated_pyramid,
    'gyroelongated_bipyramid': gyroelongated_bipyramid,
    'prism': prism,
    'pyramid': pyramid,
    'rotunda': rotunda,
    'trapezohedron': trapezohedron,
}


def make(family: str, n: Sides) -> Mesh:
    """Build a parametric family by name: ``make('cupola', 'pentagonal')``."""
    try:
        builder = GENERATORS[family]
    except KeyError:
        raise ValueError(f"unknown polyhedron family {family!r}; expected one of {sorted(GENERATORS)}") from None
    mesh = builder(n)
    logger.debug("built %s(%r): %r", family, n, mesh)
    return mesh
