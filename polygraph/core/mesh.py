"""Face-tracking combinatorial mesh: vertices, edges and faces, no coordinates."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from .errors import InvalidSelection
from .face import Face, as_face
from .naming import Label, LabelFactory, label_sort_key, sort_labels

__all__ = ['Mesh', 'new_mesh']


class Mesh:
    ''' Simple undirected graph annotated with a list of faces.

    Vertices are opaque hashable labels kept in insertion order, so every
    traversal and therefore every operator is deterministic. Adjacency is a
    dict of dicts used as ordered sets. Faces hold labels by value; removing
    a vertex here never touches them, callers fix faces up themselves.

    ``revision`` increases on every vertex or edge mutation and is what face
    boundary caches are validated against. ``labels`` is the factory every
    operator mints derived vertex labels from; it travels with the mesh
    through :meth:`copy`.
    '''

    def __init__(self, labels: Optional[LabelFactory] = None):
        self._adj: Dict[Label, Dict[Label, None]] = {}
        self._faces: List[Face] = []
        self.labels = labels if labels is not None else LabelFactory()
        self.revision = 0

    # --- vertices -----------------------------------------------------------
    def __contains__(self, label) -> bool:
        return label in self._adj

    def has_vertex(self, label) -> bool:
        return label in self._adj

    def add_vertex(self, label: Label) -> Label:
        if label not in self._adj:
            self._adj[label] = {}
            self.revision += 1
        return label

    def add_vertices(self, *labels: Label) -> None:
        for label in labels:
            self.add_vertex(label)

    def remove_vertex(self, label: Label) -> None:
        ''' Delete a vertex and its incident edges. Faces are left untouched. '''
        nbrs = self._adj.pop(label, None)
        if nbrs is None:
            raise InvalidSelection(f"vertex {label!r} not in mesh")
        for n in nbrs:
            del self._adj[n][label]
        self.revision += 1

    def vertices(self) -> List[Label]:
        return list(self._adj)

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    def neighbours(self, label: Label) -> List[Label]:
        try:
            return list(self._adj[label])
        except KeyError:
            raise InvalidSelection(f"vertex {label!r} not in mesh") from None

    def degree(self, label: Label) -> int:
        return len(self.neighbours(label))

    # --- edges --------------------------------------------------------------
    def has_edge(self, u: Label, v: Label) -> bool:
        return u in self._adj and v in self._adj[u]

    def add_edge(self, u: Label, v: Label) -> None:
        ''' Add an undirected edge, creating missing endpoints. '''
        if u == v:
            raise InvalidSelection(f"self-loop on {u!r} is not allowed")
        self.add_vertex(u)
        self.add_vertex(v)
        if v not in self._adj[u]:
            self._adj[u][v] = None
            self._adj[v][u] = None
            self.revision += 1

    def remove_edge(self, u: Label, v: Label) -> None:
        if not self.has_edge(u, v):
            raise InvalidSelection(f"edge ({u!r}, {v!r}) not in mesh")
        del self._adj[u][v]
        del self._adj[v][u]
        self.revision += 1

    def add_path(self, *labels: Label) -> None:
        seq = _flatten(labels)
        for a, b in zip(seq, seq[1:]):
            self.add_edge(a, b)

    def add_cycle(self, *labels: Label) -> None:
        ''' Connect consecutive labels and close the loop back to the first. '''
        seq = _flatten(labels)
        if len(seq) < 3:
            raise InvalidSelection(f"a cycle needs at least 3 vertices, got {len(seq)}")
        self.add_path(*seq)
        self.add_edge(seq[-1], seq[0])

    def edges(self) -> List[Tuple[Label, Label]]:
        ''' Every edge once, endpoints in label order. '''
        seen = set()
        out = []
        for u, nbrs in self._adj.items():
            for v in nbrs:
                key = frozenset((u, v))
                if key in seen:
                    continue
                seen.add(key)
                out.append(tuple(sorted((u, v), key=label_sort_key)))
        return out

    @property
    def edge_count(self) -> int:
        return sum(len(n) for n in self._adj.values()) // 2

    def induced_edges(self, subset: Iterable[Label]) -> List[Tuple[Label, Label]]:
        ''' Edges of the mesh whose both endpoints lie in ``subset``. '''
        keep = set(subset)
        seen = set()
        out = []
        for u in self._adj:
            if u not in keep:
                continue
            for v in self._adj[u]:
                if v not in keep:
                    continue
                key = frozenset((u, v))
                if key in seen:
                    continue
                seen.add(key)
                out.append(tuple(sorted((u, v), key=label_sort_key)))
        return out

    def induced_subgraph(self, subset: Iterable[Label]) -> 'Mesh':
        ''' New faceless Mesh with ``subset`` and the edges among it. '''
        keep = set(subset)
        missing = [v for v in keep if v not in self._adj]
        if missing:
            raise InvalidSelection(f"vertices not in mesh: {sort_labels(missing)}")
        sub = Mesh(labels=self.labels.copy())
        for v in self._adj:
            if v in keep:
                sub.add_vertex(v)
        for u, v in self.induced_edges(keep):
            sub.add_edge(u, v)
        return sub

    # --- faces --------------------------------------------------------------
    def faces(self) -> List[List[Label]]:
        ''' Faces as sorted label lists; the order is not the boundary order. '''
        return [f.sorted_members() for f in self._faces]

    @property
    def face_list(self) -> List[Face]:
        return list(self._faces)

    @property
    def face_count(self) -> int:
        return len(self._faces)

    def set_faces(self, faces: Iterable) -> None:
        self._faces = [as_face(f) for f in faces]

    def add_face(self, members) -> Face:
        face = as_face(members)
        self._faces.append(face)
        return face

    def find_face(self, members) -> int:
        ''' Index of the face whose membership equals ``members`` exactly. '''
        target = as_face(members).members
        for idx, face in enumerate(self._faces):
            if face.members == target:
                return idx
        raise InvalidSelection(f"no face with members {sort_labels(target)}")

    def remove_face(self, members) -> Face:
        return self._faces.pop(self.find_face(members))

    def faces_containing(self, label: Label) -> List[int]:
        return [idx for idx, face in enumerate(self._faces) if label in face]

    # --- copying ------------------------------------------------------------
    def copy(self) -> 'Mesh':
        ''' Deep copy: adjacency, faces and label factory share nothing. '''
        dup = Mesh(labels=self.labels.copy())
        dup._adj = {v: dict(nbrs) for v, nbrs in self._adj.items()}
        dup._faces = [Face(f.members) for f in self._faces]
        dup.revision = self.revision
        return dup

    deep_copy = copy

    def __repr__(self):
        return f"Mesh(V={self.vertex_count}, E={self.edge_count}, F={self.face_count})"


def _flatten(labels) -> list:
    if len(labels) == 1 and isinstance(labels[0], (list, tuple)):
        return list(labels[0])
    return list(labels)


def new_mesh(naming: str = 'concat') -> Mesh:
    ''' Empty mesh minting labels in the given naming mode. '''
    return Mesh(labels=LabelFactory(mode=naming))
