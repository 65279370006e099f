"""Face record: unordered membership plus a lazily derived boundary cycle."""
from __future__ import annotations

from typing import Iterable, List, Optional

from .errors import InvalidSelection
from .naming import Label, sort_labels

__all__ = ['Face', 'as_face']


class Face:
    ''' A polygonal face of a mesh.

    Membership is an immutable ``frozenset`` of vertex labels and is what
    equality, hashing and ``in`` tests use. The boundary cycle (the vertices
    in the order met walking the polygon edge by edge) is not stored by
    operators; it is recovered from the owning mesh's induced subgraph the
    first time it is needed and cached until the mesh's edge set changes.

    Faces never change membership in place. Operators build a new Face via
    :meth:`replace` or :meth:`union`, so a cached cycle can only go stale
    through edge edits, which the mesh revision counter tracks.
    '''
    __slots__ = ['members', '_cycle', '_revision']

    def __init__(self, members: Iterable[Label]):
        if isinstance(members, str):
            # A string would split into one-character labels.
            raise InvalidSelection(f"a face must be a collection of labels, got the string {members!r}")
        self.members = frozenset(members)
        self._cycle: Optional[List[Label]] = None
        self._revision = None

    def __contains__(self, label) -> bool:
        return label in self.members

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self):
        return iter(sort_labels(self.members))

    def __eq__(self, other) -> bool:
        if isinstance(other, Face):
            return self.members == other.members
        if isinstance(other, (set, frozenset)):
            return self.members == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.members)

    def sorted_members(self) -> List[Label]:
        return sort_labels(self.members)

    def replace(self, old: Label, new: Iterable[Label]) -> 'Face':
        ''' Return a face with ``old`` swapped for the labels in ``new``. '''
        return Face((self.members - {old}) | set(new))

    def union(self, *others: 'Face') -> 'Face':
        merged = set(self.members)
        for other in others:
            merged |= other.members
        return Face(merged)

    def cycle(self, mesh) -> List[Label]:
        ''' Ordered boundary cycle of this face within ``mesh``.

        Raises StructuralViolation when the face's induced subgraph is not a
        simple cycle.
        '''
        stamp = (id(mesh), mesh.revision)
        if self._cycle is None or self._revision != stamp:
            from .perimeter import face_in_order
            self._cycle = face_in_order(mesh, self.members)
            self._revision = stamp
        return list(self._cycle)

    def __repr__(self):
        return f"Face({''.join(str(v) for v in self.sorted_members())})"


def as_face(face) -> Face:
    ''' Coerce a Face, set, list or tuple of labels to a Face; a bare string is rejected. '''
    if isinstance(face, Face):
        return face
    return Face(face)
