"""Error taxonomy for mesh edits.

All errors derive from ``ValueError`` so callers that guard operator calls
with ``except ValueError`` keep working. None of them is transient: they
report a combinatorial precondition that does not hold, and no operator
retries or recovers internally.
"""
from __future__ import annotations

__all__ = ['MeshError', 'InvalidSelection', 'StructuralViolation', 'NoSingleBoundary']


class MeshError(ValueError):
    """Base class for every polygraph mesh error."""


class InvalidSelection(MeshError):
    """A vertex, edge or face selection does not exist in the mesh.

    Raised for unknown vertex labels, missing edges, self-loop edges and
    face selections that do not exactly match an existing face's membership.
    """


class StructuralViolation(MeshError):
    """An edit would leave a face that is not a simple cycle.

    Also raised for truncation of a vertex whose faces do not surround it
    properly, for minted label collisions and for failed invariant checks.
    """


class NoSingleBoundary(MeshError):
    """The boundary of a union of faces is not exactly one simple cycle.

    The boundary may be empty, split into several components, or touch
    itself at a vertex of degree greater than two.
    """
