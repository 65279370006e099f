"""Mesh editor: runs operators against a live mesh with stats and invariant checks."""
from __future__ import annotations

import time
from collections import defaultdict
from typing import Iterable, Optional

from .config import EditorConfig
from .conformity import check_mesh_conformity
from .dual import build_dual
from .errors import MeshError, StructuralViolation
from .logging_utils import get_logger
from .mesh import Mesh
from .naming import LabelFactory
from .operations import (op_carve_edge, op_contract_edge, op_contract_face, op_contract_vertex,
                         op_rectify_face, op_stellate, op_truncate)
from .perimeter import face_in_order as _face_in_order, perimeter as _perimeter
from .stats import OpStats, print_stats as _print_stats

__all__ = ['MeshEditor']


class MeshEditor:
    def __init__(self, mesh: Optional[Mesh] = None, config: Optional[EditorConfig] = None):
        """Primary mesh editor.

        Parameters
        ----------
        mesh : Mesh, optional
            Mesh to edit in place. A new empty mesh minting labels per
            ``config.naming`` is created when omitted.
        config : EditorConfig, optional
            Invariant checking, transactional and logging policy.
        """
        self.config = config or EditorConfig()
        self.logger = get_logger(f'polygraph.editor.{self.__class__.__name__}')
        if mesh is None:
            mesh = Mesh(labels=LabelFactory.from_config(self.config.naming))
        self.mesh = mesh
        self._op_stats = defaultdict(OpStats)

    # --- Stats helpers ---
    def stats_summary(self):
        return {k: v.to_dict() for k, v in self._op_stats.items()}

    def print_stats(self, pretty: bool = True, file=None):
        """Delegate to `stats.print_stats` for presentation."""
        _print_stats(self.stats_summary(), file=file, pretty=pretty)

    def reset_stats(self, drop_ops: bool = False):
        """Reset operation statistics counters and timings.

        Parameters
        ----------
        drop_ops : bool, default False
            If True, clears the stats registry so only future operations
            recreate entries. If False, keeps existing op keys but zeroes
            every counter and timing field.
        """
        if drop_ops:
            self._op_stats.clear()
        else:
            for s in self._op_stats.values():
                s.reset()

    # --- Operation driver ---
    def _apply(self, op_name: str, fn, *args):
        stats = self._op_stats[op_name]
        stats.attempts += 1
        target = self.mesh.copy() if self.config.transactional else self.mesh
        before = repr(target) if self.config.debug else None
        t0 = time.perf_counter()
        try:
            fn(target, *args)
            if self.config.check_invariants:
                ok, msgs = check_mesh_conformity(target, require_manifold=self.config.require_manifold)
                if not ok:
                    stats.invariant_rejects += 1
                    raise StructuralViolation(f"{op_name} broke mesh invariants: {'; '.join(msgs)}")
        except MeshError as exc:
            stats.fail += 1
            self.logger.warning("%s%r failed: %s", op_name, args, exc)
            raise
        finally:
            stats.record_time(time.perf_counter() - t0)
        stats.success += 1
        self.mesh = target
        if self.config.debug:
            self.logger.debug("%s%r: %s -> %r", op_name, args, before, target)
        else:
            self.logger.debug("%s%r ok", op_name, args)
        return self

    # --- Operators ---
    def truncate(self, vertices: Optional[Iterable] = None):
        return self._apply('truncate', op_truncate, vertices)

    def stellate(self, faces: Optional[Iterable] = None):
        return self._apply('stellate', op_stellate, faces)

    def carve_edge(self, u, v):
        return self._apply('carve_edge', op_carve_edge, u, v)

    subdivide_edge = carve_edge

    def rectify_face(self, face):
        return self._apply('rectify_face', op_rectify_face, face)

    def contract_vertex(self, vertex):
        return self._apply('contract_vertex', op_contract_vertex, vertex)

    def contract_edge(self, u, v):
        return self._apply('contract_edge', op_contract_edge, u, v)

    def contract_face(self, face):
        return self._apply('contract_face', op_contract_face, face)

    # --- Derived editors ---
    def _derived(self, op_name: str, build):
        stats = self._op_stats[op_name]
        stats.attempts += 1
        t0 = time.perf_counter()
        try:
            mesh = build()
        except MeshError as exc:
            stats.fail += 1
            self.logger.warning("%s failed: %s", op_name, exc)
            raise
        finally:
            stats.record_time(time.perf_counter() - t0)
        stats.success += 1
        return MeshEditor(mesh, config=self.config)

    def truncated(self, vertices: Optional[Iterable] = None) -> 'MeshEditor':
        """New editor over a truncated deep copy; this editor's mesh is untouched."""
        return self._derived('truncated', lambda: op_truncate(self.mesh.copy(), vertices))

    def stellated(self, faces: Optional[Iterable] = None) -> 'MeshEditor':
        return self._derived('stellated', lambda: op_stellate(self.mesh.copy(), faces))

    def dual(self) -> 'MeshEditor':
        return self._derived('dual', lambda: build_dual(self.mesh))

    def copy(self) -> 'MeshEditor':
        return MeshEditor(self.mesh.copy(), config=self.config)

    # --- Queries ---
    def perimeter(self, faces: Iterable):
        return _perimeter(self.mesh, faces)

    def face_in_order(self, face):
        return _face_in_order(self.mesh, face)

    def check_conformity(self, verbose: bool = False):
        return check_mesh_conformity(self.mesh, require_manifold=self.config.require_manifold, verbose=verbose)

    def __repr__(self):
        return f"MeshEditor({self.mesh!r})"
