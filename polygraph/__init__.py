"""Public package API for the polygraph face-tracking mesh toolkit.

This facade provides a flatter import surface on top of the internal
implementation package ``polygraph.core`` while deferring the generator
library until first use to keep ``import polygraph`` light.

Example
-------
    from polygraph import MeshEditor, generators

    ed = MeshEditor(generators.cube())
    ed.truncate()
    print(ed.mesh)          # Mesh(V=24, E=36, F=14)

The deeper modules (``polygraph.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:  # Python 3.8+ runtime version export
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("polygraph-mesh")  # populated when installed
except Exception:  # pragma: no cover - editable / unknown state
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_const = _imp('polygraph.core.constants')
_errors = _imp('polygraph.core.errors')
_config = _imp('polygraph.core.config')
_naming = _imp('polygraph.core.naming')
_mesh = _imp('polygraph.core.mesh')
_face = _imp('polygraph.core.face')
_perim = _imp('polygraph.core.perimeter')
_conf = _imp('polygraph.core.conformity')
_ops = _imp('polygraph.core.operations')
_dual = _imp('polygraph.core.dual')
_stats = _imp('polygraph.core.stats')
_diag = _imp('polygraph.core.diagnostics')
_editor = _imp('polygraph.core.editor')
_log = _imp('polygraph.core.logging_utils')


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)

        def _load(self):  # type: ignore
            # Plain attribute access on an unset slot would re-enter __getattr__.
            try:
                return object.__getattribute__(self, '_m')
            except AttributeError:
                m = _imp(mod_name)
                object.__setattr__(self, '_m', m)
                return m

        def __getattr__(self, item):  # type: ignore
            return getattr(self._load(), item)

        def __dir__(self):  # type: ignore
            return dir(self._load())
    return _ModuleProxy()


# Lazily loaded generator library
generators = _lazy_module('polygraph.core.generators')

# Core types
Mesh = _mesh.Mesh
new_mesh = _mesh.new_mesh
Face = _face.Face
LabelFactory = _naming.LabelFactory
MeshEditor = _editor.MeshEditor
EditorConfig = _config.EditorConfig
NamingConfig = _config.NamingConfig
OpStats = _stats.OpStats

# Errors
MeshError = _errors.MeshError
InvalidSelection = _errors.InvalidSelection
StructuralViolation = _errors.StructuralViolation
NoSingleBoundary = _errors.NoSingleBoundary

# Operators and services
op_truncate = _ops.op_truncate
op_stellate = _ops.op_stellate
op_carve_edge = _ops.op_carve_edge
op_subdivide_edge = _ops.op_subdivide_edge
op_rectify_face = _ops.op_rectify_face
op_contract_vertex = _ops.op_contract_vertex
op_contract_edge = _ops.op_contract_edge
op_contract_face = _ops.op_contract_face
truncated = _ops.truncated
stellated = _ops.stellated
build_dual = _dual.build_dual
perimeter = _perim.perimeter
face_in_order = _perim.face_in_order
check_mesh_conformity = _conf.check_mesh_conformity
summarize = _diag.summarize
configure_logging = _log.configure_logging

# Namespace submodules for exploratory users
constants = _const
conformity = _conf
operations = _ops
stats = _stats
diagnostics = _diag

__all__ = [
    '__version__',
    # core types
    'Mesh', 'new_mesh', 'Face', 'LabelFactory', 'MeshEditor', 'EditorConfig', 'NamingConfig', 'OpStats',
    # errors
    'MeshError', 'InvalidSelection', 'StructuralViolation', 'NoSingleBoundary',
    # operators
    'op_truncate', 'op_stellate', 'op_carve_edge', 'op_subdivide_edge', 'op_rectify_face',
    'op_contract_vertex', 'op_contract_edge', 'op_contract_face', 'truncated', 'stellated',
    'build_dual', 'perimeter', 'face_in_order', 'check_mesh_conformity', 'summarize',
    'configure_logging',
    # submodules / namespaces
    'generators', 'constants', 'conformity', 'operations', 'stats', 'diagnostics',
]
