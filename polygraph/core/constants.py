"""Central combinatorial constants.

This module centralizes the small fixed numbers used across the codebase so
they can be referenced without scattering literals.
"""
from __future__ import annotations

# Topology
SPHERE_EULER_CHARACTERISTIC: int = 2   # V - E + F for genus-0 surfaces
MIN_FACE_SIZE: int = 3                  # smallest face that is a simple cycle
MIN_TRUNCATION_DEGREE: int = 3          # vertices below this cannot be truncated

# Label minting
LABEL_JOINER: str = ''

# Index = number of sides
POLYGON_NAMES = (
    '', 'mono', 'di', 'tri', 'tetra', 'penta', 'hexa', 'hepta', 'octa', 'nona', 'deca',
    'undeca', 'dodeca', 'trideca', 'tetradeca', 'pentadeca', 'hexadeca', 'heptadeca',
    'octadeca', 'nonadeca', 'icosa', 'henicosa', 'docosa', 'tricosa', 'tetracosa',
    'pentacosa', 'hexacosa', 'heptacosa', 'octacosa', 'nonacosa', 'triaconta',
    'hentriaconta', 'dotriaconta', 'tritriaconta', 'tetratriaconta', 'pentatriaconta',
    'hexatriaconta', 'heptatriaconta', 'octatriaconta', 'nonatriaconta', 'tetraconta',
)

__all__ = [
    'SPHERE_EULER_CHARACTERISTIC',
    'MIN_FACE_SIZE',
    'MIN_TRUNCATION_DEGREE',
    'LABEL_JOINER',
    'POLYGON_NAMES',
]
