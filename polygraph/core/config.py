"""Configuration objects for polygraph editing, including label minting prefs."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping

_NAMING_MODES = ('concat', 'opaque')


@dataclass
class NamingConfig:
    """Preferences for labels minted by edit operators.

    - mode: 'concat' joins source labels (truncate keeps ``vertex+neighbour``
      order, every other operator sorts them first); 'opaque' issues
      ``<prefix><counter>`` labels.
    - opaque_prefix: prefix used by 'opaque' mode.

    Both modes record the provenance of every minted label.
    """
    mode: str = 'concat'
    opaque_prefix: str = 'v'

    def __post_init__(self):
        if self.mode not in _NAMING_MODES:
            raise ValueError(f"naming mode must be one of {_NAMING_MODES}, got {self.mode!r}")


@dataclass
class EditorConfig:
    """Unified editor configuration.

    Attributes
    ----------
    check_invariants : bool
        Run the conformity check after every editor operation and raise
        StructuralViolation when it fails.
    require_manifold : bool
        Also require every edge to lie on exactly two faces during that check.
    transactional : bool
        Apply each operation to a deep copy and swap it in only on success,
        so a failed edit leaves the live mesh untouched.
    debug : bool
        Log each operation's V/E/F counts before and after.
    naming : NamingConfig
        Label minting preferences for meshes the editor creates.
    """
    check_invariants: bool = True
    require_manifold: bool = False
    transactional: bool = False
    debug: bool = False
    naming: NamingConfig = field(default_factory=NamingConfig)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'EditorConfig':
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"unknown editor config keys: {sorted(unknown)}")
        kwargs: Dict[str, Any] = dict(values)
        naming = kwargs.get('naming')
        if isinstance(naming, Mapping):
            naming_known = {f.name for f in fields(NamingConfig)}
            bad = set(naming) - naming_known
            if bad:
                raise ValueError(f"unknown naming config keys: {sorted(bad)}")
            kwargs['naming'] = NamingConfig(**naming)
        return cls(**kwargs)


__all__ = ['NamingConfig', 'EditorConfig']
