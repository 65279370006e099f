"""Deterministic vertex label minting with provenance.

Edit operators never invent labels themselves: they ask the mesh's
:class:`LabelFactory` for one, passing the labels the new vertex derives
from. In ``concat`` mode the label is the concatenation of those sources,
which keeps results readable and reproducible (``'A'`` + ``'B'`` -> ``'AB'``)
but can collide on compound labels; in ``opaque`` mode the factory hands out
``v1``, ``v2``, ... instead. Either way the sources are recorded so the
origin of any minted vertex can be traced back to generator labels.
"""
from __future__ import annotations

import math
from typing import Container, Dict, Hashable, Iterable, List, Tuple

from .constants import LABEL_JOINER
from .errors import StructuralViolation

Label = Hashable

__all__ = ['Label', 'LabelFactory', 'label_sort_key', 'sort_labels', 'names']


def label_sort_key(label):
    """Sort key placing integers first (numerically), then everything else by str()."""
    if isinstance(label, int) and not isinstance(label, bool):
        return (0, label, '')
    return (1, 0, str(label))


def sort_labels(labels: Iterable[Label]) -> List[Label]:
    return sorted(labels, key=label_sort_key)


class LabelFactory:
    """Mint labels for derived vertices and remember where they came from."""

    def __init__(self, mode: str = 'concat', opaque_prefix: str = 'v'):
        if mode not in ('concat', 'opaque'):
            raise ValueError(f"unknown naming mode {mode!r}")
        self.mode = mode
        self.opaque_prefix = opaque_prefix
        self._counter = 0
        self.provenance: Dict[Label, Tuple[Label, ...]] = {}

    @classmethod
    def from_config(cls, naming_cfg) -> 'LabelFactory':
        return cls(mode=naming_cfg.mode, opaque_prefix=naming_cfg.opaque_prefix)

    def mint(self, sources: Iterable[Label], taken: Container = (), keep_order: bool = False) -> Label:
        """Return a fresh label derived from ``sources``.

        ``taken`` is anything supporting ``in`` (a Mesh, a set); a concat label
        already present there raises StructuralViolation, an opaque label
        skips ahead to the next free counter value.
        """
        src = tuple(sources) if keep_order else tuple(sort_labels(sources))
        if not src:
            raise ValueError("cannot mint a label from no sources")
        if self.mode == 'concat':
            label = LABEL_JOINER.join(str(s) for s in src)
            if label in taken:
                raise StructuralViolation(f"minted label {label!r} from {src} collides with an existing vertex")
        else:
            while True:
                self._counter += 1
                label = f"{self.opaque_prefix}{self._counter}"
                if label not in taken:
                    break
        self.provenance[label] = src
        return label

    def origin(self, label: Label) -> Tuple[Label, ...]:
        """Direct sources of a minted label; generator labels are their own origin."""
        return self.provenance.get(label, (label,))

    def roots(self, label: Label) -> List[Label]:
        """Expand provenance recursively down to labels that were never minted."""
        out: List[Label] = []
        stack = [label]
        while stack:
            cur = stack.pop()
            src = self.provenance.get(cur)
            if src is None:
                out.append(cur)
            else:
                stack.extend(reversed(src))
        return out

    def copy(self) -> 'LabelFactory':
        dup = LabelFactory(self.mode, self.opaque_prefix)
        dup._counter = self._counter
        dup.provenance = dict(self.provenance)
        return dup


def _increment(name: str) -> str:
    """Spreadsheet-style successor: 'A' -> 'B', 'Z' -> 'AA', 'AZ' -> 'BA'."""
    chars = list(name)
    i = len(chars) - 1
    while i >= 0:
        if chars[i] != 'Z':
            chars[i] = chr(ord(chars[i]) + 1)
            return ''.join(chars)
        chars[i] = 'A'
        i -= 1
    return 'A' + ''.join(chars)


def names(n: int) -> List[str]:
    """Return ``n`` sequential letter labels sharing a common width where possible.

    Width starts at ``floor(log27(n)) + 1`` letters so small generators get
    single letters (A, B, ...) and larger ones (AA, AB, ...) keep labels
    sortable by generation order.
    """
    if n <= 0:
        return []
    width = int(math.log(n) / math.log(27)) + 1
    name = 'A' * width
    out = []
    for _ in range(n):
        out.append(name)
        name = _increment(name)
    return out
