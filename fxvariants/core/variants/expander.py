"""
Variant expansion: the cartesian product of descriptor levels.

Enumeration is depth-first in document order, so the last level varies
fastest:

    [TEXTURE, _] x [SKINNING=2, _]
      -> {TEXTURE, SKINNING=2}, {TEXTURE}, {SKINNING=2}, {}

Placeholder options (``_``) select "nothing from this level". Levels with
no options at all are skipped rather than collapsing the product to zero.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from fxvariants.core.descriptor import DefineOption, Level, load_descriptor

DefineSet = Dict[str, str]


def _materialize(path: Tuple[DefineOption, ...]) -> DefineSet:
    # Same-named defines from a deeper level overwrite the earlier value
    # and keep the earlier position.
    out: DefineSet = {}
    for opt in path:
        out[opt.name] = opt.value
    return out


def _expand(levels: Sequence[Level], index: int, path: Tuple[DefineOption, ...]) -> List[DefineSet]:
    if index == len(levels):
        return [_materialize(path)]

    out: List[DefineSet] = []
    for opt in levels[index]:
        branch = path if opt.is_placeholder else path + (opt,)
        out.extend(_expand(levels, index + 1, branch))
    return out


def expand_levels(levels: Sequence[Level]) -> List[DefineSet]:
    """Return every define-set, level-major. Zero levels yield ``[{}]``."""
    active = [lvl for lvl in levels if lvl]
    return _expand(active, 0, ())


def define_sets_for(descriptor_path: Optional[Path]) -> List[DefineSet]:
    """Define-sets for one source; a source without a descriptor compiles once."""
    if descriptor_path is None:
        return [{}]
    return expand_levels(load_descriptor(descriptor_path).levels)
