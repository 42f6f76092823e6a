from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Sequence

from fxvariants.core.backends import BackendProfile
from fxvariants.core.discovery import SourceEntry
from fxvariants.core.settings import Settings
from fxvariants.core.variants import define_sets_for

from .command_gen import Variant, synthesize_variant

_log = logging.getLogger("fxvariants.generators")


@dataclass
class BackendScripts:
    """In-memory scripts for one backend pass.

    ``scripts`` maps script id -> script text, per-file scripts first in
    processing order, the aggregate script last.
    """

    backend: BackendProfile
    folder: Path
    scripts: Dict[str, str] = field(default_factory=dict)
    # Folders the generated commands write artifacts into.
    output_dirs: List[Path] = field(default_factory=list)


def _relative_dir(scan_root: Path, path: Path) -> str:
    rel = os.path.relpath(path.parent, scan_root)
    return "" if rel == os.curdir else rel


def script_id(scan_root: Path, entry: SourceEntry) -> str:
    """
    Flat script identifier: relative folder + entry stem, separators -> ``_``.

    <root>/shaders/sky/Clouds.fx -> shaders_sky_Clouds
    """
    rel = _relative_dir(scan_root, entry.source)
    ident = os.path.join(rel, entry.stem) if rel else entry.stem
    return ident.replace("\\", "_").replace("/", "_")


def render_entry(entry: SourceEntry, backend: BackendProfile, output_folder: Path, settings: Settings) -> str:
    """Every variant of one source, one command block each, in expansion order."""
    source = entry.source.resolve()
    lines: List[str] = []
    for defines in define_sets_for(entry.descriptor):
        variant = Variant(source=source, backend=backend, defines=defines)
        _, block = synthesize_variant(variant, output_folder, settings.extension)
        lines.extend(block)
    return "".join(f"{line}\n" for line in lines)


def assemble_backend_scripts(
    scan_root: Path,
    entries: Sequence[SourceEntry],
    backend: BackendProfile,
    settings: Settings,
) -> BackendScripts:
    root = Path(scan_root).resolve()
    result = BackendScripts(backend=backend, folder=root / backend.name)
    bin_root = result.folder / settings.bin_folder
    blocks: List[str] = []

    for entry in entries:
        entry = _resolved(entry)
        rel = _relative_dir(root, entry.source)
        output_folder = bin_root / rel if rel else bin_root
        if output_folder not in result.output_dirs:
            result.output_dirs.append(output_folder)

        ident = script_id(root, entry)
        text = render_entry(entry, backend, output_folder, settings)
        if ident in result.scripts:
            _log.warning(
                "%s: script id '%s' of %s is already taken, replacing its per-file script",
                backend.name,
                ident,
                entry.source,
            )
        result.scripts[ident] = text
        blocks.append(text)

    # Every entry, including those whose per-file script was replaced.
    result.scripts[settings.aggregate_name] = "\n".join(blocks)
    return result


def _resolved(entry: SourceEntry) -> SourceEntry:
    return SourceEntry(
        source=entry.source.resolve(),
        descriptor=entry.descriptor.resolve() if entry.descriptor is not None else None,
    )
