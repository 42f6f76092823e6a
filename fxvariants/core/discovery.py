from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from fxvariants.core.descriptor import load_descriptor
from fxvariants.core.errors import DescriptorReferencesMissingFile
from fxvariants.core.settings import Settings

_log = logging.getLogger("fxvariants.discovery")


@dataclass(frozen=True)
class SourceEntry:
    source: Path
    descriptor: Optional[Path] = None

    @property
    def stem(self) -> str:
        # Standalone descriptors name their scripts, not the shared source.
        return (self.descriptor or self.source).stem

    def __str__(self) -> str:
        return f"Source = {self.source}, Descriptor = {self.descriptor or ''}"


def _resolve_standalone(descriptor_path: Path) -> Path:
    descriptor = load_descriptor(descriptor_path)
    if not descriptor.source_file:
        raise DescriptorReferencesMissingFile(descriptor_path)

    source = Path(os.path.normpath(descriptor_path.parent / descriptor.source_file))
    if not source.is_file():
        raise DescriptorReferencesMissingFile(descriptor_path, source)
    return source


def discover_sources(scan_root: Path, settings: Settings) -> List[SourceEntry]:
    """
    Pair every effect source under ``scan_root`` with its variant descriptor.

    1) Each source file, with the same-stem descriptor beside it if present.
    2) Each standalone descriptor (no same-stem source) whose root ``File``
       attribute names a source relative to the descriptor's folder.

    Files are visited in sorted path order so runs are reproducible.
    """
    root = Path(scan_root)
    entries: List[SourceEntry] = []

    for source in sorted(root.rglob(f"*{settings.source_suffix}")):
        if not source.is_file():
            continue
        descriptor = source.with_suffix(settings.descriptor_suffix)
        entry = SourceEntry(source=source, descriptor=descriptor if descriptor.is_file() else None)
        entries.append(entry)
        _log.info("Added %s", entry)

    for descriptor in sorted(root.rglob(f"*{settings.descriptor_suffix}")):
        if not descriptor.is_file():
            continue
        if descriptor.with_suffix(settings.source_suffix).is_file():
            # Paired in the first pass.
            continue

        entry = SourceEntry(source=_resolve_standalone(descriptor), descriptor=descriptor)
        entries.append(entry)
        _log.info("Added %s", entry)

    return entries
