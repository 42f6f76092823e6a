from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from fxvariants.core.generators import BackendScripts
from fxvariants.core.settings import Settings

_log = logging.getLogger("fxvariants.writer")


def script_path(folder: Path, ident: str, settings: Settings) -> Path:
    return folder / f"{settings.script_prefix}{ident}{settings.script_suffix}"


def write_backend_scripts(backend_scripts: BackendScripts, settings: Settings) -> List[Path]:
    """Create the backend and artifact folders, then write every script.

    Existing scripts are overwritten. Returns the written paths in order.
    """
    backend_scripts.folder.mkdir(parents=True, exist_ok=True)
    for d in backend_scripts.output_dirs:
        d.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for ident, text in backend_scripts.scripts.items():
        p = script_path(backend_scripts.folder, ident, settings)
        # newline="" keeps the exact line endings the generator produced.
        with p.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
        _log.debug("Wrote %s", p)
        written.append(p)
    return written
