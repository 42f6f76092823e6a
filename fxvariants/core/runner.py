from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Literal, Optional

from fxvariants.core.backends import BackendRegistry
from fxvariants.core.discovery import discover_sources
from fxvariants.core.generators import assemble_backend_scripts
from fxvariants.core.settings import Settings
from fxvariants.core.writer import write_backend_scripts

_log = logging.getLogger("fxvariants.runner")

RunOutcome = Literal["missing_folder", "nothing_to_do", "generated"]


@dataclass
class RunResult:
    outcome: RunOutcome
    written: List[Path] = field(default_factory=list)


def generate_scripts(folder: Path, settings: Optional[Settings] = None) -> RunResult:
    """Regenerate every compile script under ``folder``.

    Backends run one after another; the first error aborts the run and
    leaves already written scripts in place.
    """
    settings = settings or Settings()
    root = Path(folder)

    if not root.is_dir():
        _log.info("Could not find '%s'.", folder)
        return RunResult(outcome="missing_folder")

    entries = discover_sources(root, settings)
    if not entries:
        _log.info("No '%s' found at folder '%s'.", settings.source_suffix, folder)
        return RunResult(outcome="nothing_to_do")

    result = RunResult(outcome="generated")
    for backend in BackendRegistry().all():
        scripts = assemble_backend_scripts(root, entries, backend, settings)
        result.written.extend(write_backend_scripts(scripts, settings))
        _log.debug("%s: %d script(s)", backend.name, len(scripts.scripts))

    _log.info("The scripts generation was a success.")
    return result
