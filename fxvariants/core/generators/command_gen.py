from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Tuple

from fxvariants.core.backends import BackendProfile
from fxvariants.core.descriptor import PLACEHOLDER
from fxvariants.core.descriptor.models import DEFAULT_VALUE

# Aborts the rest of a batch script when the previous command failed.
ERRORLEVEL_GUARD = "@if %errorlevel% neq 0 exit /b %errorlevel%"


@dataclass(frozen=True)
class Variant:
    source: Path
    backend: BackendProfile
    defines: Mapping[str, str] = field(default_factory=dict)


def define_tokens(defines: Mapping[str, str]) -> List[str]:
    """
    ``NAME`` for value ``1``, ``NAME=VALUE`` otherwise, sorted as full strings.

    {B: "1", A: "2"} -> ["A=2", "B"]
    """
    return sorted(name if value == DEFAULT_VALUE else f"{name}={value}" for name, value in defines.items())


def output_name(source: Path, defines: Mapping[str, str], extension: str) -> str:
    """
    Artifact file name: source stem plus ``_NAME[_VALUE]`` per define.

    Defines are appended in level-major order, not sorted:
    Foo.fx + {TEXTURE: 1, SKINNING: 2} -> Foo_TEXTURE_SKINNING_2.efb
    """
    parts = [Path(source).stem]
    for name, value in defines.items():
        if name == PLACEHOLDER:
            continue
        parts.append(name)
        if value != DEFAULT_VALUE:
            parts.append(value)
    return "_".join(parts) + "." + extension.lstrip(".")


def _render_modern(backend: BackendProfile, source: Path, output: Path, tokens: List[str]) -> List[str]:
    cmd = f'{backend.tool} "{source}" "{output}" /Profile:{backend.profile}'
    if tokens:
        cmd += f" /Defines:{';'.join(tokens)}"
    return [cmd, ERRORLEVEL_GUARD]


def _render_legacy(backend: BackendProfile, source: Path, output: Path, tokens: List[str]) -> List[str]:
    cmd = f'{backend.tool} "{source}" /Fo "{output}" /T:{backend.target}'
    for tok in tokens:
        name, sep, value = tok.partition("=")
        cmd += f" /D {name}={value if sep else DEFAULT_VALUE}"
    return [cmd]


_RENDERERS: Dict[str, Callable[[BackendProfile, Path, Path, List[str]], List[str]]] = {
    "modern": _render_modern,
    "legacy": _render_legacy,
}


def render_command(backend: BackendProfile, source: Path, output: Path, defines: Mapping[str, str]) -> List[str]:
    """Script lines compiling ``source`` into ``output`` for one backend."""
    return _RENDERERS[backend.family](backend, source, output, define_tokens(defines))


def synthesize_variant(variant: Variant, output_folder: Path, extension: str) -> Tuple[Path, List[str]]:
    """Returns (artifact path, script lines) for one variant."""
    output = Path(output_folder) / output_name(variant.source, variant.defines, extension)
    return output, render_command(variant.backend, variant.source, output, variant.defines)
