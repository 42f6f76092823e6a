from __future__ import annotations

from typing import List

from .models import BackendProfile


def builtin_backends() -> List[BackendProfile]:
    # Processing order is part of the output contract: one pass per entry.
    return [
        BackendProfile(
            name="MonoGameDX11",
            family="modern",
            tool="mgfxc",
            profile="DirectX_11",
            description="MonoGame effect compiler, DirectX 11 profile",
        ),
        BackendProfile(
            name="MonoGameOGL",
            family="modern",
            tool="mgfxc",
            profile="OpenGL",
            description="MonoGame effect compiler, OpenGL profile",
        ),
        BackendProfile(
            name="FNA",
            family="legacy",
            tool="fxc",
            target="fx_2_0",
            description="DirectX effect compiler for FNA (fx_2_0)",
        ),
    ]
