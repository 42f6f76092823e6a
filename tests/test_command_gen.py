"""
Command line and artifact naming tests.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from fxvariants.core.backends import BackendRegistry
from fxvariants.core.generators import (
    ERRORLEVEL_GUARD,
    Variant,
    define_tokens,
    output_name,
    render_command,
    synthesize_variant,
)

REGISTRY = BackendRegistry()
DX11 = REGISTRY.get("MonoGameDX11")
OGL = REGISTRY.get("MonoGameOGL")
FNA = REGISTRY.get("FNA")

SRC = Path("/work/Foo.fx")
OUT = Path("/work/MonoGameDX11/bin/Foo.efb")


def test_tokens_elide_one_and_sort_full_strings():
    assert define_tokens({"B": "1", "A": "2"}) == ["A=2", "B"]


def test_tokens_sort_by_whole_token_not_name():
    # by name "A" < "A0", but as tokens "A0" < "A=x" ('=' sorts after digits)
    assert define_tokens({"A": "x", "A0": "1"}) == ["A0", "A=x"]


def test_tokens_empty_set():
    assert define_tokens({}) == []


def test_output_name_level_major():
    defines = {"TEXTURE": "1", "SKINNING": "2"}
    assert output_name(Path("Foo.fx"), defines, "efb") == "Foo_TEXTURE_SKINNING_2.efb"


def test_output_name_is_not_sorted():
    assert output_name(Path("Foo.fx"), {"Z": "1", "A": "1"}, "efb") == "Foo_Z_A.efb"


def test_output_name_without_defines():
    assert output_name(Path("dir/Foo.fx"), {}, "efb") == "Foo.efb"


def test_output_name_accepts_dotted_extension():
    assert output_name(Path("Foo.fx"), {"X": "1"}, ".mgfx") == "Foo_X.mgfx"


def test_output_name_skips_placeholder():
    assert output_name(Path("Foo.fx"), {"_": "1", "A": "3"}, "efb") == "Foo_A_3.efb"


def test_modern_command_with_defines():
    lines = render_command(DX11, SRC, OUT, {"B": "1", "A": "2"})
    assert lines == [
        f'mgfxc "{SRC}" "{OUT}" /Profile:DirectX_11 /Defines:A=2;B',
        ERRORLEVEL_GUARD,
    ]


def test_modern_command_omits_empty_defines():
    (cmd, guard) = render_command(OGL, SRC, OUT, {})
    assert cmd == f'mgfxc "{SRC}" "{OUT}" /Profile:OpenGL'
    assert "/Defines" not in cmd
    assert guard == "@if %errorlevel% neq 0 exit /b %errorlevel%"


def test_legacy_command_one_switch_per_define():
    lines = render_command(FNA, SRC, OUT, {"TEXTURE": "1", "SKINNING": "2"})
    assert lines == [f'fxc "{SRC}" /Fo "{OUT}" /T:fx_2_0 /D SKINNING=2 /D TEXTURE=1']


def test_legacy_command_has_no_guard_and_no_defines_when_empty():
    lines = render_command(FNA, SRC, OUT, {})
    assert lines == [f'fxc "{SRC}" /Fo "{OUT}" /T:fx_2_0']
    assert ERRORLEVEL_GUARD not in lines


def test_legacy_never_uses_combined_switch():
    (cmd,) = render_command(FNA, SRC, OUT, {"A": "1", "B": "1"})
    assert "/Defines" not in cmd
    assert cmd.count("/D ") == 2


@pytest.mark.parametrize("backend", [DX11, OGL, FNA])
def test_synthesize_variant_places_output_in_folder(backend, tmp_path: Path):
    variant = Variant(source=SRC, backend=backend, defines={"TEXTURE": "1", "SKINNING": "2"})
    output, lines = synthesize_variant(variant, tmp_path, "efb")
    assert output == tmp_path / "Foo_TEXTURE_SKINNING_2.efb"
    assert f'"{output}"' in lines[0]
    assert lines[0].startswith(backend.tool + " ")
