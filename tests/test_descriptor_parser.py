"""
Variant descriptor parser tests.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from fxvariants.core.descriptor import DefineOption, load_descriptor, parse_descriptor, parse_levels
from fxvariants.core.errors import MalformedDescriptor


def test_levels_follow_document_order(default_effect_xml):
    levels = parse_levels(default_effect_xml)
    assert [lvl[0].name for lvl in levels] == ["TEXTURE", "LIGHTNING", "CLIP_PLANE", "SKINNING"]
    assert all(lvl[1].is_placeholder for lvl in levels)


def test_value_defaults_to_one():
    (level,) = parse_levels("<V><A>TEXTURE</A></V>")
    assert level == (DefineOption("TEXTURE", "1"),)


def test_name_value_pairs_are_trimmed():
    (level,) = parse_levels("<V><A>  SKINNING = 2 ;  _ ; FOG=linear</A></V>")
    assert level == (
        DefineOption("SKINNING", "2"),
        DefineOption("_", "1"),
        DefineOption("FOG", "linear"),
    )


def test_value_keeps_everything_after_first_equals():
    (level,) = parse_levels("<V><A>EXPR=A=B</A></V>")
    assert level[0] == DefineOption("EXPR", "A=B")


def test_duplicates_are_kept_as_is():
    (level,) = parse_levels("<V><A>X;X;X=2</A></V>")
    assert [str(o) for o in level] == ["X", "X", "X=2"]


def test_blank_child_is_an_empty_level():
    levels = parse_levels("<V><A>TEXTURE;_</A><B>   </B><C/></V>")
    assert [len(lvl) for lvl in levels] == [2, 0, 0]


def test_trailing_separator_adds_no_option():
    (level,) = parse_levels("<V><A>TEXTURE;</A></V>")
    assert level == (DefineOption("TEXTURE"),)


def test_nested_text_is_part_of_the_level():
    (level,) = parse_levels("<V><A>TEXTURE;<!-- c --><b>_</b></A></V>")
    assert [o.name for o in level] == ["TEXTURE", "_"]


def test_root_without_children_has_no_levels():
    assert parse_levels("<Variants/>") == []


def test_descriptor_carries_file_attribute():
    d = parse_descriptor('<Variants File="Basic.fx"><A>X;_</A></Variants>')
    assert d.source_file == "Basic.fx"
    assert len(d.levels) == 1


def test_descriptor_without_file_attribute():
    assert parse_descriptor("<Variants/>").source_file is None


@pytest.mark.parametrize("text", ["", "<V><A>X</V>", "not xml at all", "<V></V><W/>"])
def test_malformed_text_raises(text):
    with pytest.raises(MalformedDescriptor) as ei:
        parse_levels(text)
    assert ei.value.kind == "MalformedDescriptor"


def test_load_descriptor_reports_path(tmp_path: Path):
    p = tmp_path / "Broken.xml"
    p.write_text("<Variants><A>X</Variants>", encoding="utf-8")
    with pytest.raises(MalformedDescriptor) as ei:
        load_descriptor(p)
    assert ei.value.path == p
    assert "Broken.xml" in str(ei.value)


def test_load_descriptor_accepts_bom(tmp_path: Path):
    p = tmp_path / "Bom.xml"
    p.write_bytes(b"\xef\xbb\xbf<?xml version=\"1.0\" encoding=\"utf-8\"?><V><A>X;_</A></V>")
    assert len(load_descriptor(p).levels) == 1
