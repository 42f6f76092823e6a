"""
Variant descriptor parser.

A descriptor is an XML document whose root element holds one child per
level. Each child's text is a ``;`` separated option list:

    <Variants File="Basic.fx">
        <Texture>TEXTURE;_</Texture>
        <Skinning>SKINNING=2;_</Skinning>
    </Variants>

Options are ``NAME`` or ``NAME=VALUE``; the value defaults to ``1``. The
parser keeps everything as written (duplicates, placeholders, empty
levels); it only rejects text that is not well-formed XML.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Union

from fxvariants.core.errors import MalformedDescriptor

from .models import DEFAULT_VALUE, DefineOption, Descriptor, Level

SOURCE_FILE_ATTRIBUTE = "File"


def _parse_root(text: Union[str, bytes]) -> ET.Element:
    try:
        return ET.fromstring(text)
    except ET.ParseError as exc:
        raise MalformedDescriptor(str(exc)) from exc


def _parse_option(token: str) -> DefineOption:
    name, sep, value = token.partition("=")
    return DefineOption(name=name.strip(), value=value.strip() if sep else DEFAULT_VALUE)


def _parse_level(element: ET.Element) -> Level:
    text = "".join(element.itertext())
    return tuple(_parse_option(tok.strip()) for tok in text.split(";") if tok.strip())


def parse_levels(text: Union[str, bytes]) -> List[Level]:
    root = _parse_root(text)
    return [_parse_level(child) for child in root]


def parse_descriptor(text: Union[str, bytes]) -> Descriptor:
    root = _parse_root(text)
    return Descriptor(
        levels=tuple(_parse_level(child) for child in root),
        source_file=root.get(SOURCE_FILE_ATTRIBUTE),
    )


def load_descriptor(path: Path) -> Descriptor:
    try:
        return parse_descriptor(Path(path).read_bytes())
    except MalformedDescriptor as exc:
        raise MalformedDescriptor(exc.reason, path=Path(path)) from exc
