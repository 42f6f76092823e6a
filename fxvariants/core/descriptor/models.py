from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

PLACEHOLDER = "_"
DEFAULT_VALUE = "1"


@dataclass(frozen=True)
class DefineOption:
    name: str
    value: str = DEFAULT_VALUE

    @property
    def is_placeholder(self) -> bool:
        return self.name == PLACEHOLDER

    def __str__(self) -> str:
        return self.name if self.value == DEFAULT_VALUE else f"{self.name}={self.value}"


# One axis of variation; option order drives enumeration order.
Level = Tuple[DefineOption, ...]


@dataclass(frozen=True)
class Descriptor:
    levels: Tuple[Level, ...] = ()
    # Root ``File`` attribute; only standalone descriptors carry one.
    source_file: Optional[str] = None
