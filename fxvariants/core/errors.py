from __future__ import annotations

from pathlib import Path
from typing import Optional


class FxVariantsError(Exception):
    """Base class for every error that aborts a generation run.

    Each subclass carries a stable ``kind`` tag so callers can branch on the
    failure without matching on message text.
    """

    kind: str = "FxVariantsError"


class MissingInputFolder(FxVariantsError):
    kind = "MissingInputFolder"

    def __init__(self) -> None:
        super().__init__("Input folder isn't set")


class MalformedDescriptor(FxVariantsError):
    kind = "MalformedDescriptor"

    def __init__(self, reason: str, *, path: Optional[Path] = None):
        self.reason = reason
        self.path = path
        where = f" '{path}'" if path is not None else ""
        super().__init__(f"Malformed variant descriptor{where}: {reason}")


class DescriptorReferencesMissingFile(FxVariantsError):
    kind = "DescriptorReferencesMissingFile"

    def __init__(self, descriptor: Path, referenced: Optional[Path] = None):
        self.descriptor = descriptor
        self.referenced = referenced
        if referenced is None:
            msg = f"Standalone descriptor '{descriptor}' doesn't reference a source file"
        else:
            msg = f"Could not find referenced file '{referenced}' (from '{descriptor}')"
        super().__init__(msg)


class MissingFlagValue(FxVariantsError):
    kind = "MissingFlagValue"

    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"Value isn't provided for '{flag}'")
