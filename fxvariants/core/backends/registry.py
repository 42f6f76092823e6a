from __future__ import annotations

from typing import Dict, List, Optional

from .builtins import builtin_backends
from .models import BackendProfile


class BackendRegistry:
    """Fixed set of compiler backends, in processing order."""

    def __init__(self) -> None:
        self._backends: Dict[str, BackendProfile] = {b.name: b for b in builtin_backends()}

    def list_names(self) -> List[str]:
        return list(self._backends.keys())

    def get(self, name: str) -> Optional[BackendProfile]:
        return self._backends.get(name)

    def all(self) -> List[BackendProfile]:
        return list(self._backends.values())
