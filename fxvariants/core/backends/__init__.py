from .models import BackendFamily, BackendProfile
from .registry import BackendRegistry

__all__ = [
    "BackendFamily",
    "BackendProfile",
    "BackendRegistry",
]
