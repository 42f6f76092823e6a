from .models import DefineOption, Descriptor, Level, PLACEHOLDER
from .parser import load_descriptor, parse_descriptor, parse_levels

__all__ = [
    "DefineOption",
    "Descriptor",
    "Level",
    "PLACEHOLDER",
    "load_descriptor",
    "parse_descriptor",
    "parse_levels",
]
