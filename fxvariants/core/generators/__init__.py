from .command_gen import ERRORLEVEL_GUARD, Variant, define_tokens, output_name, render_command, synthesize_variant
from .script_gen import BackendScripts, assemble_backend_scripts, script_id

__all__ = [
    "ERRORLEVEL_GUARD",
    "BackendScripts",
    "Variant",
    "assemble_backend_scripts",
    "define_tokens",
    "output_name",
    "render_command",
    "script_id",
    "synthesize_variant",
]
