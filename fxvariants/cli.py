from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from fxvariants import __version__
from fxvariants.core.errors import FxVariantsError, MissingFlagValue, MissingInputFolder
from fxvariants.core.runner import generate_scripts
from fxvariants.core.settings import load_settings

_log = logging.getLogger("fxvariants.cli")

LOG_LEVEL_ENV_VAR = "FXVARIANTS_LOG_LEVEL"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fxvariants",
        description="Generate effect compilation scripts for every variant of every .fx file under a folder.",
        exit_on_error=False,
    )
    ap.add_argument("folder", nargs="?", help="Folder scanned recursively for effect sources")
    ap.add_argument("-e", "--extension", help="Compiled files extension (default efb)")
    ap.add_argument("-c", "--config", help="Settings file (YAML or JSON)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def _log_level(verbose: bool) -> Optional[int]:
    """Level for the CLI handler; None when FXVARIANTS_LOG_LEVEL names no level."""
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV_VAR, "INFO").strip().upper())
    return level if isinstance(level, int) else None


def _configure_logging(verbose: bool) -> None:
    level = _log_level(verbose)
    logging.basicConfig(level=logging.INFO if level is None else level, format="%(message)s", stream=sys.stdout)
    if level is None:
        _log.warning("Unknown %s=%r, using INFO", LOG_LEVEL_ENV_VAR, os.getenv(LOG_LEVEL_ENV_VAR))


def _parse(ap: argparse.ArgumentParser, argv: List[str]) -> argparse.Namespace:
    try:
        args, unknown = ap.parse_known_args(argv)
    except argparse.ArgumentError as exc:
        raise MissingFlagValue(exc.argument_name or "") from exc

    # Every positional names the folder; the last one wins.
    positionals = [a for a in [args.folder, *unknown] if a and not a.startswith("-")]
    if len(positionals) > 1:
        _log.info("Ignoring extra folder arguments: %s", " ".join(positionals[:-1]))
    args.folder = positionals[-1] if positionals else None

    options = [a for a in unknown if a.startswith("-")]
    if options:
        _log.debug("Ignoring unknown options: %s", " ".join(options))
    return args


def run(argv: List[str]) -> None:
    ap = build_parser()
    if not argv:
        ap.print_help()
        return

    args = _parse(ap, argv)
    if not args.folder:
        raise MissingInputFolder()

    folder = Path(args.folder)
    settings = load_settings(
        Path(args.config) if args.config else None,
        scan_root=folder if folder.is_dir() else None,
    ).with_overrides(extension=args.extension)

    generate_scripts(folder, settings)


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    _configure_logging("-v" in argv or "--verbose" in argv)
    _log.info("Effect compilation script generator %s.", __version__)

    try:
        run(argv)
    except (FxVariantsError, OSError) as exc:
        # Logged only; exit status is 0 for failed runs too.
        _log.error("%s: %s", getattr(exc, "kind", type(exc).__name__), exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
