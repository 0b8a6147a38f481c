# main.py
"""Validate an effects file and dry-run every effect through a logging sink.

Usage::

    python main.py [path/to/effects.yaml] [section]

With no arguments ``config/effects.yaml`` is used.  Set
``SPECIALFX_LOG_JSON=1`` for JSON log lines.  The process exits with a
non-zero status when any effect definition is invalid.
"""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from specialfx import EffectCatalog, EffectRenderer, LoggingSink
from specialfx.logging_utils import setup_logging

# --- Paths relative to this script's location ---
SCRIPT_DIR = Path(__file__).parent.resolve()
CONFIG_DIR = SCRIPT_DIR / "config"
EFFECTS_CONFIG_FILE = CONFIG_DIR / "effects.yaml"
# --- End Paths ---

DRY_RUN_LOCATION = (0, 64, 0)

log = structlog.get_logger()


def load_catalog(config_path: Path, section: Optional[str] = None) -> EffectCatalog:
    """Build a catalog over ``config_path`` that renders through a :class:`LoggingSink`."""
    renderer = EffectRenderer(LoggingSink())
    return EffectCatalog.from_yaml(config_path, section=section, renderer=renderer)


def dry_run(catalog: EffectCatalog) -> int:
    """Validate and play every effect in ``catalog``; return the failure count."""
    failures = catalog.validate()
    for name in catalog.names():
        if name in failures:
            continue
        log.info("Playing effect", effect=name)
        catalog.play_effect(DRY_RUN_LOCATION, name)
    log.info(
        "Dry run complete",
        effects=len(catalog.names()),
        invalid=sorted(failures),
        master_volume=catalog.master_volume,
    )
    return len(failures)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    argv = sys.argv[1:] if argv is None else argv
    setup_logging(logging.INFO, json_output=os.environ.get("SPECIALFX_LOG_JSON") == "1")

    config_path = Path(argv[0]) if argv else EFFECTS_CONFIG_FILE
    section = argv[1] if len(argv) > 1 else None

    try:
        catalog = load_catalog(config_path, section)
    except FileNotFoundError as e:
        log.critical("Effects file not found", error=str(e))
        return 2
    except Exception as e:
        log.critical("Failed to load effects", error=str(e), exc_info=True)
        return 2

    return 1 if dry_run(catalog) else 0


if __name__ == "__main__":
    sys.exit(main())
