from pathlib import Path

import yaml

from main import EFFECTS_CONFIG_FILE, dry_run, load_catalog
from specialfx.sinks import LoggingSink


def test_bundled_effects_file_is_valid():
    catalog = load_catalog(EFFECTS_CONFIG_FILE)
    assert isinstance(catalog.renderer.sink, LoggingSink)
    assert catalog.validate() == {}
    assert dry_run(catalog) == 0


def test_dry_run_counts_failures(tmp_path: Path):
    path = tmp_path / "effects.yaml"
    path.write_text(
        yaml.safe_dump({"ok": "lightning", "bad": "sound,bogus=1", "worse": "volcano"}),
        encoding="utf-8",
    )
    catalog = load_catalog(path)
    assert dry_run(catalog) == 2
