from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

MANIFEST_FILENAME = "pubspec.yaml"


def load_manifest(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def extract_assets(manifest: Any, asset_types: Iterable[str]) -> list[str]:
    """Return ``flutter.assets`` entries whose extension is in ``asset_types``."""
    if not isinstance(manifest, dict):
        return []
    flutter = manifest.get("flutter")
    if not isinstance(flutter, dict):
        return []
    entries = flutter.get("assets")
    if not isinstance(entries, list):
        return []
    suffixes = tuple(f".{ext.lower()}" for ext in asset_types)
    return [
        entry
        for entry in entries
        if isinstance(entry, str) and entry.lower().endswith(suffixes)
    ]
