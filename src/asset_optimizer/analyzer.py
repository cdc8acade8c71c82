from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from asset_optimizer.manifest import extract_assets
from asset_optimizer.models import AssetSummary, Config
from asset_optimizer.scanner import find_asset_references

SOURCE_DIR = "lib"

logger = logging.getLogger(__name__)


def analyze(root: Path, manifest: Any, config: Config) -> AssetSummary:
    """Compare the assets declared in ``manifest`` against ``lib/`` references.

    When nothing is declared the source tree is not scanned at all.
    """
    declared = extract_assets(manifest, config.asset_types)
    if not declared:
        return AssetSummary(declared=(), used=frozenset(), unused=())
    used = find_asset_references(root / SOURCE_DIR, config.ignore_patterns)
    unused = find_unused(declared, used)
    logger.debug(
        "%d declared, %d referenced, %d unused", len(declared), len(used), len(unused)
    )
    return AssetSummary(
        declared=tuple(declared),
        used=frozenset(used),
        unused=tuple(unused),
        sizes=calculate_sizes(root, declared),
        unused_sizes=calculate_sizes(root, unused),
    )


def find_unused(declared: Iterable[str], used: set[str] | frozenset[str]) -> list[str]:
    return [path for path in declared if path not in used]


def calculate_sizes(root: Path, paths: Iterable[str]) -> dict[str, int]:
    sizes: dict[str, int] = {}
    for rel_path in paths:
        file_path = root / rel_path
        if file_path.is_file():
            sizes[rel_path] = file_path.stat().st_size
    return sizes
