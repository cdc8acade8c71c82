from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from asset_optimizer.models import DEFAULT_COMPRESSION_QUALITY, Config

CONFIG_FILENAME = "asset_optimizer.yaml"

logger = logging.getLogger(__name__)


def load_config(path: Path) -> Config:
    """Load the optional settings file, falling back to defaults.

    A missing, unreadable or malformed file yields ``Config()``. Keys that are
    present but of the wrong shape fall back to their own default while the
    rest of the file still applies.
    """
    if not path.is_file():
        logger.debug("No config at %s, using defaults", path)
        return Config()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.debug("Ignoring unreadable config %s: %s", path, exc)
        return Config()
    if not isinstance(data, dict):
        return Config()
    return merge_config(data)


def merge_config(data: dict[str, Any]) -> Config:
    defaults = Config()
    asset_types = _string_list(data.get("asset_types"))
    ignore_patterns = _string_list(data.get("ignore_patterns"))
    quality = data.get("compression_quality")
    if isinstance(quality, bool) or not isinstance(quality, int) or not 0 <= quality <= 100:
        if quality is not None:
            logger.debug("Ignoring compression_quality=%r", quality)
        quality = DEFAULT_COMPRESSION_QUALITY
    return Config(
        asset_types=tuple(asset_types) if asset_types is not None else defaults.asset_types,
        ignore_patterns=(
            tuple(ignore_patterns) if ignore_patterns is not None else defaults.ignore_patterns
        ),
        compression_quality=quality,
    )


def _string_list(value: object) -> list[str] | None:
    if not isinstance(value, list):
        return None
    return [str(item) for item in value if isinstance(item, (str, int, float))]
