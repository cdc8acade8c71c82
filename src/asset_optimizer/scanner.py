"""Lexical detection of asset paths referenced from Dart sources.

Only quoted string literals are recognized. Paths assembled at runtime
through concatenation, interpolation or variables are never reported.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

SOURCE_EXTENSIONS = {".dart"}
ASSET_PREFIXES = ("assets/", "asset/")
REFERENCE_PATTERNS = [
    re.compile(r"""AssetImage\s*\(\s*['"]([^'"]+)['"]\s*\)"""),
    re.compile(r"""Image\.asset\s*\(\s*['"]([^'"]+)['"]\s*\)"""),
    re.compile(r"""rootBundle\.load(?:String)?\s*\(\s*['"]([^'"]+)['"]\s*\)"""),
    re.compile(
        r"""['"](assets?/[^'"]+\.(?:png|jpe?g|webp|gif|svg|ttf|otf|json|pdf|yaml|yml))['"]""",
        re.IGNORECASE,
    ),
]

logger = logging.getLogger(__name__)


def find_asset_references(source_dir: Path, ignore_patterns: Iterable[str]) -> set[str]:
    used: set[str] = set()
    for rel_path, content in iter_source_files(source_dir, ignore_patterns):
        found = extract_references(content)
        logger.debug("%s: %d asset reference(s)", rel_path, len(found))
        used.update(found)
    return used


def iter_source_files(
    source_dir: Path, ignore_patterns: Iterable[str]
) -> Iterator[tuple[str, str]]:
    """Yield ``(rel_path, text)`` for every source file not ignored.

    ``rel_path`` is relative to ``source_dir`` with POSIX separators and is
    what the ignore patterns are searched against.
    """
    if not source_dir.is_dir():
        return
    ignore = [re.compile(pattern, re.IGNORECASE) for pattern in ignore_patterns]
    for dirpath, dirnames, filenames in os.walk(source_dir):
        dirnames.sort()
        for name in sorted(filenames):
            full_path = Path(dirpath) / name
            if full_path.suffix not in SOURCE_EXTENSIONS or not full_path.is_file():
                continue
            rel_path = full_path.relative_to(source_dir).as_posix()
            if any(regex.search(rel_path) for regex in ignore):
                logger.debug("Ignoring %s", rel_path)
                continue
            yield rel_path, full_path.read_text(encoding="utf-8")


def extract_references(content: str) -> set[str]:
    found: set[str] = set()
    for pattern in REFERENCE_PATTERNS:
        for match in pattern.finditer(content):
            path = match.group(1)
            if path.startswith("./"):
                path = path[2:]
            if path.startswith(ASSET_PREFIXES):
                found.add(path)
    return found
