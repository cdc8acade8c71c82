"""Destructive operations: deleting unused assets and recompressing images.

Both passes skip entries that no longer exist and never raise for a single
bad asset. Compression only rewrites a file when the new encoding is
strictly smaller, so running it repeatedly converges to no savings.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from io import BytesIO
from pathlib import Path

from PIL import Image

from asset_optimizer.models import DEFAULT_COMPRESSION_QUALITY, AssetSummary, OptimizeResult
from asset_optimizer.report import format_size

PNG_EXTENSIONS = (".png",)
JPEG_EXTENSIONS = (".jpg", ".jpeg")
JPEG_MODES = {"1", "L", "RGB", "CMYK"}

logger = logging.getLogger(__name__)


def optimize(root: Path, summary: AssetSummary, quality: int) -> OptimizeResult:
    deleted = delete_unused(root, summary.unused)
    compressed = compress_assets(root, summary.declared, quality)
    return OptimizeResult(deleted_bytes=deleted, compressed_bytes=compressed)


def delete_unused(root: Path, unused: Iterable[str]) -> int:
    freed = 0
    for rel_path in unused:
        file_path = root / rel_path
        if not file_path.is_file():
            continue
        freed += file_path.stat().st_size
        file_path.unlink()
        print(f"Deleted: {rel_path}")
    return freed


def compress_assets(
    root: Path, assets: Iterable[str], quality: int = DEFAULT_COMPRESSION_QUALITY
) -> int:
    saved = 0
    for rel_path in assets:
        lowered = rel_path.lower()
        if not lowered.endswith(PNG_EXTENSIONS + JPEG_EXTENSIONS):
            continue
        file_path = root / rel_path
        if not file_path.is_file():
            continue
        original = file_path.read_bytes()
        image = _decode(original)
        if image is None:
            logger.debug("Skipping undecodable image %s", rel_path)
            continue
        if getattr(image, "is_animated", False):
            logger.debug("Skipping animated image %s", rel_path)
            continue
        if lowered.endswith(PNG_EXTENSIONS):
            encoded = encode_png(image, png_compress_level(quality))
        else:
            encoded = encode_jpeg(image, quality)
        if len(encoded) >= len(original):
            logger.debug("No gain for %s", rel_path)
            continue
        file_path.write_bytes(encoded)
        delta = len(original) - len(encoded)
        saved += delta
        print(f"Compressed: {rel_path} → saved {format_size(delta)}")
    return saved


def png_compress_level(quality: int) -> int:
    return max(0, min(9, (100 - quality) // 11))


def encode_png(image: Image.Image, level: int) -> bytes:
    buffer = BytesIO()
    image.save(buffer, format="PNG", compress_level=level, **_metadata(image))
    return buffer.getvalue()


def encode_jpeg(image: Image.Image, quality: int) -> bytes:
    metadata = _metadata(image)
    if image.mode not in JPEG_MODES:
        image = image.convert("RGB")
    buffer = BytesIO()
    image.save(buffer, format="JPEG", quality=quality, **metadata)
    return buffer.getvalue()


def _decode(data: bytes) -> Image.Image | None:
    try:
        image = Image.open(BytesIO(data))
        image.load()
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError):
        return None
    return image


def _metadata(image: Image.Image) -> dict[str, bytes]:
    """EXIF and ICC payloads to carry over into the re-encoded file."""
    return {
        key: image.info[key]
        for key in ("exif", "icc_profile")
        if image.info.get(key)
    }
