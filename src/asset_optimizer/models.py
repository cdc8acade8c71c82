from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_ASSET_TYPES = (
    "png",
    "jpg",
    "jpeg",
    "svg",
    "webp",
    "gif",
    "ttf",
    "otf",
    "json",
    "pdf",
)
DEFAULT_COMPRESSION_QUALITY = 80


@dataclass(frozen=True)
class Config:
    asset_types: tuple[str, ...] = DEFAULT_ASSET_TYPES
    ignore_patterns: tuple[str, ...] = ()
    compression_quality: int = DEFAULT_COMPRESSION_QUALITY


@dataclass(frozen=True)
class AssetSummary:
    declared: tuple[str, ...]
    used: frozenset[str]
    unused: tuple[str, ...]
    sizes: dict[str, int] = field(default_factory=dict)
    unused_sizes: dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.sizes.values())

    @property
    def wasted(self) -> int:
        return sum(self.unused_sizes.values())


@dataclass(frozen=True)
class OptimizeResult:
    deleted_bytes: int
    compressed_bytes: int
