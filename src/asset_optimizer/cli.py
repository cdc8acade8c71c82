from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Iterable
from pathlib import Path

import yaml

from asset_optimizer import __version__
from asset_optimizer.analyzer import analyze
from asset_optimizer.config import CONFIG_FILENAME, load_config
from asset_optimizer.manifest import MANIFEST_FILENAME, load_manifest
from asset_optimizer.optimizer import optimize
from asset_optimizer.report import format_size, render_preview, write_report


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        print(f"Error: {message}\n", file=sys.stderr)
        self.print_usage(sys.stderr)
        raise SystemExit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="asset-optimizer",
        description=(
            "Find assets declared in pubspec.yaml that nothing under lib/ references. "
            "Optimize mode deletes them and recompresses PNG/JPEG images; "
            "it requires --confirm."
        ),
    )
    parser.add_argument(
        "-p",
        "--preview",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Print unused assets and wasted bytes (default)",
    )
    parser.add_argument(
        "-o",
        "--optimize",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Delete unused assets and recompress images (requires --confirm)",
    )
    parser.add_argument(
        "-r",
        "--report",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Also write asset_optimizer_report.txt",
    )
    parser.add_argument(
        "-c",
        "--confirm",
        action="store_true",
        help="Confirm optimize mode (required with --optimize)",
    )
    parser.add_argument("--path", default=".", help="Flutter project directory")
    parser.add_argument(
        "--config",
        default=CONFIG_FILENAME,
        help="Settings file, relative to --path",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped files")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    _configure_logging(args.verbose)

    root = Path(args.path).resolve()
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Path does not exist or is not a directory: {root}")

    config = load_config(root / args.config)
    manifest_path = root / MANIFEST_FILENAME
    try:
        manifest = load_manifest(manifest_path)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Unable to read manifest {manifest_path}: {exc}") from exc

    try:
        summary = analyze(root, manifest, config)
    except re.error as exc:
        raise SystemExit(f"Invalid ignore pattern {exc.pattern!r}: {exc}") from exc
    if not summary.declared:
        print(f"No assets declared in {MANIFEST_FILENAME}")
        return 0

    if args.preview or args.report:
        print(render_preview(summary))
    if args.report:
        report_path = write_report(root, summary)
        print(f"Report saved → {report_path}")

    if args.optimize:
        if not args.confirm:
            print("Use --confirm to actually delete and compress")
            return 0
        result = optimize(root, summary, config.compression_quality)
        print(
            f"\nDone! Deleted: {format_size(result.deleted_bytes)} | "
            f"Compressed: {format_size(result.compressed_bytes)}"
        )
    return 0


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    raise SystemExit(main())
