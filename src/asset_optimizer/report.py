from __future__ import annotations

from datetime import datetime
from pathlib import Path

from asset_optimizer.models import AssetSummary

REPORT_FILENAME = "asset_optimizer_report.txt"


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1048576:
        return f"{size / 1024:.1f} KB"
    return f"{size / 1048576:.2f} MB"


def render_preview(summary: AssetSummary) -> str:
    lines = [
        "",
        f"Found {len(summary.unused)} unused assets → {format_size(summary.wasted)} wasted",
    ]
    if not summary.unused:
        lines.append("All assets are used!")
    else:
        lines.extend(f"  {line}" for line in _asset_lines(summary))
    return "\n".join(lines)


def render_report(summary: AssetSummary, now: datetime) -> str:
    header = f"Unused assets ({now.isoformat(sep=' ')}):"
    return header + "\n" + "\n".join(_asset_lines(summary)) + "\n"


def write_report(root: Path, summary: AssetSummary, now: datetime | None = None) -> Path:
    report_path = root / REPORT_FILENAME
    report_path.write_text(
        render_report(summary, now or datetime.now()), encoding="utf-8"
    )
    return report_path


def _asset_lines(summary: AssetSummary) -> list[str]:
    return [
        f"• {path} ({format_size(summary.unused_sizes.get(path, 0))})"
        for path in summary.unused
    ]
