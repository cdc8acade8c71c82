from __future__ import annotations

from pathlib import Path

from asset_optimizer.analyzer import analyze, calculate_sizes, find_unused
from asset_optimizer.models import Config
from asset_optimizer.optimizer import delete_unused


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


def _manifest(*assets: str) -> dict[str, object]:
    return {"name": "app", "flutter": {"assets": list(assets)}}


def test_unused_is_declared_minus_referenced(tmp_path: Path) -> None:
    _write(tmp_path / "lib" / "main.dart", 'final logo = AssetImage("assets/logo.png");\n')

    summary = analyze(tmp_path, _manifest("assets/logo.png", "assets/icons/a.svg"), Config())

    assert summary.unused == ("assets/icons/a.svg",)
    assert "assets/logo.png" in summary.used


def test_find_unused_preserves_declared_order() -> None:
    declared = ["assets/c.png", "assets/a.png", "assets/b.png", "assets/d.png"]
    used = {"assets/a.png", "assets/extra.png"}

    unused = find_unused(declared, used)

    assert unused == ["assets/c.png", "assets/b.png", "assets/d.png"]
    assert not set(unused) & used


def test_calculate_sizes_omits_missing(tmp_path: Path) -> None:
    _write(tmp_path / "assets" / "a.json", "12345")
    (tmp_path / "assets" / "dir.png").mkdir()

    sizes = calculate_sizes(tmp_path, ["assets/a.json", "assets/missing.png", "assets/dir.png"])

    assert sizes == {"assets/a.json": 5}


def test_totals_are_sums_of_size_maps(tmp_path: Path) -> None:
    _write(tmp_path / "assets" / "used.json", "x" * 10)
    _write(tmp_path / "assets" / "unused.json", "x" * 30)
    _write(tmp_path / "lib" / "main.dart", "rootBundle.loadString('assets/used.json');")

    summary = analyze(
        tmp_path,
        _manifest("assets/used.json", "assets/unused.json", "assets/gone.json"),
        Config(),
    )

    assert summary.total == 40 == sum(summary.sizes.values())
    assert summary.wasted == 30 == sum(summary.unused_sizes.values())
    assert "assets/gone.json" not in summary.sizes
    assert summary.unused == ("assets/unused.json", "assets/gone.json")


def test_no_declared_assets_skips_scan(tmp_path: Path) -> None:
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "broken.dart").write_bytes(b"\xff\xfe")

    summary = analyze(tmp_path, {"name": "app"}, Config())

    assert summary.declared == ()
    assert summary.total == 0


def test_ignore_patterns_from_config(tmp_path: Path) -> None:
    _write(tmp_path / "lib" / "generated" / "assets.g.dart", "const a = 'assets/a.png';")

    summary = analyze(
        tmp_path,
        _manifest("assets/a.png"),
        Config(ignore_patterns=("generated",)),
    )

    assert summary.unused == ("assets/a.png",)


def test_deleted_path_leaves_size_map(tmp_path: Path) -> None:
    _write(tmp_path / "assets" / "a.json", "{}")

    delete_unused(tmp_path, ["assets/a.json"])

    assert "assets/a.json" not in calculate_sizes(tmp_path, ["assets/a.json"])
