"""Tests for ikonik.source_scanner."""

from __future__ import annotations

from pathlib import Path

from ikonik.source_scanner import SourceScanner


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("<svg />", encoding="utf-8")


def test_scan_lists_svg_files_at_any_depth(tmp_path: Path) -> None:
    _touch(tmp_path / "star.svg")
    _touch(tmp_path / "arrows" / "left.svg")
    _touch(tmp_path / "arrows" / "deep" / "up.svg")
    _touch(tmp_path / "notes.txt")
    _touch(tmp_path / "logo.SVG")

    paths = SourceScanner().scan(tmp_path)

    assert sorted(paths) == ["arrows/deep/up.svg", "arrows/left.svg", "star.svg"]


def test_scan_order_is_stable(tmp_path: Path) -> None:
    for name in ("b.svg", "a.svg", "c/z.svg", "c/a.svg"):
        _touch(tmp_path / name)

    first = SourceScanner().scan(tmp_path)

    assert first == SourceScanner().scan(tmp_path)
    assert first == ["a.svg", "b.svg", "c/a.svg", "c/z.svg"]


def test_scan_skips_hidden_entries(tmp_path: Path) -> None:
    _touch(tmp_path / ".hidden.svg")
    _touch(tmp_path / ".cache" / "icon.svg")
    _touch(tmp_path / "visible.svg")

    assert SourceScanner().scan(tmp_path) == ["visible.svg"]


def test_scan_missing_root_returns_empty(tmp_path: Path) -> None:
    assert SourceScanner().scan(tmp_path / "missing") == []


def test_scan_follows_symlinked_directories(tmp_path: Path) -> None:
    shared = tmp_path / "shared"
    _touch(shared / "x.svg")
    root = tmp_path / "icons"
    _touch(root / "a.svg")
    (root / "linked").symlink_to(shared, target_is_directory=True)

    assert SourceScanner().scan(root) == ["a.svg", "linked/x.svg"]


def test_scan_stops_at_symlink_cycles(tmp_path: Path) -> None:
    _touch(tmp_path / "a.svg")
    _touch(tmp_path / "sub" / "b.svg")
    (tmp_path / "sub" / "loop").symlink_to(tmp_path, target_is_directory=True)

    assert SourceScanner().scan(tmp_path) == ["a.svg", "sub/b.svg"]
