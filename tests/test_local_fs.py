"""Tests for the local-disk adapter (infra/local_fs.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from peer_drift.infra.local_fs import LocalFileSystem


class TestLocalFileSystem:
    def test_read_text_utf8(self, tmp_path: Path) -> None:
        target = tmp_path / "package.json"
        target.write_text('{"name": "café"}', encoding="utf-8")
        assert LocalFileSystem().read_text(target) == '{"name": "café"}'

    def test_read_missing_raises_oserror(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            LocalFileSystem().read_text(tmp_path / "nope.json")

    def test_list_dir(self, tmp_path: Path) -> None:
        (tmp_path / "a").mkdir()
        (tmp_path / "b").mkdir()
        assert sorted(LocalFileSystem().list_dir(tmp_path)) == ["a", "b"]

    def test_list_missing_dir_raises_oserror(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            LocalFileSystem().list_dir(tmp_path / "missing")

    def test_exists(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        assert fs.exists(tmp_path)
        assert not fs.exists(tmp_path / "missing")
