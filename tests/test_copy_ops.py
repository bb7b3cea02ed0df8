"""
Tests for the copy engine — files, trees, overwrite, missing sources.
"""

import os
import shutil
import time
from datetime import datetime
from pathlib import Path

import pytest

from dotsync.core.services.copy_ops import copy_directory, copy_path


class TestCopyFile:
    def test_copies_content(self, tmp_path: Path):
        src = tmp_path / "src" / ".gitconfig"
        src.parent.mkdir()
        src.write_text("[user]\nname=A")
        dst = tmp_path / "dst" / ".gitconfig"

        receipt = copy_path(src, dst)

        assert receipt.ok
        assert receipt.kind == "file"
        assert receipt.files_copied == 1
        assert dst.read_text() == "[user]\nname=A"

    def test_creates_parent_chain(self, tmp_path: Path):
        src = tmp_path / ".ideavimrc"
        src.write_text("set surround")
        dst = tmp_path / "a" / "b" / "c" / ".ideavimrc"

        copy_path(src, dst)

        assert dst.read_text() == "set surround"

    def test_overwrites_existing(self, tmp_path: Path):
        src = tmp_path / "new"
        src.write_text("short")
        dst = tmp_path / "old"
        dst.write_text("a much longer previous content")

        copy_path(src, dst)

        assert dst.read_text() == "short"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["new", "old"]

    def test_preserves_mtime(self, tmp_path: Path):
        src = tmp_path / "src"
        src.write_text("x")
        os.utime(src, (1_000_000_000, 1_000_000_000))
        dst = tmp_path / "dst"

        copy_path(src, dst)

        assert int(dst.stat().st_mtime) == 1_000_000_000

    def test_target_directory_fails(self, tmp_path: Path):
        src = tmp_path / "src"
        src.write_text("x")
        dst = tmp_path / "dst"
        (dst / "inner").mkdir(parents=True)

        with pytest.raises(IsADirectoryError):
            copy_path(src, dst)
        assert (dst / "inner").is_dir()


class TestCopyDirectory:
    def _make_tree(self, root: Path) -> None:
        (root / "lua" / "plugins").mkdir(parents=True)
        (root / "empty" / "nested").mkdir(parents=True)
        (root / "init.lua").write_text("require('plugins')")
        (root / "lua" / "plugins" / "lsp.lua").write_text("return {}")

    def test_reproduces_structure(self, tmp_path: Path):
        src = tmp_path / "nvim"
        self._make_tree(src)
        dst = tmp_path / "home" / ".config" / "nvim"

        receipt = copy_path(src, dst)

        assert receipt.ok
        assert receipt.kind == "directory"
        assert receipt.files_copied == 2
        assert (dst / "init.lua").read_text() == "require('plugins')"
        assert (dst / "lua" / "plugins" / "lsp.lua").read_text() == "return {}"
        assert (dst / "empty" / "nested").is_dir()

    def test_counts_directories_including_root(self, tmp_path: Path):
        src = tmp_path / "nvim"
        self._make_tree(src)

        files, dirs = copy_directory(src, tmp_path / "out")

        # nvim, lua, lua/plugins, empty, empty/nested
        assert (files, dirs) == (2, 5)

    def test_empty_source_directory(self, tmp_path: Path):
        src = tmp_path / "empty"
        src.mkdir()
        dst = tmp_path / "target"

        receipt = copy_path(src, dst)

        assert receipt.ok
        assert dst.is_dir()
        assert list(dst.iterdir()) == []

    def test_additive_never_deletes(self, tmp_path: Path):
        src = tmp_path / "src"
        src.mkdir()
        (src / "a.conf").write_text("new a")
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "a.conf").write_text("old a")
        (dst / "extra.conf").write_text("keep me")

        copy_path(src, dst)

        assert (dst / "a.conf").read_text() == "new a"
        assert (dst / "extra.conf").read_text() == "keep me"

    def test_file_in_place_of_directory_fails(self, tmp_path: Path):
        src = tmp_path / "src"
        (src / "lua").mkdir(parents=True)
        (src / "lua" / "x.lua").write_text("x")
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "lua").write_text("not a directory")

        with pytest.raises(OSError):
            copy_path(src, dst)


class TestMissingSource:
    def test_skipped(self, tmp_path: Path):
        receipt = copy_path(tmp_path / "nope", tmp_path / "target")
        assert receipt.skipped
        assert receipt.kind == "missing"

    def test_target_untouched(self, tmp_path: Path):
        dst = tmp_path / "deep" / "target"
        copy_path(tmp_path / "nope", dst)
        assert not dst.exists()
        assert not dst.parent.exists()

    def test_existing_target_kept(self, tmp_path: Path):
        dst = tmp_path / "target"
        dst.write_text("unchanged")
        copy_path(tmp_path / "nope", dst)
        assert dst.read_text() == "unchanged"


class TestReceiptTiming:
    def test_timestamps_bracket_the_copy(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        real_copyfile = shutil.copyfile

        def slow_copyfile(src, dst, **kwargs):
            time.sleep(0.2)
            return real_copyfile(src, dst, **kwargs)

        monkeypatch.setattr(shutil, "copyfile", slow_copyfile)
        src = tmp_path / "src"
        src.write_text("x")

        receipt = copy_path(src, tmp_path / "dst")

        started = datetime.fromisoformat(receipt.started_at)
        ended = datetime.fromisoformat(receipt.ended_at)
        assert started <= ended
        assert receipt.duration_ms >= 200
        gap_ms = (ended - started).total_seconds() * 1000
        assert abs(gap_ms - receipt.duration_ms) < 1

    def test_skip_is_timed(self, tmp_path: Path):
        receipt = copy_path(tmp_path / "nope", tmp_path / "dst")
        assert receipt.started_at <= receipt.ended_at
        assert receipt.duration_ms >= 0
