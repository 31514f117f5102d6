"""Tests for the transfer engine: copy, cut and paste."""

import os

import pytest

from core.clipboard import Action, FailureRecord
from core.transfer import drop_failed, paste, transfer_item, transfer_items
from helpers import read, write


class TestCopy:
    def test_copies_files_and_keeps_sources(self, workdir, staging, make_ctx):
        write(workdir / "a.txt", "a")
        write(workdir / "b.txt", "b")

        failures = transfer_items(make_ctx(Action.COPY, "a.txt", "b.txt"))

        assert failures == []
        assert read(staging / "a.txt") == "a"
        assert read(staging / "b.txt") == "b"
        assert (workdir / "a.txt").exists()

    def test_directory_lands_under_parent_name(self, workdir, staging, make_ctx):
        write(workdir / "src" / "proj" / "main.py", "print()")

        failures = transfer_items(make_ctx(Action.COPY, "src/proj"))

        assert failures == []
        assert read(staging / "src" / "main.py") == "print()"

    def test_directory_with_trailing_separator(self, workdir, staging, make_ctx):
        write(workdir / "proj" / "main.py")

        transfer_items(make_ctx(Action.COPY, "proj/"))

        assert (staging / "proj" / "main.py").exists()

    def test_symlinks_stay_links(self, workdir, staging, make_ctx):
        write(workdir / "proj" / "real.txt")
        (workdir / "proj" / "alias.txt").symlink_to("real.txt")

        transfer_items(make_ctx(Action.COPY, "proj/"))

        assert (staging / "proj" / "alias.txt").is_symlink()
        assert os.readlink(staging / "proj" / "alias.txt") == "real.txt"

    def test_failure_does_not_stop_batch(self, workdir, staging, make_ctx):
        write(workdir / "ok.txt")

        failures = transfer_items(make_ctx(Action.COPY, "missing.txt", "ok.txt"))

        assert [f.path for f in failures] == ["missing.txt"]
        assert isinstance(failures[0].error, FileNotFoundError)
        assert failures[0].reason == "No such file or directory"
        assert (staging / "ok.txt").exists()


class TestCut:
    def test_moves_file(self, workdir, staging, make_ctx):
        write(workdir / "report.txt", "r")

        failures = transfer_items(make_ctx(Action.CUT, "report.txt"))

        assert failures == []
        assert not (workdir / "report.txt").exists()
        assert read(staging / "report.txt") == "r"

    def test_moves_directory(self, workdir, staging, make_ctx):
        write(workdir / "src" / "proj" / "main.py")

        failures = transfer_items(make_ctx(Action.CUT, "src/proj"))

        assert failures == []
        assert not (workdir / "src" / "proj").exists()
        assert (staging / "src" / "main.py").exists()

    def test_missing_item_is_recorded(self, workdir, make_ctx):
        result = transfer_item(make_ctx(Action.CUT, "ghost.txt"), "ghost.txt")

        assert not result.ok
        assert isinstance(result.error, FileNotFoundError)


class TestPaste:
    def test_copies_whole_staging_area(self, workdir, staging, make_ctx):
        write(staging / "a.txt", "a")
        write(staging / "dir" / "b.txt", "b")
        (staging / "link").symlink_to("a.txt")
        write(workdir / "a.txt", "old")

        assert paste(make_ctx(Action.PASTE), workdir) is True

        assert read(workdir / "a.txt") == "a"
        assert read(workdir / "dir" / "b.txt") == "b"
        assert (workdir / "link").is_symlink()
        assert read(staging / "a.txt") == "a"

    def test_empty_staging_area_fails(self, workdir, make_ctx):
        assert paste(make_ctx(Action.PASTE), workdir) is False

    def test_transfer_items_rejects_paste(self, make_ctx):
        with pytest.raises(ValueError):
            transfer_items(make_ctx(Action.PASTE))


class TestDropFailed:
    def test_removes_every_occurrence(self, make_ctx):
        ctx = make_ctx(Action.COPY, "a", "bad", "b", "bad")
        failures = [FailureRecord("bad", FileNotFoundError(2, "No such file or directory"))]

        narrowed = drop_failed(ctx, failures)

        assert narrowed.items == ["a", "b"]
        assert ctx.items == ["a", "bad", "b", "bad"]
