"""Tests for deriving tags from file metadata."""

import importlib
import os
import sys
from pathlib import Path

import pytest

import etag
from etag import EntityTag, InvalidFormatError, from_file_meta, from_stat


class TestFromFileMeta:
    """Tests for from_file_meta()."""

    def test_format(self) -> None:
        assert from_file_meta(1700000000, 42) == EntityTag.strong("1700000000-42")

    def test_opaque_modified(self) -> None:
        assert from_file_meta("1700000000.5", 0).tag == "1700000000.5-0"

    def test_negative_size(self) -> None:
        with pytest.raises(ValueError, match="must not be negative"):
            from_file_meta(1, -1)

    def test_non_int_size(self) -> None:
        with pytest.raises(ValueError, match="size must be an int"):
            from_file_meta(1, "5")  # type: ignore[arg-type]

    def test_bool_size(self) -> None:
        with pytest.raises(ValueError, match="size must be an int"):
            from_file_meta(1, True)

    def test_modified_outside_etagc(self) -> None:
        with pytest.raises(InvalidFormatError):
            from_file_meta("a b", 1)

    def test_parses_back(self) -> None:
        result = from_file_meta(1700000000.25, 7)
        assert EntityTag.parse(result.to_string()) == result


class TestFeatureFlag:
    """Tests for the optional file metadata capability."""

    def test_enabled(self) -> None:
        assert etag.FILE_METADATA_SUPPORTED is True
        assert "from_file_meta" in etag.__all__
        assert "from_stat" in etag.__all__

    def test_disabled_without_stat(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delattr(os, "stat_result")
        monkeypatch.delitem(sys.modules, "etag")
        monkeypatch.delitem(sys.modules, "etag.metadata")

        reloaded = importlib.import_module("etag")

        assert reloaded.FILE_METADATA_SUPPORTED is False
        assert "from_file_meta" not in reloaded.__all__
        assert "from_stat" not in reloaded.__all__
        for name in reloaded.__all__:
            assert hasattr(reloaded, name)
        assert reloaded.EntityTag.parse('"x"').tag == "x"


class TestFromStat:
    """Tests for from_stat()."""

    def test_format(self, tmp_path: Path) -> None:
        path = tmp_path / "data.txt"
        path.write_bytes(b"hello")
        stat = os.stat(path)

        result = from_stat(stat)

        seconds, nanos = divmod(stat.st_mtime_ns, 1_000_000_000)
        assert result == EntityTag.strong(f"{seconds}.{nanos}-5")

    def test_changes_with_size(self, tmp_path: Path) -> None:
        path = tmp_path / "data.txt"
        path.write_bytes(b"hello")
        before = from_stat(os.stat(path))
        mtime_ns = os.stat(path).st_mtime_ns
        path.write_bytes(b"hello world")
        os.utime(path, ns=(mtime_ns, mtime_ns))
        after = from_stat(os.stat(path))
        assert before != after
        assert before.tag.split("-")[0] == after.tag.split("-")[0]

    def test_parses_back(self, tmp_path: Path) -> None:
        path = tmp_path / "data.txt"
        path.write_bytes(b"")
        result = from_stat(os.stat(path))
        assert EntityTag.parse(str(result)) == result
