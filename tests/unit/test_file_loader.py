import os
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import patch

import pytest

from docmeta.processor.exceptions import FileReadError
from docmeta.processor.file_loader import FileLoader, list_input_files


class TestLoadReturnsBytes:
    def test_returns_bytes_and_attributes(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_bytes(b"hello world")
        os.utime(path, (1_700_000_000, 1_700_000_000))

        loaded = FileLoader().load(path)

        assert loaded.raw_bytes == b"hello world"
        assert loaded.attributes.name == "notes.txt"
        assert loaded.attributes.size == 11
        assert loaded.attributes.mime_type == ""
        assert loaded.attributes.last_modified == datetime.fromtimestamp(
            1_700_000_000, tz=timezone.utc
        )


class TestLoadErrors:
    def test_raises_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="missing.txt"):
            FileLoader().load(tmp_path / "missing.txt")

    def test_wraps_read_errors(self, tmp_path: Path) -> None:
        path = tmp_path / "locked.txt"
        path.write_bytes(b"x")

        with patch.object(Path, "read_bytes", side_effect=PermissionError("denied")):
            with pytest.raises(FileReadError, match="denied"):
                FileLoader().load(path)


class TestListInputFiles:
    def test_sorted_regular_visible_files(self, tmp_path: Path) -> None:
        (tmp_path / "b.txt").write_text("b")
        (tmp_path / "a.pdf").write_text("a")
        (tmp_path / ".hidden").write_text("h")
        (tmp_path / "nested").mkdir()

        assert list_input_files(tmp_path) == [tmp_path / "a.pdf", tmp_path / "b.txt"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert list_input_files(tmp_path) == []
