from datetime import datetime, timezone
from pathlib import Path

from docmeta.analysis.models import FileAttributes
from docmeta.processor.exceptions import FileReadError
from docmeta.processor.models import LoadedFile


def list_input_files(input_dir: Path) -> list[Path]:
    """Regular, non-hidden files directly under *input_dir*, sorted by name."""
    return sorted(
        path
        for path in input_dir.iterdir()
        if path.is_file() and not path.name.startswith(".")
    )


class FileLoader:
    """Reads a document's bytes and its file attributes."""

    def load(self, path: Path) -> LoadedFile:
        """Read document bytes and stat information from disk.

        The MIME type is left empty; the analysis infers it from the
        file extension.

        Raises:
            FileNotFoundError: if the file does not exist.
            FileReadError: if the file exists but cannot be read.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        try:
            raw_bytes = path.read_bytes()
            stat = path.stat()
        except OSError as exc:
            raise FileReadError(f"Cannot read {path}: {exc}") from exc

        attributes = FileAttributes(
            name=path.name,
            size=stat.st_size,
            last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        )
        return LoadedFile(raw_bytes=raw_bytes, attributes=attributes)
