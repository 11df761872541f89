from dataclasses import dataclass

from docmeta.analysis.models import FileAttributes


@dataclass(frozen=True)
class LoadedFile:
    """Raw content of a file plus the attributes the analysis needs."""

    raw_bytes: bytes
    attributes: FileAttributes
