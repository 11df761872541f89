from dataclasses import dataclass, field
from pathlib import Path

from docmeta.analysis.models import DocumentMetadata


@dataclass(frozen=True)
class DocumentFailure:
    """A document that could not be analyzed, with the reason."""

    path: Path
    error: str


@dataclass
class BatchReport:
    """Outcome of one batch run, in input order."""

    succeeded: list[DocumentMetadata] = field(default_factory=list)
    failed: list[DocumentFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)
