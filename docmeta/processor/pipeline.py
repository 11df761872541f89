from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from docmeta.analysis.models import DocumentMetadata, FileAttributes


@dataclass(slots=True)
class PipelineContext:
    path: Path
    raw_bytes: bytes = b""
    attributes: FileAttributes | None = None
    mime_type: str = ""
    extracted_text: str = ""
    metadata: DocumentMetadata | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
