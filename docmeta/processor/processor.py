from collections.abc import Sequence
from pathlib import Path

from docmeta.analysis.assembler import MetadataAssembler
from docmeta.analysis.models import DocumentMetadata
from docmeta.config.settings import Settings
from docmeta.database.repositories.document_metadata_repository import (
    DocumentMetadataRepository,
)
from docmeta.logging.logger import Log
from docmeta.processor.file_loader import FileLoader
from docmeta.processor.pipeline import PipelineContext, PipelineStep
from docmeta.processor.steps import (
    AnalyzeStep,
    ExtractTextStep,
    LoadFileStep,
    PersistMetadataStep,
)


class Processor:
    """Runs the per-document pipeline.

    Pipeline: load -> extract -> analyze [-> persist].
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, path: Path) -> DocumentMetadata:
        """Run every step for one file and return its metadata record.

        The first failing step's exception is logged and re-raised; the
        remaining steps are skipped.
        """
        Log.info(f"Processing {path}")
        context = PipelineContext(path=path)
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                Log.error(f"{type(step).__name__} failed for {path}: {exc}")
                raise

        if context.metadata is None:
            raise ValueError(f"Pipeline finished without metadata for {path}")
        return context.metadata


def build_processor(
    settings: Settings,
    assembler: MetadataAssembler | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    steps: list[PipelineStep] = [
        LoadFileStep(file_loader=FileLoader()),
        ExtractTextStep(settings=settings),
        AnalyzeStep(assembler=assembler or MetadataAssembler()),
    ]
    if settings.persist_results:
        steps.append(PersistMetadataStep(metadata_repo=DocumentMetadataRepository()))
    return Processor(steps=steps)
