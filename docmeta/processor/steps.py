from docmeta.analysis.assembler import MetadataAssembler
from docmeta.analysis.technical_metadata import resolve_mime_type
from docmeta.config.settings import Settings
from docmeta.database.repositories.document_metadata_repository import (
    DocumentMetadataRepository,
)
from docmeta.extraction.factory import TextExtractorFactory
from docmeta.logging.logger import Log
from docmeta.processor.file_loader import FileLoader
from docmeta.processor.pipeline import PipelineContext, PipelineStep


class LoadFileStep(PipelineStep):
    def __init__(self, file_loader: FileLoader) -> None:
        self._file_loader = file_loader

    def run(self, context: PipelineContext) -> PipelineContext:
        loaded = self._file_loader.load(context.path)
        context.raw_bytes = loaded.raw_bytes
        context.attributes = loaded.attributes
        context.mime_type = resolve_mime_type(
            loaded.attributes.name, loaded.attributes.mime_type
        )
        Log.info(f"Loaded {len(loaded.raw_bytes)} bytes from {context.path}")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def run(self, context: PipelineContext) -> PipelineContext:
        extractor = TextExtractorFactory.create(self._settings, context.mime_type)
        context.extracted_text = extractor.extract(context.raw_bytes)
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from {context.path}",
            mime_type=context.mime_type,
        )
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, assembler: MetadataAssembler) -> None:
        self._assembler = assembler

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.attributes is None:
            raise ValueError("PipelineContext.attributes must be set before analysis")
        context.metadata = self._assembler.assemble(context.extracted_text, context.attributes)
        return context


class PersistMetadataStep(PipelineStep):
    def __init__(self, metadata_repo: DocumentMetadataRepository) -> None:
        self._metadata_repo = metadata_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.metadata is None:
            raise ValueError("PipelineContext.metadata must be set before persist")
        self._metadata_repo.save(context.metadata)
        Log.info(f"Persisted metadata {context.metadata.id} for {context.path}")
        return context
