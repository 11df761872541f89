from typing import ClassVar

from docmeta.config.settings import Settings
from docmeta.extraction.base import BaseTextExtractor
from docmeta.extraction.exceptions import UnsupportedFormatError
from docmeta.extraction.pdfplumber_adapter import PdfPlumberAdapter
from docmeta.extraction.plain_text_adapter import PlainTextAdapter
from docmeta.extraction.pymupdf_adapter import PyMuPdfAdapter


class TextExtractorFactory:
    """Creates the text extractor for a MIME type based on settings."""

    PDF_ADAPTERS: ClassVar[dict[str, type[BaseTextExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    UNSUPPORTED_MIME_TYPES: ClassVar[frozenset[str]] = frozenset({
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    })

    @classmethod
    def create(cls, settings: Settings, mime_type: str) -> BaseTextExtractor:
        """Pick an adapter; anything that is not PDF, DOCX or an image is read as text.

        Raises:
            ValueError: if the configured PDF engine is unknown.
            UnsupportedFormatError: for DOCX and image files.
        """
        if mime_type == "application/pdf":
            return cls._create_pdf_adapter(settings)
        if mime_type in cls.UNSUPPORTED_MIME_TYPES or mime_type.startswith("image/"):
            raise UnsupportedFormatError(f"No text extractor for MIME type '{mime_type}'")
        return PlainTextAdapter()

    @classmethod
    def _create_pdf_adapter(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()
