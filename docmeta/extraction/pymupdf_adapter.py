import pymupdf

from docmeta.extraction.base import BaseTextExtractor
from docmeta.extraction.exceptions import TextExtractionError


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts text from PDF using PyMuPDF, one page per block."""

    def extract(self, raw_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=raw_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise TextExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return "\n".join(pages).strip()
