import io

import pdfplumber

from docmeta.extraction.base import BaseTextExtractor
from docmeta.extraction.exceptions import TextExtractionError


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts text from PDF using pdfplumber, one page per block."""

    def extract(self, raw_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(raw_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise TextExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return "\n".join(pages).strip()
