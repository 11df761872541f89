from docmeta.extraction.base import BaseTextExtractor


class PlainTextAdapter(BaseTextExtractor):
    """Decodes UTF-8 text; undecodable bytes become U+FFFD."""

    def extract(self, raw_bytes: bytes) -> str:
        return raw_bytes.decode("utf-8-sig", errors="replace")
