class TextExtractionError(Exception):
    """Raised when text cannot be extracted from a file."""


class UnsupportedFormatError(TextExtractionError):
    """Raised when no extractor handles the file's MIME type."""
