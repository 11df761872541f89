from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all text extraction adapters."""

    @abstractmethod
    def extract(self, raw_bytes: bytes) -> str:
        """Extract plain text from raw file content.

        Args:
            raw_bytes: File content as read from disk.

        Returns:
            Extracted text as a single string.

        Raises:
            TextExtractionError: if extraction fails for any reason.
        """
