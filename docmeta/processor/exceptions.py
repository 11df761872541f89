class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class DocumentNotFoundError(ProcessorError):
    """Raised when a stored metadata record cannot be found in the database."""


class FileReadError(ProcessorError):
    """Raised when a file cannot be read from disk."""
