class ExportError(Exception):
    """Raised when records cannot be serialized in the requested form."""
