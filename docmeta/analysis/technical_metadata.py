import math
import re

from docmeta.analysis.lexicons import DEFAULT_MIME_TYPE, EXTENSION_MIME_TYPES
from docmeta.analysis.models import Dimensions, FileAttributes, TechnicalMetadata

_MIME_RE = re.compile(r"[\w.+-]+/[\w.+-]+")

PDF_MIME_TYPE = "application/pdf"
BYTES_PER_PAGE = 50_000
PLACEHOLDER_DIMENSIONS = Dimensions(width=1920, height=1080)


def infer_mime_type(filename: str) -> str:
    """Look up the MIME type for a filename's extension."""
    _, dot, extension = filename.rpartition(".")
    if not dot:
        return DEFAULT_MIME_TYPE
    return EXTENSION_MIME_TYPES.get(extension.lower(), DEFAULT_MIME_TYPE)


def resolve_mime_type(filename: str, mime_type: str) -> str:
    """Return the declared MIME type, or the extension-inferred one when it is blank or malformed.

    Parameters such as "; charset=utf-8" are dropped from the declared type.
    """
    declared = mime_type.split(";", 1)[0].strip().lower()
    if _MIME_RE.fullmatch(declared):
        return declared
    return infer_mime_type(filename)


def build_technical_metadata(attributes: FileAttributes, mime_type: str) -> TechnicalMetadata:
    page_count = None
    if mime_type == PDF_MIME_TYPE:
        page_count = math.ceil(max(attributes.size, 0) / BYTES_PER_PAGE)

    dimensions = PLACEHOLDER_DIMENSIONS if mime_type.startswith("image/") else None

    return TechnicalMetadata(
        mime_type=mime_type,
        creation_date=attributes.last_modified,
        modification_date=attributes.last_modified,
        page_count=page_count,
        dimensions=dimensions,
    )
