"""Serializes DocumentMetadata records to JSON, XML and CSV.

Formatting only: no analysis happens here. Every format accepts an
optional ``fields`` selection using the record's attribute names.
"""

from __future__ import annotations

import csv
import io
import json
import re
import xml.etree.ElementTree as ET
from collections.abc import Callable, Sequence
from dataclasses import asdict, fields as dataclass_fields
from datetime import datetime
from enum import Enum
from typing import Any

from docmeta.analysis.models import DocumentMetadata
from docmeta.export.exceptions import ExportError

ALL_FIELDS: tuple[str, ...] = tuple(f.name for f in dataclass_fields(DocumentMetadata))

XML_DEFAULT_FIELDS: tuple[str, ...] = (
    "id", "filename", "file_type", "title", "author", "subject", "summary",
    "language", "word_count", "readability_score", "keywords", "entities",
)

CSV_COLUMNS: dict[str, str] = {
    "id": "ID",
    "filename": "Filename",
    "file_type": "File Type",
    "title": "Title",
    "author": "Author",
    "subject": "Subject",
    "language": "Language",
    "word_count": "Word Count",
    "character_count": "Character Count",
    "readability_score": "Readability Score",
    "keywords": "Keywords",
    "summary": "Summary",
    "sentiment": "Sentiment",
    "upload_date": "Upload Date",
}

# Fields that have no single-value rendering in XML/CSV.
_NESTED_FIELDS = frozenset({"topics", "structure", "technical_metadata"})

# Characters outside the XML 1.0 Char production.
_XML_ILLEGAL_RE = re.compile(
    "[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def to_dict(metadata: DocumentMetadata, fields: Sequence[str] | None = None) -> dict[str, Any]:
    """Convert a record to plain JSON-compatible data."""
    selected = _select(fields, ALL_FIELDS, ALL_FIELDS)
    data = asdict(metadata)
    return {name: _plain(data[name]) for name in selected}


def to_json(records: Sequence[DocumentMetadata], fields: Sequence[str] | None = None) -> str:
    return json.dumps([to_dict(record, fields) for record in records], indent=2, ensure_ascii=False)


def to_xml(records: Sequence[DocumentMetadata], fields: Sequence[str] | None = None) -> str:
    allowed = tuple(name for name in ALL_FIELDS if name not in _NESTED_FIELDS)
    selected = _select(fields, allowed, XML_DEFAULT_FIELDS)

    root = ET.Element("documents")
    for record in records:
        document = ET.SubElement(root, "document")
        for name in selected:
            if name == "keywords":
                keywords = ET.SubElement(document, "keywords")
                for keyword in record.keywords:
                    ET.SubElement(keywords, "keyword").text = _xml_text(keyword)
            elif name == "entities":
                entities = ET.SubElement(document, "entities")
                for entity in record.entities:
                    element = ET.SubElement(
                        entities,
                        "entity",
                        type=_xml_text(entity.type.value),
                        confidence=_xml_text(str(entity.confidence)),
                    )
                    element.text = _xml_text(entity.text)
            else:
                ET.SubElement(document, _camel_case(name)).text = _xml_text(_scalar(record, name))

    ET.indent(root)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(root, encoding="unicode")


def to_csv(records: Sequence[DocumentMetadata], fields: Sequence[str] | None = None) -> str:
    """One header row plus one row per record; values quoted only when needed."""
    selected = _select(fields, tuple(CSV_COLUMNS), tuple(CSV_COLUMNS))

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow([CSV_COLUMNS[name] for name in selected])
    for record in records:
        writer.writerow([_scalar(record, name) for name in selected])
    return buffer.getvalue()


EXPORTERS: dict[str, Callable[[Sequence[DocumentMetadata], Sequence[str] | None], str]] = {
    "json": to_json,
    "xml": to_xml,
    "csv": to_csv,
}


def get_exporter(
    export_format: str,
) -> Callable[[Sequence[DocumentMetadata], Sequence[str] | None], str]:
    """Look up the serializer for a format name, case-insensitively.

    Raises:
        ExportError: if the format is unknown.
    """
    exporter = EXPORTERS.get(export_format.lower())
    if exporter is None:
        raise ExportError(
            f"Unknown export format '{export_format}'. Choose from: {list(EXPORTERS)}"
        )
    return exporter


def export(
    records: Sequence[DocumentMetadata],
    export_format: str,
    fields: Sequence[str] | None = None,
) -> str:
    """Serialize *records* in the named format.

    Raises:
        ExportError: on an unknown format or field name.
    """
    return get_exporter(export_format)(records, fields)


def _select(
    fields: Sequence[str] | None,
    allowed: Sequence[str],
    default: Sequence[str],
) -> tuple[str, ...]:
    if fields is None:
        return tuple(default)
    unknown = [name for name in fields if name not in allowed]
    if unknown:
        raise ExportError(f"Unsupported field(s) for this format: {unknown}")
    return tuple(fields)


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _scalar(record: DocumentMetadata, name: str) -> str:
    value = getattr(record, name)
    if name == "keywords":
        return "; ".join(value)
    if name == "entities":
        return "; ".join(entity.text for entity in value)
    if name == "sentiment":
        return value.overall.value
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _xml_text(value: str) -> str:
    """Replace characters XML 1.0 cannot carry (form feeds, NUL, ...) with spaces."""
    return _XML_ILLEGAL_RE.sub(" ", value)


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)
