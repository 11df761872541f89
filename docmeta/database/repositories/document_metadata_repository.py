from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from docmeta.analysis.models import DocumentMetadata
from docmeta.database.connection import get_connection
from docmeta.export.exporter import to_dict
from docmeta.processor.exceptions import DocumentNotFoundError


class DocumentMetadataRepository:
    """Database operations for the document_metadata table."""

    def ensure_table(self) -> None:
        """Create the document_metadata table if it does not exist yet."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    CREATE TABLE IF NOT EXISTS document_metadata (
                        id TEXT PRIMARY KEY,
                        filename TEXT NOT NULL,
                        mime_type TEXT NOT NULL,
                        payload JSONB NOT NULL,
                        created_at TIMESTAMPTZ NOT NULL
                    )
                    """
                )
            conn.commit()

    def save(self, metadata: DocumentMetadata) -> None:
        """Insert a metadata record; re-saving the same id replaces the payload."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO document_metadata (id, filename, mime_type, payload, created_at)
                    VALUES (%s, %s, %s, %s, %s)
                    ON CONFLICT (id) DO UPDATE
                    SET filename = EXCLUDED.filename,
                        mime_type = EXCLUDED.mime_type,
                        payload = EXCLUDED.payload
                    """,
                    (
                        metadata.id,
                        metadata.filename,
                        metadata.file_type,
                        Jsonb(to_dict(metadata)),
                        metadata.upload_date,
                    ),
                )
            conn.commit()

    def find_by_id(self, metadata_id: str) -> dict[str, Any]:
        """Return the stored payload of a metadata record.

        Raises:
            DocumentNotFoundError: if no record with this id exists.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    "SELECT payload FROM document_metadata WHERE id = %s",
                    (metadata_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document metadata {metadata_id} not found")
        payload: dict[str, Any] = row["payload"]
        return payload
