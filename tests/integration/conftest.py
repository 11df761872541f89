import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from docmeta.config.settings import Settings
from docmeta.database.connection import close_pool, get_connection, init_pool
from docmeta.database.repositories.document_metadata_repository import (
    DocumentMetadataRepository,
)


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "docmeta_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        DocumentMetadataRepository().ensure_table()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(integration_pool: None) -> Generator[list[str], None, None]:
    cleanup: list[str] = []
    yield cleanup
    if not cleanup:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            for metadata_id in cleanup:
                cur.execute("DELETE FROM document_metadata WHERE id = %s", (metadata_id,))
        conn.commit()


@pytest.fixture
def files_root(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def documents_on_disk(
    files_root: Path,
    report_text: str,
    sample_pdf_bytes: bytes,
) -> Path:
    (files_root / "report.txt").write_text(report_text, encoding="utf-8")
    (files_root / "review.pdf").write_bytes(sample_pdf_bytes)
    return files_root
