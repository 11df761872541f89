import sys
from collections.abc import Sequence
from pathlib import Path

from docmeta.config.settings import Settings
from docmeta.database.connection import close_pool, init_pool
from docmeta.database.repositories.document_metadata_repository import (
    DocumentMetadataRepository,
)
from docmeta.export.exporter import export, get_exporter
from docmeta.logging.logger import Log
from docmeta.processor.file_loader import list_input_files
from docmeta.processor.processor import build_processor
from docmeta.worker.batch_runner import BatchRunner


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> pool -> build dependencies -> batch -> export.

    Paths given on the command line are analyzed; without any, every file
    in ``input_dir`` is. Returns 1 when at least one document failed.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    settings = Settings()
    # stdout carries the export.
    Log.configure(settings.log_level, stream=sys.stderr)
    # Reject an unknown export format before any document is analyzed.
    get_exporter(settings.export_format)

    if settings.persist_results:
        init_pool(settings)

    try:
        if settings.persist_results:
            DocumentMetadataRepository().ensure_table()
        paths = [Path(arg) for arg in args] or list_input_files(Path(settings.input_dir))
        processor = build_processor(settings)
        report = BatchRunner(processor, settings).run(paths)
    finally:
        if settings.persist_results:
            close_pool()

    output = export(report.succeeded, settings.export_format)
    if settings.output_path:
        Path(settings.output_path).write_text(output, encoding="utf-8")
        Log.info(f"Wrote {len(report.succeeded)} records to {settings.output_path}")
    else:
        sys.stdout.write(output + "\n")

    for failure in report.failed:
        Log.error(f"Not analyzed: {failure.path} ({failure.error})")
    return 1 if report.failed else 0


if __name__ == "__main__":
    sys.exit(main())
