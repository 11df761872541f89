import dataclasses
from datetime import datetime, timezone

import pytest

from docmeta.analysis.assembler import MetadataAssembler, normalize_text
from docmeta.analysis.models import (
    DocumentStructure,
    EntityType,
    FileAttributes,
    SentimentLabel,
)

REPORT = FileAttributes(name="report.txt", mime_type="text/plain", size=512)


class TestNormalizeText:
    def test_line_endings(self) -> None:
        assert normalize_text("one\r\ntwo\rthree") == "one\ntwo\nthree"

    def test_nfc(self) -> None:
        assert normalize_text("cafe\u0301") == "caf\u00e9"


class TestDegenerateInput:
    def test_empty_text(self, fixed_assembler: MetadataAssembler) -> None:
        result = fixed_assembler.assemble("", FileAttributes(name="empty-notes_v1.txt"))

        assert result.word_count == 0
        assert result.character_count == 0
        assert result.language == "Unknown"
        assert result.title == "empty notes v1"
        assert result.author == "Unknown Author"
        assert result.subject == "General"
        assert result.summary == "No summary available."
        assert result.keywords == ()
        assert result.entities == ()
        assert result.topics == ()
        assert result.sentiment.overall is SentimentLabel.NEUTRAL
        assert result.sentiment.confidence == 0.5
        assert result.readability_score == 0
        assert result.structure == DocumentStructure()
        assert result.file_type == "text/plain"

    def test_whitespace_only(self, fixed_assembler: MetadataAssembler) -> None:
        result = fixed_assembler.assemble("   \n\t ", FileAttributes(name="blank.txt"))
        assert result.word_count == 0
        assert result.character_count == 6


class TestReport:
    def test_core_fields(self, fixed_assembler: MetadataAssembler, report_text: str) -> None:
        result = fixed_assembler.assemble(report_text, REPORT)

        assert result.id == "doc-1"
        assert result.upload_date == datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
        assert result.filename == "report.txt"
        assert result.file_size == 512
        assert result.title == "EXECUTIVE SUMMARY"
        assert result.author == "Jane Smith"
        assert result.language == "English"
        assert result.keywords == ("Revenue", "Jane", "Smith")
        assert result.sentiment.overall is SentimentLabel.POSITIVE

    def test_subject_reuses_top_topic(
        self, fixed_assembler: MetadataAssembler, report_text: str
    ) -> None:
        result = fixed_assembler.assemble(report_text, REPORT)
        assert result.topics[0].name == "Business Strategy"
        assert result.topics[0].confidence == 0.95
        assert result.subject == "Business Strategy"

    def test_entities(self, fixed_assembler: MetadataAssembler, report_text: str) -> None:
        result = fixed_assembler.assemble(report_text, REPORT)
        assert [(e.type, e.text) for e in result.entities] == [
            (EntityType.EMAIL, "jane.smith@example.com"),
            (EntityType.DATE, "March 20, 2024"),
            (EntityType.PHONE, "(555) 123-4567"),
            (EntityType.PERSON, "Key Findings"),
            (EntityType.PERSON, "Jane Smith"),
        ]
        for entity in result.entities:
            assert result.extracted_text[entity.start_index:entity.end_index] == entity.text

    def test_structure(self, fixed_assembler: MetadataAssembler, report_text: str) -> None:
        structure = fixed_assembler.assemble(report_text, REPORT).structure
        assert structure.has_title is True
        assert structure.header_count == 1
        assert structure.paragraph_count == 3
        assert structure.list_count == 1

    def test_bounds(self, fixed_assembler: MetadataAssembler, report_text: str) -> None:
        result = fixed_assembler.assemble(report_text * 5, REPORT)
        assert 0 <= result.readability_score <= 100
        assert len(result.keywords) <= 15
        assert len(result.entities) <= 20
        assert len(result.topics) <= 5
        assert 0.0 <= result.sentiment.confidence <= 1.0
        assert all(0.0 <= e.confidence <= 1.0 for e in result.entities)
        assert all(0.0 <= t.confidence <= 1.0 for t in result.topics)


class TestRecord:
    def test_deterministic_apart_from_identity(self, report_text: str) -> None:
        assembler = MetadataAssembler()
        first = assembler.assemble(report_text, REPORT)
        second = assembler.assemble(report_text, REPORT)

        assert first.id != second.id
        assert dataclasses.replace(second, id=first.id, upload_date=first.upload_date) == first

    def test_record_is_frozen(self, fixed_assembler: MetadataAssembler) -> None:
        result = fixed_assembler.assemble("Some text", REPORT)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.title = "changed"  # type: ignore[misc]

    def test_crlf_text_is_normalized(self, fixed_assembler: MetadataAssembler) -> None:
        result = fixed_assembler.assemble("Line one\r\nLine two", REPORT)
        assert result.extracted_text == "Line one\nLine two"
        assert result.character_count == 17

    def test_mime_type_inferred_from_filename(self, fixed_assembler: MetadataAssembler) -> None:
        attributes = FileAttributes(name="scan.pdf", size=120_000)
        result = fixed_assembler.assemble("Scanned text", attributes)
        assert result.file_type == "application/pdf"
        assert result.technical_metadata.page_count == 3

    def test_negative_size_is_clamped(self, fixed_assembler: MetadataAssembler) -> None:
        result = fixed_assembler.assemble("text", FileAttributes(name="a.txt", size=-1))
        assert result.file_size == 0
