"""Runs every analyzer over one text and assembles the metadata record.

Processing flow:
1. Normalize the text (Unicode NFC, "\\n" line endings).
2. Run the analyzers in a fixed order; subject reuses the topic ranking.
3. Resolve the MIME type and derive technical metadata from file attributes.
4. Stamp an identifier and creation time, return a frozen DocumentMetadata.

The assembler holds no per-document state, so one instance can serve any
number of threads.
"""

from __future__ import annotations

import unicodedata
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from docmeta.analysis.author_extractor import AuthorExtractor
from docmeta.analysis.entity_extractor import EntityExtractor
from docmeta.analysis.keyword_extractor import KeywordExtractor
from docmeta.analysis.language_detector import LanguageDetector
from docmeta.analysis.models import DocumentMetadata, FileAttributes
from docmeta.analysis.readability_scorer import ReadabilityScorer
from docmeta.analysis.sentiment_analyzer import SentimentAnalyzer
from docmeta.analysis.structure_analyzer import StructureAnalyzer
from docmeta.analysis.subject_extractor import SubjectExtractor
from docmeta.analysis.summary_generator import SummaryGenerator
from docmeta.analysis.technical_metadata import build_technical_metadata, resolve_mime_type
from docmeta.analysis.text_stats import count_characters, count_words
from docmeta.analysis.title_extractor import TitleExtractor
from docmeta.analysis.topic_classifier import TopicClassifier
from docmeta.logging.logger import Log


def _new_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_text(text: str) -> str:
    """NFC-normalize and convert CR/CRLF line endings to LF."""
    text = unicodedata.normalize("NFC", text)
    return text.replace("\r\n", "\n").replace("\r", "\n")


class MetadataAssembler:
    """Orchestrates the text analyzers into one DocumentMetadata record."""

    def __init__(
        self,
        language_detector: LanguageDetector | None = None,
        title_extractor: TitleExtractor | None = None,
        author_extractor: AuthorExtractor | None = None,
        subject_extractor: SubjectExtractor | None = None,
        keyword_extractor: KeywordExtractor | None = None,
        summary_generator: SummaryGenerator | None = None,
        entity_extractor: EntityExtractor | None = None,
        topic_classifier: TopicClassifier | None = None,
        sentiment_analyzer: SentimentAnalyzer | None = None,
        readability_scorer: ReadabilityScorer | None = None,
        structure_analyzer: StructureAnalyzer | None = None,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._language_detector = language_detector or LanguageDetector()
        self._title_extractor = title_extractor or TitleExtractor()
        self._author_extractor = author_extractor or AuthorExtractor()
        self._subject_extractor = subject_extractor or SubjectExtractor()
        self._keyword_extractor = keyword_extractor or KeywordExtractor()
        self._summary_generator = summary_generator or SummaryGenerator()
        self._entity_extractor = entity_extractor or EntityExtractor()
        self._topic_classifier = topic_classifier or TopicClassifier()
        self._sentiment_analyzer = sentiment_analyzer or SentimentAnalyzer()
        self._readability_scorer = readability_scorer or ReadabilityScorer()
        self._structure_analyzer = structure_analyzer or StructureAnalyzer()
        self._id_factory = id_factory
        self._clock = clock

    def assemble(self, text: str, attributes: FileAttributes) -> DocumentMetadata:
        """Analyze *text* and build the metadata record for the file it came from.

        Args:
            text: Plain text produced by the extraction layer (may be empty).
            attributes: Name, declared MIME type, size and mtime of the file.

        Returns:
            A new DocumentMetadata; never raises for any string input.
        """
        text = normalize_text(text)
        mime_type = resolve_mime_type(attributes.name, attributes.mime_type)

        topics = self._topic_classifier.classify(text)

        metadata = DocumentMetadata(
            id=self._id_factory(),
            filename=attributes.name,
            file_type=mime_type,
            file_size=max(attributes.size, 0),
            upload_date=self._clock(),
            extracted_text=text,
            word_count=count_words(text),
            character_count=count_characters(text),
            language=self._language_detector.detect(text),
            title=self._title_extractor.extract(text, attributes.name),
            author=self._author_extractor.extract(text),
            subject=self._subject_extractor.extract(text, topics),
            keywords=tuple(self._keyword_extractor.extract(text)),
            summary=self._summary_generator.generate(text),
            entities=tuple(self._entity_extractor.extract(text)),
            topics=tuple(topics),
            sentiment=self._sentiment_analyzer.analyze(text),
            readability_score=self._readability_scorer.score(text),
            structure=self._structure_analyzer.analyze(text),
            technical_metadata=build_technical_metadata(attributes, mime_type),
        )

        Log.info(
            f"Analyzed {attributes.name}",
            words=metadata.word_count,
            language=metadata.language,
            entities=len(metadata.entities),
            topics=len(metadata.topics),
        )
        return metadata
