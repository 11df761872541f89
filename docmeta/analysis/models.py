from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class EntityType(str, Enum):
    """Semantic category of an extracted entity."""

    PERSON = "person"
    ORGANIZATION = "organization"
    LOCATION = "location"
    DATE = "date"
    EMAIL = "email"
    PHONE = "phone"
    URL = "url"


class SentimentLabel(str, Enum):
    """Overall sentiment classification."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


def clamp_confidence(value: float) -> float:
    """Clamp a confidence value into [0, 1]."""
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class FileAttributes:
    """File attributes supplied alongside the extracted text."""

    name: str
    mime_type: str = ""
    size: int = 0
    last_modified: datetime | None = None


@dataclass(frozen=True)
class Entity:
    """A span of text classified into one of the fixed entity types."""

    text: str
    type: EntityType
    confidence: float
    start_index: int  # offset into the source text
    end_index: int  # exclusive


@dataclass(frozen=True)
class Topic:
    """A coarse subject label with the dictionary terms that matched."""

    name: str
    confidence: float
    keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class Sentiment:
    """Overall sentiment label and its confidence."""

    overall: SentimentLabel = SentimentLabel.NEUTRAL
    confidence: float = 0.5


@dataclass(frozen=True)
class DocumentStructure:
    """Heuristic structural statistics of a document."""

    has_title: bool = False
    has_headers: bool = False
    header_count: int = 0
    paragraph_count: int = 0
    list_count: int = 0
    table_count: int = 0
    image_count: int = 0


@dataclass(frozen=True)
class Dimensions:
    """Pixel dimensions of an image document."""

    width: int
    height: int


@dataclass(frozen=True)
class TechnicalMetadata:
    """File-derived metadata."""

    mime_type: str
    encoding: str = "UTF-8"
    creation_date: datetime | None = None
    modification_date: datetime | None = None
    page_count: int | None = None  # PDF only
    dimensions: Dimensions | None = None  # images only


@dataclass(frozen=True)
class DocumentMetadata:
    """The assembled analysis record. Produced once, never mutated."""

    id: str
    filename: str
    file_type: str
    file_size: int
    upload_date: datetime
    extracted_text: str
    word_count: int
    character_count: int
    language: str
    title: str
    author: str
    subject: str
    summary: str
    sentiment: Sentiment
    readability_score: int
    structure: DocumentStructure
    technical_metadata: TechnicalMetadata
    keywords: tuple[str, ...] = ()
    entities: tuple[Entity, ...] = field(default_factory=tuple)
    topics: tuple[Topic, ...] = field(default_factory=tuple)
