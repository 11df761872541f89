from docmeta.analysis.assembler import MetadataAssembler
from docmeta.analysis.models import (
    DocumentMetadata,
    DocumentStructure,
    Entity,
    EntityType,
    FileAttributes,
    Sentiment,
    SentimentLabel,
    TechnicalMetadata,
    Topic,
)

__all__ = [
    "DocumentMetadata",
    "DocumentStructure",
    "Entity",
    "EntityType",
    "FileAttributes",
    "MetadataAssembler",
    "Sentiment",
    "SentimentLabel",
    "TechnicalMetadata",
    "Topic",
]
