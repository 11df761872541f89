"""Static lexicons and lookup tables shared by the analyzers.

Everything here is immutable and built once at import time, so the tables
can be shared by any number of concurrent analyses. Analyzers take these
as constructor defaults; pass a different table to extend or replace one.
"""

from types import MappingProxyType
from typing import Mapping

UNKNOWN_LANGUAGE = "Unknown"

# Order is the tie-break priority.
LANGUAGE_STOP_WORDS: tuple[tuple[str, frozenset[str]], ...] = (
    (
        "English",
        frozenset({
            "the", "and", "is", "in", "to", "of", "a", "for", "as", "with",
            "this", "that", "by", "from", "they", "we", "you", "or", "an", "are",
        }),
    ),
    (
        "Spanish",
        frozenset({
            "el", "la", "de", "que", "y", "en", "un", "es", "se", "no",
            "te", "lo", "le", "da", "su", "por", "son", "con", "para", "al",
        }),
    ),
    (
        "French",
        frozenset({
            "le", "de", "et", "à", "un", "il", "être", "en", "avoir", "que",
            "pour", "dans", "ce", "son", "une", "sur", "avec", "ne", "se",
        }),
    ),
)

UNKNOWN_AUTHOR = "Unknown Author"

AUTHOR_FALSE_POSITIVES = frozenset({
    "New York", "Los Angeles", "United States", "John Doe", "Jane Doe",
})

PERSON_FALSE_POSITIVES = frozenset({
    "New York", "Los Angeles", "United States",
    "North America", "South America", "Middle East",
})

GENERAL_SUBJECT = "General"

# Order is the tie-break priority.
SUBJECT_TERMS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Business", ("business", "strategy", "marketing", "sales", "revenue", "profit", "management")),
    ("Technology", ("technology", "software", "digital", "system", "development", "programming", "data")),
    ("Healthcare", ("health", "medical", "patient", "treatment", "healthcare", "clinical", "diagnosis")),
    ("Education", ("education", "training", "learning", "course", "student", "teaching", "academic")),
)

KEYWORD_STOP_WORDS = frozenset({
    "that", "this", "with", "from", "they", "been", "have", "were", "said", "each",
    "which", "their", "time", "will", "about", "would", "there", "could", "other",
    "after", "first", "well", "water", "very", "what", "know", "while", "here",
    "when", "where", "more", "some", "like", "into", "only", "over", "also",
    "back", "these", "come", "work", "life", "year", "years", "make", "made",
    "good", "much", "take", "than", "many", "most", "such", "long", "way",
    "even", "find", "right", "old", "see", "him", "two", "how", "its", "our",
    "out", "day", "get", "use", "man", "new", "now", "may", "say",
})

TOPIC_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Business Strategy": (
        "strategy", "business", "market", "competitive", "growth",
        "revenue", "profit", "management", "planning", "objectives",
    ),
    "Technology": (
        "technology", "software", "digital", "system", "development",
        "programming", "data", "artificial intelligence", "machine learning", "automation",
    ),
    "Healthcare": (
        "health", "medical", "patient", "treatment", "healthcare",
        "clinical", "diagnosis", "therapy", "medicine", "hospital",
    ),
    "Education": (
        "education", "learning", "student", "teacher", "training",
        "course", "academic", "knowledge", "skill", "development",
    ),
    "Finance": (
        "finance", "financial", "investment", "budget", "cost",
        "expense", "accounting", "economic", "money", "capital",
    ),
    "Marketing": (
        "marketing", "advertising", "brand", "customer", "campaign",
        "promotion", "social media", "engagement", "conversion", "analytics",
    ),
    "Research": (
        "research", "study", "analysis", "data", "methodology",
        "findings", "results", "conclusion", "hypothesis", "experiment",
    ),
    "Legal": (
        "legal", "law", "contract", "agreement", "compliance",
        "regulation", "policy", "terms", "conditions", "liability",
    ),
    "Human Resources": (
        "human resources", "employee", "staff", "recruitment", "training",
        "performance", "benefits", "workplace", "team", "leadership",
    ),
})

POSITIVE_WORDS = frozenset({
    "excellent", "great", "amazing", "wonderful", "fantastic", "outstanding", "superb", "brilliant",
    "good", "better", "best", "perfect", "successful", "effective", "efficient", "productive",
    "positive", "optimistic", "confident", "satisfied", "pleased", "happy", "delighted",
    "improved", "enhanced", "increased", "growth", "progress", "achievement", "success",
    "beneficial", "valuable", "useful", "helpful", "advantageous", "profitable", "rewarding",
})

NEGATIVE_WORDS = frozenset({
    "terrible", "awful", "horrible", "bad", "worse", "worst", "poor", "inadequate",
    "failed", "failure", "unsuccessful", "ineffective", "inefficient", "unproductive",
    "negative", "pessimistic", "disappointed", "unsatisfied", "unhappy", "frustrated",
    "declined", "decreased", "reduced", "loss", "problem", "issue", "challenge",
    "difficult", "hard", "tough", "struggle", "concern", "risk", "threat",
})

SUMMARY_CUE_WORDS: tuple[str, ...] = (
    "important", "significant", "key", "main", "primary", "essential",
    "critical", "major", "conclusion", "result", "finding",
)

NO_SUMMARY = "No summary available."

DEFAULT_MIME_TYPE = "application/octet-stream"

EXTENSION_MIME_TYPES: Mapping[str, str] = MappingProxyType({
    "txt": "text/plain",
    "pdf": "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
})
