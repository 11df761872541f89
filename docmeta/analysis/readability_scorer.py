import math
import re
from typing import ClassVar


def count_syllables(word: str) -> int:
    """Estimate the syllables in an English word by counting vowel groups."""
    word = ReadabilityScorer._NON_LETTER_RE.sub("", word.lower())
    if len(word) <= 3:
        return 1
    word = ReadabilityScorer._SILENT_SUFFIX_RE.sub("", word)
    word = ReadabilityScorer._LEADING_Y_RE.sub("", word)
    return max(1, len(ReadabilityScorer._VOWEL_GROUP_RE.findall(word)))


class ReadabilityScorer:
    """Flesch Reading Ease, rounded and clamped to [0, 100].

    score = 206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)
    """

    _SENTENCE_SPLIT_RE: ClassVar[re.Pattern[str]] = re.compile(r"[.!?]+")
    _NON_LETTER_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^a-z]")
    _SILENT_SUFFIX_RE: ClassVar[re.Pattern[str]] = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
    _LEADING_Y_RE: ClassVar[re.Pattern[str]] = re.compile(r"^y")
    _VOWEL_GROUP_RE: ClassVar[re.Pattern[str]] = re.compile(r"[aeiouy]{1,2}")

    def score(self, text: str) -> int:
        sentences = [s for s in self._SENTENCE_SPLIT_RE.split(text) if s.strip()]
        words = text.split()
        if not sentences or not words:
            return 0

        syllables = sum(count_syllables(word) for word in words)
        raw = (
            206.835
            - 1.015 * (len(words) / len(sentences))
            - 84.6 * (syllables / len(words))
        )
        # Halves round toward +inf.
        return max(0, min(100, math.floor(raw + 0.5)))
