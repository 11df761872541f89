import re
from collections import Counter
from typing import ClassVar

from docmeta.analysis.lexicons import KEYWORD_STOP_WORDS


class KeywordExtractor:
    """Frequency-ranked keywords.

    Tokens shorter than four characters and stop words are ignored, and a
    keyword must occur at least twice. Equal frequencies keep the order in
    which the tokens first appear in the text.
    """

    _NON_WORD_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^\w\s]")

    MAX_KEYWORDS = 15
    MIN_LENGTH = 4
    MIN_FREQUENCY = 2

    def __init__(self, stop_words: frozenset[str] = KEYWORD_STOP_WORDS) -> None:
        self._stop_words = stop_words

    def extract(self, text: str) -> list[str]:
        cleaned = self._NON_WORD_RE.sub(" ", text.lower())
        frequencies = Counter(
            word for word in cleaned.split() if len(word) >= self.MIN_LENGTH
        )

        candidates = [
            (word, count)
            for word, count in frequencies.items()
            if count >= self.MIN_FREQUENCY and word not in self._stop_words
        ]
        # sorted() is stable: Counter preserves first-occurrence order.
        ranked = sorted(candidates, key=lambda item: item[1], reverse=True)
        return [word[0].upper() + word[1:] for word, _ in ranked[: self.MAX_KEYWORDS]]
