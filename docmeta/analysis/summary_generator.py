import re
from typing import ClassVar

from docmeta.analysis.lexicons import NO_SUMMARY, SUMMARY_CUE_WORDS


class SummaryGenerator:
    """Extractive summary: the three best-scoring sentences in document order.

    A sentence scores 2 points per cue word it contains, 1 point for a
    figure (percentage, decimal or dollar amount), 1 point for a medium
    length and 1 point for sitting within the first or last three sentences.
    """

    _SENTENCE_SPLIT_RE: ClassVar[re.Pattern[str]] = re.compile(r"[.!?]+")
    _FIGURE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\d+%|\d+\.\d+|\$\d+")

    MAX_SENTENCES = 3
    EDGE_SENTENCES = 3

    def __init__(self, cue_words: tuple[str, ...] = SUMMARY_CUE_WORDS) -> None:
        self._cue_words = cue_words

    def generate(self, text: str) -> str:
        sentences = [s.strip() for s in self._SENTENCE_SPLIT_RE.split(text)]
        sentences = [s for s in sentences if 20 < len(s) < 200]
        if not sentences:
            return NO_SUMMARY

        scored = [
            (self._score(sentence, position, len(sentences)), position)
            for position, sentence in enumerate(sentences)
        ]
        best = sorted(scored, key=lambda item: item[0], reverse=True)[: self.MAX_SENTENCES]
        chosen = [sentences[position] for _, position in sorted(best, key=lambda item: item[1])]
        return ". ".join(chosen) + "."

    def _score(self, sentence: str, position: int, total: int) -> int:
        lower = sentence.lower()
        score = 2 * sum(1 for word in self._cue_words if word in lower)
        if self._FIGURE_RE.search(sentence):
            score += 1
        if 50 <= len(sentence) <= 150:
            score += 1
        if position < self.EDGE_SENTENCES or position >= total - self.EDGE_SENTENCES:
            score += 1
        return score
