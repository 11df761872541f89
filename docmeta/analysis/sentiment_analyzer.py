from docmeta.analysis.lexicons import NEGATIVE_WORDS, POSITIVE_WORDS
from docmeta.analysis.models import Sentiment, SentimentLabel, clamp_confidence


class SentimentAnalyzer:
    """Lexicon-ratio sentiment classifier."""

    MAX_CONFIDENCE = 0.95
    NEUTRAL_MIN_CONFIDENCE = 0.3
    POSITIVE_RATIO = 0.6
    NEGATIVE_RATIO = 0.4

    def __init__(
        self,
        positive_words: frozenset[str] = POSITIVE_WORDS,
        negative_words: frozenset[str] = NEGATIVE_WORDS,
    ) -> None:
        self._positive_words = positive_words
        self._negative_words = negative_words

    def analyze(self, text: str) -> Sentiment:
        words = text.lower().split()
        positive = sum(1 for word in words if word in self._positive_words)
        negative = sum(1 for word in words if word in self._negative_words)

        total = positive + negative
        if total == 0:
            return Sentiment(overall=SentimentLabel.NEUTRAL, confidence=0.5)

        ratio = positive / total
        # Sentiment-word density, scaled by ten.
        confidence = clamp_confidence(min(self.MAX_CONFIDENCE, total / len(words) * 10))

        if ratio > self.POSITIVE_RATIO:
            return Sentiment(overall=SentimentLabel.POSITIVE, confidence=confidence)
        if ratio < self.NEGATIVE_RATIO:
            return Sentiment(overall=SentimentLabel.NEGATIVE, confidence=confidence)
        return Sentiment(
            overall=SentimentLabel.NEUTRAL,
            confidence=max(self.NEUTRAL_MIN_CONFIDENCE, confidence),
        )
