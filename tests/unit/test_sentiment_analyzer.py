import pytest

from docmeta.analysis.models import SentimentLabel
from docmeta.analysis.sentiment_analyzer import SentimentAnalyzer


class TestNeutralDefaults:
    def test_empty_text(self) -> None:
        result = SentimentAnalyzer().analyze("")
        assert result.overall is SentimentLabel.NEUTRAL
        assert result.confidence == 0.5

    def test_no_sentiment_words(self) -> None:
        result = SentimentAnalyzer().analyze("the meeting is on tuesday")
        assert result.overall is SentimentLabel.NEUTRAL
        assert result.confidence == 0.5


class TestClassification:
    def test_positive(self) -> None:
        result = SentimentAnalyzer().analyze("excellent results and great success")
        assert result.overall is SentimentLabel.POSITIVE
        assert result.confidence == 0.95

    def test_negative(self) -> None:
        result = SentimentAnalyzer().analyze("this was a terrible failure")
        assert result.overall is SentimentLabel.NEGATIVE
        assert result.confidence == 0.95

    def test_balanced_is_neutral(self) -> None:
        result = SentimentAnalyzer().analyze("good and bad")
        assert result.overall is SentimentLabel.NEUTRAL

    def test_neutral_confidence_is_floored(self) -> None:
        text = "good bad " + "word " * 98
        result = SentimentAnalyzer().analyze(text)
        assert result.overall is SentimentLabel.NEUTRAL
        assert result.confidence == pytest.approx(0.3)

    def test_confidence_scales_with_density(self) -> None:
        text = "good " + "filler " * 99
        result = SentimentAnalyzer().analyze(text)
        assert result.overall is SentimentLabel.POSITIVE
        assert result.confidence == pytest.approx(0.1)

    def test_is_case_insensitive(self) -> None:
        result = SentimentAnalyzer().analyze("EXCELLENT Progress")
        assert result.overall is SentimentLabel.POSITIVE
