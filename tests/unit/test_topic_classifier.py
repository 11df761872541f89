import pytest

from docmeta.analysis.topic_classifier import TopicClassifier

REPORT_TEXT = (
    "Good morning team. This report report report is important important "
    "for the the business business business strategy."
)


class TestScoring:
    def test_single_keyword_scores_point_two(self) -> None:
        topics = TopicClassifier().classify(REPORT_TEXT)
        business = next(t for t in topics if t.name == "Business Strategy")
        assert business.confidence == pytest.approx(0.2)
        # "strategy." keeps its period, so only "business" matches as a token.
        assert business.keywords == ("business",)

    def test_multi_word_keyword_matches_substring(self) -> None:
        topics = TopicClassifier().classify("We apply machine learning to data")
        assert [t.name for t in topics] == ["Technology", "Education", "Research"]
        assert topics[0].confidence == pytest.approx(0.4)
        assert topics[0].keywords == ("data", "machine learning")

    def test_confidence_is_capped(self) -> None:
        text = (
            "strategy business market competitive growth revenue profit "
            "management planning objectives"
        )
        topics = TopicClassifier().classify(text)
        assert topics[0].name == "Business Strategy"
        assert topics[0].confidence == 0.95

    def test_single_words_need_whole_token(self) -> None:
        assert TopicClassifier().classify("healthy") == []


class TestRanking:
    def test_keeps_top_five_in_dictionary_order_on_ties(self) -> None:
        text = "strategy software patient student budget brand research contract employee"
        topics = TopicClassifier().classify(text)
        assert [t.name for t in topics] == [
            "Business Strategy",
            "Technology",
            "Healthcare",
            "Education",
            "Finance",
        ]

    def test_sorted_by_confidence(self) -> None:
        text = "legal law contract budget"
        topics = TopicClassifier().classify(text)
        assert [t.name for t in topics] == ["Legal", "Finance"]
        assert topics[0].confidence > topics[1].confidence

    def test_empty_text(self) -> None:
        assert TopicClassifier().classify("") == []
