from typing import Mapping

from docmeta.analysis.lexicons import TOPIC_KEYWORDS
from docmeta.analysis.models import Topic, clamp_confidence


class TopicClassifier:
    """Dictionary-based multi-label topic scoring.

    Multi-word keywords match as substrings of the lower-cased text,
    single words only as whole whitespace-separated tokens. A topic's
    confidence is twice the fraction of its keywords found, capped at 0.95.
    """

    MAX_TOPICS = 5
    MAX_CONFIDENCE = 0.95
    MIN_CONFIDENCE = 0.1

    def __init__(self, topic_keywords: Mapping[str, tuple[str, ...]] = TOPIC_KEYWORDS) -> None:
        self._topic_keywords = topic_keywords

    def classify(self, text: str) -> list[Topic]:
        lower_text = text.lower()
        tokens = set(lower_text.split())

        topics: list[Topic] = []
        for name, keywords in self._topic_keywords.items():
            matched = tuple(
                keyword
                for keyword in keywords
                if (keyword in lower_text if " " in keyword else keyword in tokens)
            )
            if not matched:
                continue
            confidence = min(self.MAX_CONFIDENCE, len(matched) / len(keywords) * 2)
            if confidence >= self.MIN_CONFIDENCE:
                topics.append(
                    Topic(name=name, confidence=clamp_confidence(confidence), keywords=matched)
                )

        topics.sort(key=lambda t: t.confidence, reverse=True)
        return topics[: self.MAX_TOPICS]
