from docmeta.analysis.lexicons import LANGUAGE_STOP_WORDS, UNKNOWN_LANGUAGE


class LanguageDetector:
    """Stop-word overlap heuristic over the opening words of a text.

    Not a statistical language identifier: it only knows the languages in
    its stop-word table and answers "Unknown" when the evidence is thin.
    """

    SAMPLE_WORDS = 100
    MIN_MATCHES = 3

    def __init__(
        self,
        stop_words: tuple[tuple[str, frozenset[str]], ...] = LANGUAGE_STOP_WORDS,
    ) -> None:
        self._stop_words = stop_words

    def detect(self, text: str) -> str:
        words = text.lower().split()[: self.SAMPLE_WORDS]
        best_language = UNKNOWN_LANGUAGE
        best_count = 0
        # Strict ">" keeps the earlier language on ties.
        for language, vocabulary in self._stop_words:
            count = sum(1 for word in words if word in vocabulary)
            if count > best_count:
                best_language, best_count = language, count

        if best_count < self.MIN_MATCHES:
            return UNKNOWN_LANGUAGE
        return best_language
