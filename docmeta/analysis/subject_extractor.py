from collections.abc import Sequence

from docmeta.analysis.lexicons import GENERAL_SUBJECT, SUBJECT_TERMS
from docmeta.analysis.models import Topic


class SubjectExtractor:
    """Names the document's subject.

    The top-ranked topic wins when there is one; otherwise each subject
    category scores one point per term found in the text.
    """

    def __init__(
        self,
        subject_terms: tuple[tuple[str, tuple[str, ...]], ...] = SUBJECT_TERMS,
    ) -> None:
        self._subject_terms = subject_terms

    def extract(self, text: str, topics: Sequence[Topic] = ()) -> str:
        if topics:
            return topics[0].name

        lower_text = text.lower()
        best_subject = GENERAL_SUBJECT
        best_count = 0
        for subject, terms in self._subject_terms:
            count = sum(1 for term in terms if term in lower_text)
            if count > best_count:
                best_subject, best_count = subject, count
        return best_subject
