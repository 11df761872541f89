import re
from typing import ClassVar

from docmeta.analysis.lexicons import AUTHOR_FALSE_POSITIVES, UNKNOWN_AUTHOR

# Two or three capitalized tokens, e.g. "Jane Smith" or "Mary Ann Jones".
_NAME = r"[A-Z][a-z]+ [A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)?"


class AuthorExtractor:
    """Finds a likely author name with a fixed cascade of byline patterns.

    Patterns, in priority order:
      1. "by / author / written by / created by / prepared by NAME"
      2. "NAME wrote / authored / created / prepared"
      3. a line that consists of NAME only
      4. NAME followed by a line containing an e-mail address (signature)

    Every match of a pattern is tried before the next pattern; a match equal
    to a known false positive (place names, placeholders) is skipped.
    """

    _PATTERNS: ClassVar[tuple[re.Pattern[str], ...]] = (
        re.compile(
            r"\b(?i:by|author|written by|created by|prepared by)\s*:?\s*(" + _NAME + r")"
        ),
        re.compile(r"(" + _NAME + r")\s+(?i:wrote|authored|created|prepared)\b"),
        re.compile(r"^(" + _NAME + r")$", re.MULTILINE),
        re.compile(r"(" + _NAME + r")[ \t]*\n.*@.*\."),
    )

    def __init__(self, false_positives: frozenset[str] = AUTHOR_FALSE_POSITIVES) -> None:
        self._false_positives = false_positives

    def extract(self, text: str) -> str:
        for pattern in self._PATTERNS:
            for match in pattern.finditer(text):
                author = match.group(1).strip()
                if author not in self._false_positives:
                    return author
        return UNKNOWN_AUTHOR
