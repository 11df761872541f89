import re
from typing import ClassVar


class TitleExtractor:
    """Picks a title from the opening lines, falling back to the filename."""

    _SPECIAL_CHAR_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^a-zA-Z0-9\s\-:]")
    _CAPITAL_START_RE: ClassVar[re.Pattern[str]] = re.compile(r"[A-Z]")
    _EXTENSION_RE: ClassVar[re.Pattern[str]] = re.compile(r"\.[^/.]+$")
    _SEPARATOR_RE: ClassVar[re.Pattern[str]] = re.compile(r"[-_]")

    CANDIDATE_LINES = 5

    def extract(self, text: str, filename: str) -> str:
        lines = [line.strip() for line in text.split("\n")]
        lines = [line for line in lines if line]

        for line in lines[: self.CANDIDATE_LINES]:
            if self._looks_like_title(line):
                return line

        for line in lines:
            if 10 <= len(line) <= 80:
                return line

        return self._title_from_filename(filename)

    def _looks_like_title(self, line: str) -> bool:
        if not 5 <= len(line) <= 100:
            return False
        if len(self._SPECIAL_CHAR_RE.findall(line)) >= 3:
            return False
        if not 2 <= len(line.split()) <= 15:
            return False
        return bool(self._CAPITAL_START_RE.match(line)) or line == line.upper()

    def _title_from_filename(self, filename: str) -> str:
        stem = self._EXTENSION_RE.sub("", filename)
        return self._SEPARATOR_RE.sub(" ", stem)
