import math
import re
from typing import ClassVar

from docmeta.analysis.models import DocumentStructure


class StructureAnalyzer:
    """Line-shape heuristics for headers, paragraphs, lists, tables and images.

    List and table counts are estimates: every three list items (or table
    rows) are taken as one logical list (or table).
    """

    _MARKDOWN_HEADER_RE: ClassVar[re.Pattern[str]] = re.compile(r"#{1,6}\s")
    _ALL_CAPS_RE: ClassVar[re.Pattern[str]] = re.compile(r"[A-Z][A-Z\s]+")
    _TITLE_CASE_RE: ClassVar[re.Pattern[str]] = re.compile(r"[A-Z][a-z\s]+:?")
    _PARAGRAPH_SPLIT_RE: ClassVar[re.Pattern[str]] = re.compile(r"\n\s*\n")
    _BULLET_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s*[-*+•]\s")
    _NUMBERED_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s*\d+\.\s")
    _IMAGE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"!\[.*?\]\(.*?\)|image|photo|figure|diagram", re.IGNORECASE
    )

    MAX_HEADER_LENGTH = 80
    MIN_PARAGRAPH_LENGTH = 50
    LINES_PER_BLOCK = 3

    def analyze(self, text: str) -> DocumentStructure:
        lines = text.split("\n")

        header_count = sum(1 for line in lines if self._is_header(line.strip()))
        paragraph_count = sum(
            1
            for block in self._PARAGRAPH_SPLIT_RE.split(text)
            if len(block.strip()) > self.MIN_PARAGRAPH_LENGTH
        )
        list_items = sum(1 for line in lines if self._is_list_item(line))
        table_lines = sum(1 for line in lines if line.count("|") >= 2)

        return DocumentStructure(
            has_title=header_count > 0,
            has_headers=header_count > 1,
            header_count=header_count,
            paragraph_count=paragraph_count,
            list_count=math.ceil(list_items / self.LINES_PER_BLOCK),
            table_count=math.ceil(table_lines / self.LINES_PER_BLOCK),
            image_count=len(self._IMAGE_RE.findall(text)),
        )

    def _is_header(self, line: str) -> bool:
        if self._MARKDOWN_HEADER_RE.match(line):
            return True
        if not 0 < len(line) < self.MAX_HEADER_LENGTH:
            return False
        return bool(self._ALL_CAPS_RE.fullmatch(line) or self._TITLE_CASE_RE.fullmatch(line))

    def _is_list_item(self, line: str) -> bool:
        return bool(self._BULLET_RE.match(line) or self._NUMBERED_RE.match(line))
