"""Regex-driven entity extraction.

Rules run in a fixed order (email, phone, url, date, person). Every match
becomes an Entity with the rule's constant confidence; results are then
deduplicated on (text, type) keeping the first occurrence, stably sorted by
confidence and truncated. The rule order therefore decides which entity
comes first among equal confidences.
"""

from __future__ import annotations

import re
from typing import ClassVar

from docmeta.analysis.lexicons import PERSON_FALSE_POSITIVES
from docmeta.analysis.models import Entity, EntityType, clamp_confidence
from docmeta.logging.logger import Log


class EntityExtractor:
    """Extracts emails, phones, URLs, dates and person names."""

    EMAIL_CONFIDENCE: ClassVar[float] = 0.95
    PHONE_CONFIDENCE: ClassVar[float] = 0.85
    URL_CONFIDENCE: ClassVar[float] = 0.98
    DATE_CONFIDENCE: ClassVar[float] = 0.90
    PERSON_CONFIDENCE: ClassVar[float] = 0.70

    MAX_ENTITIES: ClassVar[int] = 20
    MAX_PERSON_LENGTH: ClassVar[int] = 30

    _EMAIL_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b", re.ASCII
    )
    _PHONE_RES: ClassVar[tuple[re.Pattern[str], ...]] = (
        re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b", re.ASCII),
        re.compile(r"\(\d{3}\)\s*\d{3}[-.]?\d{4}", re.ASCII),
        re.compile(r"\+1[-.\s]?\d{3}[-.\s]?\d{3}[-.\s]?\d{4}", re.ASCII),
    )
    _URL_RE: ClassVar[re.Pattern[str]] = re.compile(r"https?://\S+")
    _DATE_RES: ClassVar[tuple[re.Pattern[str], ...]] = (
        re.compile(r"\b\d{1,2}/\d{1,2}/\d{4}\b", re.ASCII),  # 03/01/2024
        re.compile(r"\b[A-Z][a-z]+ \d{1,2}, \d{4}\b", re.ASCII),  # March 1, 2024
        re.compile(r"\b\d{1,2}-\d{1,2}-\d{4}\b", re.ASCII),  # 03-01-2024
        re.compile(r"\b\d{4}-\d{2}-\d{2}\b", re.ASCII),  # 2024-03-01
    )
    _PERSON_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b[A-Z][a-z]+ [A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)?\b", re.ASCII
    )

    _RULES: ClassVar[list[tuple[EntityType, float, re.Pattern[str]]]] = [
        (EntityType.EMAIL, EMAIL_CONFIDENCE, _EMAIL_RE),
        (EntityType.PHONE, PHONE_CONFIDENCE, _PHONE_RES[0]),
        (EntityType.PHONE, PHONE_CONFIDENCE, _PHONE_RES[1]),
        (EntityType.PHONE, PHONE_CONFIDENCE, _PHONE_RES[2]),
        (EntityType.URL, URL_CONFIDENCE, _URL_RE),
        (EntityType.DATE, DATE_CONFIDENCE, _DATE_RES[0]),
        (EntityType.DATE, DATE_CONFIDENCE, _DATE_RES[1]),
        (EntityType.DATE, DATE_CONFIDENCE, _DATE_RES[2]),
        (EntityType.DATE, DATE_CONFIDENCE, _DATE_RES[3]),
        (EntityType.PERSON, PERSON_CONFIDENCE, _PERSON_RE),
    ]

    def __init__(self, person_false_positives: frozenset[str] = PERSON_FALSE_POSITIVES) -> None:
        self._person_false_positives = person_false_positives

    def extract(self, text: str) -> list[Entity]:
        entities = self._deduplicate(self._match_all(text))
        entities.sort(key=lambda e: e.confidence, reverse=True)
        Log.debug("Entities extracted", found=len(entities))
        return entities[: self.MAX_ENTITIES]

    def _match_all(self, text: str) -> list[Entity]:
        entities: list[Entity] = []
        for entity_type, confidence, pattern in self._RULES:
            for m in pattern.finditer(text):
                if entity_type is EntityType.PERSON and not self._is_plausible_person(m.group(0)):
                    continue
                entities.append(
                    Entity(
                        text=m.group(0),
                        type=entity_type,
                        confidence=clamp_confidence(confidence),
                        start_index=m.start(),
                        end_index=m.end(),
                    )
                )
        return entities

    def _is_plausible_person(self, name: str) -> bool:
        return name not in self._person_false_positives and len(name) <= self.MAX_PERSON_LENGTH

    @staticmethod
    def _deduplicate(entities: list[Entity]) -> list[Entity]:
        seen: set[tuple[str, EntityType]] = set()
        unique: list[Entity] = []
        for entity in entities:
            key = (entity.text, entity.type)
            if key not in seen:
                seen.add(key)
                unique.append(entity)
        return unique
