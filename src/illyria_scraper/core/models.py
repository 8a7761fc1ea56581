# SPDX-License-Identifier: Apache-2.0
"""Data models for translation metadata returned by the RPC endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .helpers import undefined_fields


@dataclass(frozen=True)
class Definition:
    """A single definition of the queried word.

    Attributes:
        definition: Definition text.
        example: Example sentence using the word in this sense.
        synonyms: Synonyms for this sense.
        field: Optional usage field (e.g. "informal", "Medicine").
    """

    definition: str | None = None
    example: str | None = None
    synonyms: list[str] = field(default_factory=list)
    field: str | None = None


@dataclass(frozen=True)
class DefinitionsGroup:
    """Definitions grouped by word type ("noun", "verb", ...)."""

    type: str | None = None
    list: list[Definition] = field(default_factory=list)


@dataclass(frozen=True)
class ExtraTranslation:
    """An alternative translation of the query.

    Attributes:
        word: Translated word.
        article: Grammatical article, when the target language has one.
        meanings: Back-translations into the source language.
        frequency: 1 (rare) to 3 (common). Higher means more frequent.
    """

    word: str | None = None
    article: str | None = None
    meanings: list[str] = field(default_factory=list)
    frequency: int | None = None


@dataclass(frozen=True)
class ExtraTranslationsGroup:
    """Alternative translations grouped by word type."""

    type: str | None = None
    list: list[ExtraTranslation] = field(default_factory=list)


@dataclass(frozen=True)
class Pronunciation:
    """Romanized pronunciation of the query and of its translation."""

    query: str | None = None
    translation: str | None = None


@dataclass(frozen=True)
class TranslationInfo:
    """Complete information about a translation result.

    Built once from a single RPC response and never modified afterwards.
    """

    detected_source: str | None = None
    typo: str | None = None
    pronunciation: Pronunciation = field(default_factory=Pronunciation)
    definitions: list[DefinitionsGroup] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    similar: list[str] = field(default_factory=list)
    extra_translations: list[ExtraTranslationsGroup] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the minimal JSON-serializable payload.

        Keys follow the upstream naming (``detectedSource``,
        ``extraTranslations``) and empty fields are stripped at every depth.
        """
        payload = {
            "detectedSource": self.detected_source,
            "typo": self.typo,
            "pronunciation": {
                "query": self.pronunciation.query,
                "translation": self.pronunciation.translation,
            },
            "definitions": [
                {
                    "type": group.type,
                    "list": [
                        {
                            "definition": item.definition,
                            "example": item.example,
                            "field": item.field,
                            "synonyms": item.synonyms,
                        }
                        for item in group.list
                    ],
                }
                for group in self.definitions
            ],
            "examples": self.examples,
            "similar": self.similar,
            "extraTranslations": [
                {
                    "type": group.type,
                    "list": [
                        {
                            "word": item.word,
                            "article": item.article,
                            "meanings": item.meanings,
                            "frequency": item.frequency,
                        }
                        for item in group.list
                    ],
                }
                for group in self.extra_translations
            ],
        }
        cleaned: dict[str, Any] = undefined_fields(payload)
        return cleaned
