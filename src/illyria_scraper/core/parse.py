# SPDX-License-Identifier: Apache-2.0
"""Extraction of translation metadata from the batch-execute RPC response.

The RPC payload has no published schema. It is a nested positional array::

    [source_info, target_info, detected_code, extra]

where ``extra`` holds, by index::

    1: definition groups      2: example sentences
    3: similar terms          5: extra translation groups
    8: detected language (fallback)

Every lookup goes through :func:`at`, which returns ``None`` instead of
raising when the shape does not match, so a changed or partial response only
degrades the fields it affects.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .helpers import undefined_fields
from .languages import map_lingva_code
from .models import (
    Definition,
    DefinitionsGroup,
    ExtraTranslation,
    ExtraTranslationsGroup,
    Pronunciation,
    TranslationInfo,
)

logger = logging.getLogger(__name__)

RPC_ID = "MkEWBc"

# Raw frequency ranks go from 1 (most common) to 3; the output is inverted so
# that a higher value means more frequent.
FREQUENCY_BASE = 4

__all__ = [
    "RPC_ID",
    "at",
    "definitions",
    "detected",
    "examples",
    "extra_translations",
    "parse_rpc_response",
    "parse_translation_info",
    "pronunciation_query",
    "pronunciation_translation",
    "similar",
    "typo",
    "undefined_fields",
]


def at(value: Any, *path: int) -> Any:
    """Follow a path of list indices, returning None on any mismatch.

    Examples:
        >>> at([[1, [2, 3]]], 0, 1, 1)
        3
        >>> at([[1]], 0, 5) is None
        True
        >>> at(None, 0) is None
        True
    """
    for index in path:
        if not isinstance(value, list) or not 0 <= index < len(value):
            return None
        value = value[index]
    return value


def _str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _strings(value: Any) -> list[str]:
    return [item for item in _list(value) if isinstance(item, str) and item]


def detected(data: Any) -> str | None:
    """Extract the detected source language as an internal code."""
    candidates = (
        at(data, 0, 2),
        at(data, 1, 3),
        at(data, 2),
        at(data, 3, 8),
        at(data, 3, 5, 0, 0, 3),
    )
    code = next((c for c in candidates if c is not None), None)
    code = _str(code)
    return map_lingva_code(code) if code else None


def typo(data: Any) -> str | None:
    """Extract the typo correction suggested for the query."""
    return _str(at(data, 0, 1, 0, 4))


def pronunciation_query(data: Any) -> str | None:
    """Extract the pronunciation of the original query."""
    return _str(at(data, 0, 0))


def pronunciation_translation(data: Any) -> str | None:
    """Extract the pronunciation of the translated text."""
    return _str(at(data, 1, 0, 0, 1))


def _synonyms(syn_list: Any) -> list[str]:
    words: list[str] = []
    for syn_item in _list(syn_list):
        for entry in _list(at(syn_item, 0)):
            word = _str(at(entry, 0))
            if word:
                words.append(word)
    return words


def _definition(entry: Any) -> Definition:
    return Definition(
        definition=_str(at(entry, 0)),
        example=_str(at(entry, 1)),
        synonyms=_synonyms(at(entry, 5)),
        field=_str(at(entry, 4, 0, 0)),
    )


def definitions(data: Any) -> list[DefinitionsGroup]:
    """Extract word definitions grouped by word type."""
    return [
        DefinitionsGroup(
            type=_str(at(group, 0)),
            list=[_definition(entry) for entry in _list(at(group, 1))],
        )
        for group in _list(at(data, 3, 1, 0))
        if isinstance(group, list)
    ]


def examples(data: Any) -> list[str]:
    """Extract usage examples for the query."""
    return [
        example
        for example in (_str(at(pair, 1)) for pair in _list(at(data, 3, 2, 0)))
        if example
    ]


def similar(data: Any) -> list[Any]:
    """Extract words or phrases similar to the query, as returned."""
    return _list(at(data, 3, 3, 0))


def _frequency(raw: Any) -> int | None:
    if isinstance(raw, bool) or not isinstance(raw, int):
        return None
    return FREQUENCY_BASE - raw


def _extra_translation(entry: Any) -> ExtraTranslation:
    return ExtraTranslation(
        word=_str(at(entry, 0)),
        article=_str(at(entry, 1)),
        meanings=_strings(at(entry, 2)),
        frequency=_frequency(at(entry, 3)),
    )


def extra_translations(data: Any) -> list[ExtraTranslationsGroup]:
    """Extract alternative translations grouped by word type."""
    return [
        ExtraTranslationsGroup(
            type=_str(at(group, 0)),
            list=[_extra_translation(entry) for entry in _list(at(group, 1))],
        )
        for group in _list(at(data, 3, 5, 0))
        if isinstance(group, list)
    ]


def parse_translation_info(data: Any, detect_source: bool = True) -> TranslationInfo:
    """Assemble a TranslationInfo from a decoded RPC payload.

    Args:
        data: Decoded payload (``[source, target, detected, extra]``).
        detect_source: Whether to extract the detected source language.
            Only meaningful when the request used ``auto``.

    Returns:
        TranslationInfo. Missing parts of the payload leave the matching
        fields as None or empty lists.
    """
    return TranslationInfo(
        detected_source=detected(data) if detect_source else None,
        typo=typo(data),
        pronunciation=Pronunciation(
            query=pronunciation_query(data),
            translation=pronunciation_translation(data),
        ),
        definitions=definitions(data),
        examples=examples(data),
        similar=similar(data),
        extra_translations=extra_translations(data),
    )


def _find_rpc_payload(node: Any) -> str | None:
    if not isinstance(node, list):
        return None
    if len(node) > 2 and node[0] == "wrb.fr" and node[1] == RPC_ID:
        return node[2] if isinstance(node[2], str) else None
    for child in node:
        payload = _find_rpc_payload(child)
        if payload is not None:
            return payload
    return None


def parse_rpc_response(text: str | None) -> list[Any] | None:
    """Decode the payload embedded in a batch-execute response.

    The response is a length-prefixed stream of JSON chunks. The chunk for
    our RPC contains ``["wrb.fr", "MkEWBc", "<payload>", ...]`` where the
    payload is itself a JSON document encoded as a string.

    Args:
        text: Raw response body.

    Returns:
        The decoded payload list, or None if it cannot be found or decoded.
    """
    if not text:
        return None

    for line in text.splitlines():
        line = line.strip()
        if not line.startswith("["):
            continue
        try:
            chunk = json.loads(line)
        except ValueError:
            continue

        payload = _find_rpc_payload(chunk)
        if payload is None:
            continue

        try:
            data = json.loads(payload)
        except ValueError:
            logger.debug("RPC payload is not valid JSON: %.100s", payload)
            return None
        return data if isinstance(data, list) and data else None

    logger.debug("No %s frame found in RPC response", RPC_ID)
    return None
