# SPDX-License-Identifier: Apache-2.0
"""Language code registry.

Internal language codes differ slightly from the codes Google Translate
expects, and some codes are only meaningful in one direction:

- ``auto`` (detect) can only be a source; as a target it falls back to ``en``.
- ``zh_HANT`` (Traditional Chinese) can only be a target; as a source it
  collapses to ``zh``.

The static table lives in ``languages.json`` and is loaded once at import.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

LANGUAGES_FILE = Path(__file__).parent / "languages.json"


class LanguageType(str, Enum):
    """Direction a language code is used in."""

    SOURCE = "source"
    TARGET = "target"


def _load_table(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data: dict[str, Any] = json.load(f)
    return data


_TABLE = _load_table(LANGUAGES_FILE)

LANGUAGES: Mapping[str, str] = MappingProxyType(dict(_TABLE["languages"]))

EXCEPTIONS: Mapping[LanguageType, Mapping[str, str]] = MappingProxyType(
    {
        lang_type: MappingProxyType(dict(_TABLE["exceptions"][lang_type.value]))
        for lang_type in LanguageType
    }
)

REQUEST_MAPPINGS: Mapping[str, str] = MappingProxyType(dict(_TABLE["mappings"]["request"]))
RESPONSE_MAPPINGS: Mapping[str, str] = MappingProxyType(dict(_TABLE["mappings"]["response"]))


def _filtered_languages(lang_type: LanguageType) -> Mapping[str, str]:
    excepted = EXCEPTIONS[lang_type]
    return MappingProxyType(
        {code: name for code, name in LANGUAGES.items() if code not in excepted}
    )


SOURCE_LANGUAGES = _filtered_languages(LanguageType.SOURCE)
TARGET_LANGUAGES = _filtered_languages(LanguageType.TARGET)

_LANGUAGE_LISTS: dict[LanguageType | None, Mapping[str, str]] = {
    None: LANGUAGES,
    LanguageType.SOURCE: SOURCE_LANGUAGES,
    LanguageType.TARGET: TARGET_LANGUAGES,
}


def language_list(lang_type: LanguageType | str | None = None) -> Mapping[str, str]:
    """Return the code -> name map for a direction.

    Args:
        lang_type: Source or target direction. ``None`` returns every code.

    Returns:
        Read-only mapping of language codes to display names.
    """
    if lang_type is None:
        return LANGUAGES
    return _LANGUAGE_LISTS[LanguageType(lang_type)]


def is_valid_code(
    code: str | None,
    lang_type: LanguageType | str | None = None,
) -> bool:
    """Check whether a code is known, optionally for a given direction.

    Args:
        code: Code to validate (e.g. "en", "zh", "auto").
        lang_type: Restrict the check to source or target codes.

    Returns:
        True if the code is in the requested list. ``None``, non-string
        input and unknown directions are never valid.

    Examples:
        >>> is_valid_code("auto", LanguageType.SOURCE)
        True
        >>> is_valid_code("auto", LanguageType.TARGET)
        False
    """
    if not code or not isinstance(code, str):
        return False
    try:
        codes = language_list(lang_type)
    except ValueError:
        return False
    return code in codes


def replace_excepted_code(lang_type: LanguageType | str, code: str) -> str:
    """Replace a code that is not usable in the given direction.

    Args:
        lang_type: Source or target direction.
        code: Original language code.

    Returns:
        The designated replacement (e.g. ``zh_HANT`` -> ``zh`` for sources,
        ``auto`` -> ``en`` for targets), otherwise ``code`` unchanged.
    """
    return EXCEPTIONS[LanguageType(lang_type)].get(code, code)


def map_google_code(code: str) -> str:
    """Map an internal code to the code Google Translate expects.

    Examples:
        >>> map_google_code("zh")
        'zh-CN'
        >>> map_google_code("en")
        'en'
    """
    return REQUEST_MAPPINGS.get(code, code)


def map_lingva_code(code: str) -> str:
    """Map a code returned by Google Translate back to an internal code.

    Examples:
        >>> map_lingva_code("zh-TW")
        'zh'
    """
    return RESPONSE_MAPPINGS.get(code, code)
