# SPDX-License-Identifier: Apache-2.0
"""Language codes, result models and response parsing."""

from .helpers import undefined_fields
from .languages import (
    LANGUAGES,
    SOURCE_LANGUAGES,
    TARGET_LANGUAGES,
    LanguageType,
    is_valid_code,
    language_list,
    map_google_code,
    map_lingva_code,
    replace_excepted_code,
)
from .models import (
    Definition,
    DefinitionsGroup,
    ExtraTranslation,
    ExtraTranslationsGroup,
    Pronunciation,
    TranslationInfo,
)
from .parse import parse_rpc_response, parse_translation_info

__all__ = [
    "LANGUAGES",
    "SOURCE_LANGUAGES",
    "TARGET_LANGUAGES",
    "Definition",
    "DefinitionsGroup",
    "ExtraTranslation",
    "ExtraTranslationsGroup",
    "LanguageType",
    "Pronunciation",
    "TranslationInfo",
    "is_valid_code",
    "language_list",
    "map_google_code",
    "map_lingva_code",
    "parse_rpc_response",
    "parse_translation_info",
    "replace_excepted_code",
    "undefined_fields",
]
