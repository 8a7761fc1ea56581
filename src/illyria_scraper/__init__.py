# SPDX-License-Identifier: Apache-2.0
"""Google Translate scraper.

Scrapes the undocumented Google Translate web endpoints for translations,
translation metadata and synthesized speech.

Usage:
    from illyria_scraper import translate_text, translate_info, synthesize_audio

    text = await translate_text("auto", "es", "win")        # "ganar"
    info = await translate_info("en", "es", "win")          # TranslationInfo
    audio = await synthesize_audio("es", "ganar")           # list of byte values
"""

from illyria_scraper.core.languages import (
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
from illyria_scraper.core.models import (
    Definition,
    DefinitionsGroup,
    ExtraTranslation,
    ExtraTranslationsGroup,
    Pronunciation,
    TranslationInfo,
)
from illyria_scraper.scraper import synthesize_audio, translate_info, translate_text
from illyria_scraper.transport.config import RequestConfig
from illyria_scraper.transport.errors import InvalidEndpointError, ScraperError

__version__ = "1.1.1"

__all__ = [
    # Scraping
    "synthesize_audio",
    "translate_info",
    "translate_text",
    "RequestConfig",
    # Language codes
    "LANGUAGES",
    "SOURCE_LANGUAGES",
    "TARGET_LANGUAGES",
    "LanguageType",
    "is_valid_code",
    "language_list",
    "map_google_code",
    "map_lingva_code",
    "replace_excepted_code",
    # Models
    "Definition",
    "DefinitionsGroup",
    "ExtraTranslation",
    "ExtraTranslationsGroup",
    "Pronunciation",
    "TranslationInfo",
    # Errors
    "InvalidEndpointError",
    "ScraperError",
]
