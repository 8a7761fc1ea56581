# SPDX-License-Identifier: Apache-2.0
"""Public scraping API.

All functions are coroutines and resolve to None when the upstream cannot
provide a result (invalid input, network failure after retries, unexpected
response shape). Details are only reported through logging.

Usage:
    text = await translate_text("auto", "es", "win")
    info = await translate_info("en", "es", "win")
    audio = await synthesize_audio("es", "ganar", slow=True)
"""

from __future__ import annotations

import json
import logging

from bs4 import BeautifulSoup

from illyria_scraper.core.languages import (
    LanguageType,
    is_valid_code,
    map_google_code,
    replace_excepted_code,
)
from illyria_scraper.core.models import TranslationInfo
from illyria_scraper.core.parse import RPC_ID, parse_rpc_response, parse_translation_info
from illyria_scraper.transport.config import RequestConfig
from illyria_scraper.transport.request import (
    AudioParams,
    Endpoint,
    HTTPResponse,
    InfoParams,
    TextParams,
    encode_uri_component,
    request,
)

logger = logging.getLogger(__name__)

MAX_QUERY_LENGTH = 7500
MAX_AUDIO_TEXT_LENGTH = 200
RESULT_SELECTOR = ".result-container"
ERROR_PAGE_MARKER = "#af-error-page"


def _resolve_code(code: str, lang_type: LanguageType) -> str | None:
    """Validate a code for a direction and map it to Google's code."""
    code = replace_excepted_code(lang_type, code)
    if not is_valid_code(code, lang_type):
        logger.warning("Invalid %s language code: %r", lang_type.value, code)
        return None
    return map_google_code(code)


def _extract_text(response: HTTPResponse) -> str | None:
    if not response.data or not isinstance(response.data, str):
        return None

    soup = BeautifulSoup(response.data, "html.parser")
    node = soup.select_one(RESULT_SELECTOR)
    if node is None:
        return None

    translation = node.get_text().strip()
    if not translation or ERROR_PAGE_MARKER in translation:
        return None
    return translation


async def translate_text(
    source: str,
    target: str,
    query: str,
    config: RequestConfig | None = None,
) -> str | None:
    """Translate a query using the mobile text endpoint.

    Args:
        source: Internal source language code ("auto" to detect).
        target: Internal target language code.
        query: Text to translate.
        config: Request settings.

    Returns:
        Translated text, or None if it could not be retrieved.
    """
    parsed_source = _resolve_code(source, LanguageType.SOURCE)
    parsed_target = _resolve_code(target, LanguageType.TARGET)
    if parsed_source is None or parsed_target is None:
        return None

    encoded_query = encode_uri_component(query)
    if len(encoded_query) > MAX_QUERY_LENGTH:
        logger.warning(
            "Query too long (%d escaped characters, limit %d)",
            len(encoded_query),
            MAX_QUERY_LENGTH,
        )
        return None

    params = TextParams(source=parsed_source, target=parsed_target, query=encoded_query)
    result: str | None = await request(Endpoint.TEXT, params, config).doing(_extract_text)
    return result


def build_info_body(query: str, source: str, target: str) -> str:
    """Build the form body for the RPC call.

    The RPC arguments are JSON encoded twice: once for the call itself and
    once for the batch envelope.

    Args:
        query: Text to translate.
        source: Google source code.
        target: Google target code.

    Returns:
        URL-encoded ``f.req=...`` body.
    """
    rpc_args = json.dumps(
        [[query, source, target, True], [None]],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    envelope = json.dumps(
        [[[RPC_ID, rpc_args, None, "generic"]]],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    return "f.req=" + encode_uri_component(envelope)


async def translate_info(
    source: str,
    target: str,
    query: str,
    config: RequestConfig | None = None,
) -> TranslationInfo | None:
    """Retrieve detailed translation metadata using the RPC endpoint.

    Args:
        source: Internal source language code ("auto" to detect).
        target: Internal target language code.
        query: Text to translate.
        config: Request settings.

    Returns:
        TranslationInfo, or None if it could not be retrieved. The detected
        source language is only filled in when ``source`` is "auto".
    """
    parsed_source = _resolve_code(source, LanguageType.SOURCE)
    parsed_target = _resolve_code(target, LanguageType.TARGET)
    if parsed_source is None or parsed_target is None:
        return None

    detect_source = source == "auto"

    def extract(response: HTTPResponse) -> TranslationInfo | None:
        if not isinstance(response.data, str):
            return None
        data = parse_rpc_response(response.data)
        if data is None:
            return None
        return parse_translation_info(data, detect_source=detect_source)

    body = build_info_body(query, parsed_source, parsed_target)
    result: TranslationInfo | None = await request(
        Endpoint.INFO, InfoParams(body=body), config
    ).doing(extract)
    return result


def slice_audio_text(text: str) -> str:
    """Cut text to the length the speech endpoint accepts.

    Text longer than the limit is cut at the last space within it, or hard
    at the limit when there is no space.
    """
    if len(text) <= MAX_AUDIO_TEXT_LENGTH:
        return text
    last_space = text.rfind(" ", 0, MAX_AUDIO_TEXT_LENGTH + 1)
    return text[: last_space if last_space != -1 else MAX_AUDIO_TEXT_LENGTH]


def _extract_audio(response: HTTPResponse) -> list[int] | None:
    if not response.data or not isinstance(response.data, bytes):
        return None
    return list(response.data)


async def synthesize_audio(
    target: str,
    text: str,
    slow: bool = False,
    config: RequestConfig | None = None,
) -> list[int] | None:
    """Synthesize speech for a text.

    Args:
        target: Internal language code of the text.
        text: Text to speak. Only the first 200 characters are used.
        slow: Use the slow speaking rate.
        config: Request settings.

    Returns:
        Audio (MP3) as a list of byte values, or None if unavailable.
    """
    parsed_lang = _resolve_code(target, LanguageType.TARGET)
    if parsed_lang is None:
        return None

    sliced_text = slice_audio_text(text)
    params = AudioParams(
        lang=parsed_lang,
        text=encode_uri_component(sliced_text),
        text_length=len(sliced_text),
        speed=0.1 if slow else 1,
    )
    result: list[int] | None = await request(Endpoint.AUDIO, params, config).doing(
        _extract_audio
    )
    return result
