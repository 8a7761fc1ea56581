# SPDX-License-Identifier: Apache-2.0
"""Tests for RPC response extraction."""

from __future__ import annotations

from typing import Any

import pytest

from illyria_scraper.core import parse
from illyria_scraper.core.helpers import is_undefined, undefined_fields
from illyria_scraper.core.models import (
    Definition,
    DefinitionsGroup,
    ExtraTranslation,
    ExtraTranslationsGroup,
    Pronunciation,
    TranslationInfo,
)


class TestAt:
    """Tests for positional lookups."""

    def test_existing_path(self) -> None:
        """A valid path returns the nested value."""
        assert parse.at([[1, [2, 3]]], 0, 1, 1) == 3

    def test_empty_path(self) -> None:
        """No indices returns the value itself."""
        assert parse.at("value") == "value"

    def test_out_of_range(self) -> None:
        """Indices past the end yield None."""
        assert parse.at([[1]], 0, 5) is None

    def test_none_and_wrong_types(self) -> None:
        """Lookups into None, strings or dicts yield None."""
        assert parse.at(None, 0) is None
        assert parse.at("abc", 0) is None
        assert parse.at({0: "x"}, 0) is None

    def test_negative_index_rejected(self) -> None:
        """Negative indices are not allowed to wrap around."""
        assert parse.at([1, 2, 3], -1) is None


class TestScalarExtractors:
    """Tests for single-value extractors."""

    def test_detected_from_source(self, sample_payload: list[Any]) -> None:
        """Detected language comes from source_info[2] first."""
        sample_payload[0][2] = "fr"
        assert parse.detected(sample_payload) == "fr"

    def test_detected_fallback_order(self, sample_payload: list[Any]) -> None:
        """Missing slots fall through to the next candidate."""
        sample_payload[0][2] = None
        sample_payload[1][3] = None
        sample_payload[2] = None
        assert parse.detected(sample_payload) == "es"  # extra[5][0][0][3]

        sample_payload[3].extend([None, None, "de"])  # extra[8]
        assert parse.detected(sample_payload) == "de"

    def test_detected_maps_google_code(self) -> None:
        """Google codes are mapped back to internal codes."""
        assert parse.detected([[None, None, "zh-CN"]]) == "zh"

    def test_detected_missing(self) -> None:
        """No candidate yields None."""
        assert parse.detected([]) is None
        assert parse.detected(None) is None

    def test_typo(self, sample_payload: list[Any]) -> None:
        """Typo suggestion is read from source_info."""
        assert parse.typo(sample_payload) == "win"

    def test_pronunciations(self, sample_payload: list[Any]) -> None:
        """Pronunciations are read from source_info and target_info."""
        assert parse.pronunciation_query(sample_payload) == "wɪn"
        assert parse.pronunciation_translation(sample_payload) == "gaˈnar"

    def test_mistyped_values(self) -> None:
        """Non-string values in string slots are treated as absent."""
        data = [[123, [[None, None, None, None, 456]]], [[[None, ["x"]]]]]
        assert parse.typo(data) is None
        assert parse.pronunciation_query(data) is None
        assert parse.pronunciation_translation(data) is None


class TestListExtractors:
    """Tests for list extractors."""

    def test_definitions(self, sample_payload: list[Any]) -> None:
        """Definitions are grouped by type with synonyms flattened."""
        groups = parse.definitions(sample_payload)

        assert [g.type for g in groups] == ["verb", "noun"]
        first = groups[0].list[0]
        assert first.definition == "be successful or victorious in a contest"
        assert first.example == "who won the race?"
        assert first.field == "informal"
        assert first.synonyms == ["triumph", "succeed", "prevail"]

        second = groups[0].list[1]
        assert second.example is None
        assert second.field is None
        assert second.synonyms == []

    def test_examples(self, sample_payload: list[Any]) -> None:
        """Examples take the second element of each pair."""
        assert parse.examples(sample_payload) == [
            "we <b>win</b> the game",
            "they <b>won</b> easily",
        ]

    def test_similar(self, sample_payload: list[Any]) -> None:
        """Similar terms are returned as-is."""
        assert parse.similar(sample_payload) == ["won", "winner", "winning"]

    def test_similar_kept_as_returned(self, sample_payload: list[Any]) -> None:
        """Similar entries are not filtered or converted."""
        sample_payload[3][3] = [["won", None, 7, ""]]
        assert parse.similar(sample_payload) == ["won", None, 7, ""]

    def test_extra_translations(self, sample_payload: list[Any]) -> None:
        """Extra translations invert the frequency rank."""
        groups = parse.extra_translations(sample_payload)

        assert [g.type for g in groups] == ["verbo", "sustantivo"]
        ganar, vencer = groups[0].list
        assert ganar == ExtraTranslation(
            word="ganar", article=None, meanings=["win", "earn", "gain"], frequency=3
        )
        assert vencer.frequency == 1
        victoria = groups[1].list[0]
        assert victoria.article == "la"
        assert victoria.frequency == 2

    def test_frequency_non_numeric(self) -> None:
        """A missing rank leaves frequency unset instead of raising."""
        data = [None, None, None, [None, None, None, None, None, [[["n", [["w", None, [], None]]]]]]]
        (group,) = parse.extra_translations(data)
        assert group.list[0].frequency is None

    def test_empty_extra(self, sample_payload: list[Any]) -> None:
        """An empty extra slot yields empty lists, never None."""
        sample_payload[3] = []
        assert parse.definitions(sample_payload) == []
        assert parse.examples(sample_payload) == []
        assert parse.similar(sample_payload) == []
        assert parse.extra_translations(sample_payload) == []

    def test_missing_extra(self) -> None:
        """A payload without an extra slot yields empty lists."""
        data: list[Any] = [None, None]
        assert parse.definitions(data) == []
        assert parse.examples(data) == []
        assert parse.similar(data) == []
        assert parse.extra_translations(data) == []

    def test_malformed_groups_skipped(self) -> None:
        """Groups that are not lists are skipped."""
        data = [None, None, None, [None, [[None, "oops", ["verb", None]]]]]
        assert parse.definitions(data) == [DefinitionsGroup(type="verb", list=[])]


class TestParseTranslationInfo:
    """Tests for parse_translation_info."""

    def test_full_payload(self, sample_payload: list[Any]) -> None:
        """All fields are assembled from the payload."""
        info = parse.parse_translation_info(sample_payload)

        assert info.detected_source == "en"
        assert info.typo == "win"
        assert info.pronunciation == Pronunciation(query="wɪn", translation="gaˈnar")
        assert len(info.definitions) == 2
        assert len(info.examples) == 2
        assert len(info.similar) == 3
        assert len(info.extra_translations) == 2

    def test_without_detection(self, sample_payload: list[Any]) -> None:
        """Detection can be skipped when the source was given explicitly."""
        info = parse.parse_translation_info(sample_payload, detect_source=False)
        assert info.detected_source is None

    def test_empty_payload(self) -> None:
        """An empty payload yields an empty TranslationInfo."""
        assert parse.parse_translation_info([]) == TranslationInfo()


class TestParseRpcResponse:
    """Tests for decoding the batch-execute envelope."""

    def test_wrapped_response(self, rpc_response, sample_payload: list[Any]) -> None:
        """The double-encoded payload is located and decoded."""
        assert parse.parse_rpc_response(rpc_response(sample_payload)) == sample_payload

    def test_nested_frame(self) -> None:
        """The RPC frame is found regardless of nesting depth."""
        text = (
            '\n\n\n[[[["wrb.fr","MkEWBc","[[\\"test\\",\\"en\\",\\"fr\\",true],null]",'
            'null,null,null,"generic"]],["di",123],["af.httprm",123,"abcde",123]]]'
        )
        assert parse.parse_rpc_response(text) == [["test", "en", "fr", True], None]

    def test_payload_not_json(self) -> None:
        """A payload that is not JSON yields None."""
        text = '[[["wrb.fr","MkEWBc","mock data",null,null,null,"generic"]]]'
        assert parse.parse_rpc_response(text) is None

    @pytest.mark.parametrize(
        "text",
        [
            None,
            "",
            ")]}'\n\n",
            "<html>error</html>",
            '[["wrb.fr","OtherRpc","[1]"]]',
            '[["wrb.fr","MkEWBc",null]]',
            '[["wrb.fr","MkEWBc","[]"]]',
        ],
    )
    def test_unusable_responses(self, text: str | None) -> None:
        """Missing, empty or foreign frames yield None."""
        assert parse.parse_rpc_response(text) is None


class TestUndefinedFields:
    """Tests for the generic undefined-field normalizer."""

    def test_nested_cleanup(self) -> None:
        """Only populated fields survive at every depth."""
        obj = {
            "empty": [],
            "missing": None,
            "kept": "value",
            "nested": {"empty": [], "missing": None, "kept": "value"},
            "items": [{"empty": "", "kept": 1}, None, ""],
        }
        assert undefined_fields(obj) == {
            "kept": "value",
            "nested": {"kept": "value"},
            "items": [{"kept": 1}],
        }

    def test_containers_emptied_by_cleanup(self) -> None:
        """Containers left empty after cleaning are removed as well."""
        assert undefined_fields({"a": {"b": None}, "c": [[], {"d": ""}]}) == {}

    def test_keeps_zero_and_false(self) -> None:
        """Zero and False are values, not missing fields."""
        assert undefined_fields({"n": 0, "flag": False}) == {"n": 0, "flag": False}

    def test_does_not_mutate_input(self) -> None:
        """The input is left untouched."""
        obj = {"a": None, "b": [None, 1]}
        undefined_fields(obj)
        assert obj == {"a": None, "b": [None, 1]}

    def test_scalars_pass_through(self) -> None:
        """Non-container values are returned unchanged."""
        assert undefined_fields("text") == "text"
        assert undefined_fields(5) == 5

    def test_is_undefined(self) -> None:
        """is_undefined recognizes empty values only."""
        assert is_undefined(None)
        assert is_undefined("")
        assert is_undefined([])
        assert is_undefined({})
        assert not is_undefined(0)
        assert not is_undefined(" ")


class TestTranslationInfoToDict:
    """Tests for TranslationInfo.to_dict."""

    def test_empty_info(self) -> None:
        """An empty result serializes to an empty payload."""
        assert TranslationInfo().to_dict() == {}

    def test_camel_case_and_cleanup(self) -> None:
        """Keys are camelCase and empty fields are stripped."""
        info = TranslationInfo(
            detected_source="en",
            pronunciation=Pronunciation(translation="gaˈnar"),
            definitions=[
                DefinitionsGroup(
                    type="verb",
                    list=[Definition(definition="be victorious", synonyms=["triumph"])],
                )
            ],
            extra_translations=[
                ExtraTranslationsGroup(
                    type="verbo",
                    list=[ExtraTranslation(word="ganar", meanings=["win"], frequency=3)],
                )
            ],
        )
        assert info.to_dict() == {
            "detectedSource": "en",
            "pronunciation": {"translation": "gaˈnar"},
            "definitions": [
                {
                    "type": "verb",
                    "list": [{"definition": "be victorious", "synonyms": ["triumph"]}],
                }
            ],
            "extraTranslations": [
                {
                    "type": "verbo",
                    "list": [{"word": "ganar", "meanings": ["win"], "frequency": 3}],
                }
            ],
        }

    def test_frozen(self) -> None:
        """TranslationInfo is immutable."""
        info = TranslationInfo()
        with pytest.raises(AttributeError):
            info.typo = "x"  # type: ignore[misc]
