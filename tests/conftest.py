# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import patch

import pytest

TEST_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) Test/1.0"


@pytest.fixture
def fixed_user_agent():
    """Replace User-Agent generation with a fixed string."""
    with patch(
        "illyria_scraper.transport.request.random_user_agent",
        return_value=TEST_USER_AGENT,
    ) as mock_agent:
        yield mock_agent


def wrap_rpc_payload(payload: Any) -> str:
    """Wrap a payload the way the batch-execute endpoint does."""
    frame = json.dumps(
        [
            ["wrb.fr", "MkEWBc", json.dumps(payload), None, None, None, "generic"],
            ["di", 45],
            ["af.httprm", 44, "-4391742474950316339", 6],
        ]
    )
    return ")]}'\n\n" + f"{len(frame)}\n{frame}\n" + '25\n[["e",4,null,null,512]]\n'


@pytest.fixture
def sample_payload() -> list[Any]:
    """Decoded RPC payload for the query "wni" (en -> es)."""
    source_info = ["wɪn", [[None, None, None, None, "win"]], "en"]
    target_info = [[["ganar", "gaˈnar"]], None, None, "en"]
    extra = [
        "wni",
        [
            [
                [
                    "verb",
                    [
                        [
                            "be successful or victorious in a contest",
                            "who won the race?",
                            None,
                            None,
                            [["informal"]],
                            [[[["triumph"], ["succeed"], [""]]], [[["prevail"]]]],
                        ],
                        ["acquire as a result of a contest", None],
                    ],
                ],
                ["noun", [["a successful result in a contest", "a 2-0 win"]]],
            ]
        ],
        [[[None, "we <b>win</b> the game"], [None, "they <b>won</b> easily"]]],
        [["won", "winner", "winning"]],
        None,
        [
            [
                [
                    "verbo",
                    [
                        ["ganar", None, ["win", "earn", "gain"], 1],
                        ["vencer", None, ["defeat", "win"], 3],
                    ],
                    None,
                    "es",
                ],
                ["sustantivo", [["victoria", "la", ["victory", "win"], 2]]],
            ]
        ],
    ]
    return [source_info, target_info, "en", extra]


@pytest.fixture
def rpc_response():
    """Factory turning a payload into a raw batch-execute response body."""
    return wrap_rpc_payload
