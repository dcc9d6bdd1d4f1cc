"""Tests for parsing LLM replies (no network)."""

import pytest
from unoquiz.agents.llm_agent import _parse_color_response, _parse_index_response, _wants_draw
from unoquiz.config import provider_settings
from unoquiz.engine import Color


def test_parse_strict_json() -> None:
    assert _parse_index_response('{"answer_index": 2}', "answer_index", 4) == 2


def test_parse_single_quoted_json() -> None:
    assert _parse_index_response("Sure! {'card_index': 1}", "card_index", 3) == 1


def test_parse_loose_key_value() -> None:
    assert _parse_index_response("answer_index: 3 because...", "answer_index", 4) == 3


def test_parse_out_of_range_falls_through() -> None:
    assert _parse_index_response('{"answer_index": 9}', "answer_index", 4) is None


def test_parse_bare_number() -> None:
    assert _parse_index_response("I pick option 0.", "answer_index", 4) == 0


def test_wants_draw() -> None:
    assert _wants_draw('{"action": "DRAW"}')
    assert not _wants_draw('{"card_index": 0}')


def test_parse_color() -> None:
    assert _parse_color_response('{"color": "Green"}') == Color.GREEN
    assert _parse_color_response("blue, or maybe red") == Color.BLUE
    assert _parse_color_response("purple") is None


def test_provider_settings_requires_key(monkeypatch) -> None:
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    with pytest.raises(ValueError):
        provider_settings("groq")
    monkeypatch.setenv("GROQ_API_KEY", "secret")
    assert provider_settings("groq")[1] == "secret"
    assert provider_settings("ollama")[1] == "ollama"
    with pytest.raises(ValueError):
        provider_settings("nope")
