"""Tests for JsonModeAgent.

Unit tests covering delegation to the wrapped agent, extraction on complete
and streamed responses, pass-through outside JSON mode, and error
propagation.
"""

import logging

import pytest

from jsonsalvage.llm.json_mode import JsonModeAgent


class TestPrompt:
    """Test suite for single-response prompting."""

    def test_json_mode_extracts_fenced_json(self, agent_factory):
        """Test that a fenced response is returned as canonical JSON."""
        agent = agent_factory('Sure!\n```json\n{"answer": 4}\n```')
        assert JsonModeAgent(agent).prompt("2+2?") == '{"answer":4}'

    def test_prompt_is_delegated(self, agent_factory):
        """Test that the prompt reaches the wrapped agent unchanged."""
        agent = agent_factory("{}")
        JsonModeAgent(agent).prompt("hello")
        assert agent.prompts == ["hello"]

    def test_json_mode_without_json_returns_raw_text(self, agent_factory):
        """Test that an unrecoverable response comes back verbatim."""
        agent = agent_factory("I cannot answer that. ")
        assert JsonModeAgent(agent).prompt("hi") == "I cannot answer that. "

    def test_regular_mode_passes_through(self, agent_factory):
        """Test that extraction is skipped when JSON mode is off."""
        agent = agent_factory('```json\n{"a": 1}\n```')
        assert JsonModeAgent(agent, json_mode=False).prompt("hi") == '```json\n{"a": 1}\n```'

    def test_empty_response_returned_as_is(self, agent_factory):
        """Test that an empty response is not processed."""
        assert JsonModeAgent(agent_factory("")).prompt("hi") == ""

    def test_backend_error_propagates(self, broken_agent):
        """Test that exceptions from the wrapped agent are not swallowed."""
        with pytest.raises(RuntimeError, match="backend unavailable"):
            JsonModeAgent(broken_agent).prompt("hi")

    def test_warning_logged_when_no_json_found(self, agent_factory, caplog, monkeypatch):
        """Test that a failed extraction in JSON mode is logged as a warning."""
        monkeypatch.setattr(logging.getLogger("jsonsalvage"), "propagate", True)
        agent = agent_factory("no json at all")
        with caplog.at_level(logging.WARNING, logger="jsonsalvage.llm.json_mode"):
            JsonModeAgent(agent).prompt("hi")
        assert "no recoverable JSON" in caplog.text


class TestStream:
    """Test suite for streamed responses."""

    def test_json_mode_yields_single_extracted_value(self, agent_factory):
        """Test that chunks are accumulated and extracted once."""
        agent = agent_factory(chunks=['```json\n{"a":', ' 1, "b": [1,', " 2]}\n", "```"])
        assert list(JsonModeAgent(agent).stream("hi")) == ['{"a":1,"b":[1,2]}']

    def test_json_mode_handles_trailing_commentary(self, agent_factory):
        """Test extraction across chunks followed by prose."""
        agent = agent_factory(chunks=['{"done": ', "true}", " Let me know if you need more!"])
        assert list(JsonModeAgent(agent).stream("hi")) == ['{"done":true}']

    def test_json_mode_empty_stream_yields_nothing(self, agent_factory):
        """Test that an empty stream produces no output."""
        assert list(JsonModeAgent(agent_factory(chunks=[])).stream("hi")) == []

    def test_regular_mode_yields_chunks_unchanged(self, agent_factory):
        """Test that chunks pass straight through when JSON mode is off."""
        chunks = ["Hello", ", ", "world"]
        agent = agent_factory(chunks=chunks)
        assert list(JsonModeAgent(agent, json_mode=False).stream("hi")) == chunks

    def test_stream_error_propagates(self, broken_agent):
        """Test that exceptions from a streaming backend are not swallowed."""
        with pytest.raises(RuntimeError, match="backend unavailable"):
            list(JsonModeAgent(broken_agent).stream("hi"))
