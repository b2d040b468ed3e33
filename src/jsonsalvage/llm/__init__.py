"""LLM integration for jsonsalvage.

Exports:
    Agent: Protocol for agents returning one complete response.
    StreamingAgent: Protocol for agents streaming text chunks.
    JsonModeAgent: Wrapper applying JSON recovery to agent responses.
"""

from jsonsalvage.llm.agent import Agent, StreamingAgent
from jsonsalvage.llm.json_mode import JsonModeAgent

__all__ = ["Agent", "JsonModeAgent", "StreamingAgent"]
