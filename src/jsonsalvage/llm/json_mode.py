"""JSON output mode for LLM agents.

This module provides JsonModeAgent, a wrapper that applies JSON recovery to
whatever an underlying agent returns. Talking to the model is left to the
wrapped agent; the wrapper only decides when extraction runs:

- once per completed response from prompt()
- once per accumulated response from stream(), after the last chunk
"""

import logging
from collections.abc import Iterator

from jsonsalvage.core.pipeline import extract
from jsonsalvage.llm.agent import Agent, StreamingAgent

logger = logging.getLogger("jsonsalvage.llm.json_mode")


class JsonModeAgent:
    """Agent wrapper that returns canonical JSON when JSON mode is on.

    With json_mode disabled the wrapper is transparent. With it enabled,
    responses go through extract_json semantics: canonical JSON if a value was
    recovered, the raw response otherwise. Exceptions raised by the wrapped
    agent propagate unchanged.

    Attributes:
        agent: The wrapped agent.
        json_mode: Whether responses are expected to contain JSON.

    Example:
        >>> class Canned:
        ...     def prompt(self, prompt: str) -> str:
        ...         return 'Sure!\\n```json\\n{"answer": 4}\\n```'
        >>> JsonModeAgent(Canned()).prompt("What is 2+2? Reply in JSON.")
        '{"answer":4}'
    """

    def __init__(self, agent: Agent | StreamingAgent, json_mode: bool = True) -> None:
        self.agent = agent
        self.json_mode = json_mode
        logger.debug(f"JsonModeAgent initialized: agent={type(agent).__name__}, json_mode={json_mode}")

    def prompt(self, prompt: str) -> str:
        """Send prompt to the wrapped agent and post-process the response.

        Args:
            prompt: The prompt string to send.

        Returns:
            The extracted JSON in JSON mode, otherwise the raw response.
            Empty responses are returned as-is.
        """
        logger.info(f"Prompt submitted (length={len(prompt)} chars, json_mode={self.json_mode})")
        response = self.agent.prompt(prompt)
        logger.info(f"Response received (length={len(response)} chars)")
        if not self.json_mode or not response:
            return response
        return self._extract(response)

    def stream(self, prompt: str) -> Iterator[str]:
        """Stream a response from the wrapped agent.

        In regular mode chunks are yielded as they arrive. In JSON mode chunks
        are accumulated and a single extracted value is yielded after the
        stream ends; nothing is yielded for an empty stream.

        Args:
            prompt: The prompt string to send.

        Yields:
            Text chunks, or one extracted JSON string in JSON mode.
        """
        logger.info(f"Streaming prompt submitted (length={len(prompt)} chars, json_mode={self.json_mode})")
        if not self.json_mode:
            yield from self.agent.stream(prompt)
            return

        accumulated = "".join(self.agent.stream(prompt))
        logger.info(f"Stream finished (length={len(accumulated)} chars)")
        if accumulated:
            yield self._extract(accumulated)

    def _extract(self, response: str) -> str:
        result = extract(response)
        if result.found:
            logger.debug(f"JSON recovered at stage={result.stage} (length={len(result.text)} chars)")
        else:
            logger.warning("JSON mode response contained no recoverable JSON value; returning raw text")
        return result.text
