"""Agent protocols.

An agent is anything with a ``prompt(prompt) -> str`` method. Agents that
can stream also provide ``stream(prompt)`` yielding text chunks. Concrete
backends live outside this package; tests and callers supply their own.
"""
from collections.abc import Iterable
from typing import Protocol


class Agent(Protocol):
    """Protocol for agents that answer a prompt with one complete response."""

    def prompt(self, prompt: str) -> str:
        """Send a prompt and return the response text.

        Args:
            prompt: The prompt string to send to the model.

        Returns:
            The model's response text.
        """
        ...


class StreamingAgent(Protocol):
    """Protocol for agents that answer a prompt with a stream of text chunks."""

    def stream(self, prompt: str) -> Iterable[str]:
        """Send a prompt and yield the response in chunks.

        Args:
            prompt: The prompt string to send to the model.

        Returns:
            An iterable of text chunks that concatenate to the full response.
        """
        ...
