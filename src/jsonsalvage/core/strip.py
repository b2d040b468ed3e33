"""Wrapper removal for LLM JSON responses.

Models often wrap the value they were asked for in a Markdown code fence or
in a JavaScript-style variable declaration. These helpers peel such wrappers
off before the start of the JSON value is located.
"""

import re

FENCE_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)
DECLARATION_PATTERN = re.compile(r"^\s*(?:const|let|var)\s+\w+\s*=\s*([\s\S]*)", re.IGNORECASE)


def strip_fence(text: str) -> str:
    """Return the content of the first Markdown code fence in text.

    The fence may carry an optional, case-insensitive ``json`` language tag.
    Everything outside the first fenced block is discarded. Text without a
    fence is returned unchanged.

    Args:
        text: Raw model output.

    Returns:
        The trimmed content of the first fenced block, or text itself.

    Example:
        >>> strip_fence('Here you go:\\n```JSON\\n{"a": 1}\\n```\\nBye')
        '{"a": 1}'
    """
    match = FENCE_PATTERN.search(text)
    if match is None:
        return text
    return match.group(1)


def strip_declaration(text: str) -> str:
    """Remove a leading ``const|let|var <name> =`` prefix and a trailing ``;``.

    The semicolon is only removed when a declaration prefix was found.

    Args:
        text: Text that may start with a variable declaration.

    Returns:
        The declared value, or text unchanged when there is no declaration.

    Example:
        >>> strip_declaration('let data = {"test": true};')
        '{"test": true}'
    """
    match = DECLARATION_PATTERN.match(text)
    if match is None:
        return text
    value = match.group(1)
    if value.strip().endswith(";"):
        value = value.strip()[:-1]
    return value
