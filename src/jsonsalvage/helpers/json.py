"""Parsed JSON from LLM responses.

extract_json() hands back text and never fails. This module is for callers
that want the decoded value and would rather get an exception than the
original response when nothing could be recovered.
"""

import json as _json
from typing import Any

from jsonsalvage.core.pipeline import extract


class JSONExtractionError(ValueError):
    """Raised when no JSON value can be recovered from a response."""


def load_json(text: str) -> Any:
    """Extract and parse the JSON value in text.

    Applies the same recovery as extract_json(): fences and variable
    declarations are removed, surrounding prose and trailing garbage ignored.

    Args:
        text: Raw text potentially containing a JSON object or array wrapped
              in markdown code fences or surrounding prose.

    Returns:
        The parsed value, a dict or a list.

    Raises:
        JSONExtractionError: If no JSON value could be recovered.

    Example:
        >>> load_json('Here is some data: {"a": 1} and more text')
        {'a': 1}
    """
    result = extract(text)
    if not result.found:
        raise JSONExtractionError(f"No JSON value found in text: {text!r}")
    return _json.loads(result.text)
