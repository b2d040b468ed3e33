"""Recovery of a single JSON value from LLM output.

The pipeline strips fences and variable declarations, locates the first
opening bracket, and tries a strict parse of everything from there. When that
fails (trailing prose, stray closing brackets, a second value), the boundary
scanner supplies candidate end offsets which are parsed longest first.

Successful results are re-serialized canonically. When nothing parses, the
caller gets its original text back, untouched.
"""

import json
import math
import re
from dataclasses import dataclass
from typing import Any, Literal

from jsonsalvage.core.scanner import find_start, scan_closing_positions
from jsonsalvage.core.strip import strip_declaration, strip_fence

Stage = Literal["strict", "boundary"]

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


@dataclass(frozen=True)
class Extraction:
    """Outcome of an extraction attempt.

    Attributes:
        text: Canonical JSON when found, otherwise the original input.
        found: Whether a JSON value was recovered.
        stage: "strict" when the whole remainder parsed, "boundary" when a
            scanned candidate did, None when extraction failed.
    """

    text: str
    found: bool
    stage: Stage | None = None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _parse_float(literal: str) -> float | None:
    # Literals beyond float range (1e400) become null, never Infinity.
    value = float(literal)
    return value if math.isfinite(value) else None


def _escape_surrogate(match: re.Match) -> str:
    return f"\\u{ord(match.group()):04x}"


def try_canonicalize(candidate: str) -> str | None:
    """Strictly parse candidate as one JSON value and re-serialize it.

    NaN and Infinity literals are rejected and numbers too large for a float
    are written as null. Lone surrogates are kept as \\u escapes so the
    result always encodes as UTF-8. Nesting too deep for the parser counts as
    a failed parse.

    Args:
        candidate: Text that should be exactly one JSON value.

    Returns:
        The value with no insignificant whitespace, keys in original order,
        or None if candidate is not valid JSON.
    """
    try:
        value = json.loads(candidate, parse_constant=_reject_constant, parse_float=_parse_float)
        canonical = json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        return _LONE_SURROGATE.sub(_escape_surrogate, canonical)
    except (ValueError, RecursionError):
        return None


def extract(text: str) -> Extraction:
    """Recover the JSON value a model most plausibly intended.

    Args:
        text: Arbitrary text expected to hold one JSON object or array.

    Returns:
        An Extraction. On failure its text is exactly the input.
    """
    content = strip_declaration(strip_fence(text.strip()))

    start = find_start(content)
    if start == -1:
        return Extraction(text=text, found=False)
    content = content[start:]

    canonical = try_canonicalize(content)
    if canonical is not None:
        return Extraction(text=canonical, found=True, stage="strict")

    for end in reversed(scan_closing_positions(content)):
        canonical = try_canonicalize(content[:end])
        if canonical is not None:
            return Extraction(text=canonical, found=True, stage="boundary")

    return Extraction(text=text, found=False)


def extract_json(text: str) -> str:
    """Extract JSON from a model response, tolerating common wrappers.

    Never raises. Callers that need to know whether a value was found should
    use extract() instead of comparing strings.

    Args:
        text: Raw model output.

    Returns:
        Canonical JSON text, or text unchanged when no value was recovered.

    Example:
        >>> extract_json('```json\\n{"name": "test", "value": 123}\\n```')
        '{"name":"test","value":123}'
        >>> extract_json("not valid json")
        'not valid json'
    """
    return extract(text).text
