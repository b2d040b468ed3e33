"""jsonsalvage: recover the JSON value buried in an LLM response.

Model output that should be a single JSON object or array often arrives
wrapped in Markdown fences, variable declarations, prose, or followed by
stray brackets. jsonsalvage finds the value, re-serializes it canonically,
and hands back the original text untouched when there is nothing to find.
"""

from jsonsalvage.core.pipeline import Extraction, extract, extract_json
from jsonsalvage.helpers.json import JSONExtractionError, load_json
from jsonsalvage.llm.json_mode import JsonModeAgent

__all__ = [
    "Extraction",
    "JSONExtractionError",
    "JsonModeAgent",
    "extract",
    "extract_json",
    "load_json",
]
