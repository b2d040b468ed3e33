"""Helper utilities for jsonsalvage.

Exports:
    load_json: Extract and parse JSON from text with markdown or prose.
    JSONExtractionError: Raised by load_json when nothing can be recovered.
"""

from jsonsalvage.helpers.json import JSONExtractionError, load_json

__all__ = ["JSONExtractionError", "load_json"]
