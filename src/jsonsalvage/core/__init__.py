"""JSON recovery pipeline.

The core is a chain of pure functions applied to one input string:

- strip_fence: keep only the first Markdown code fence's content
- strip_declaration: drop a ``const|let|var name =`` prefix and trailing ``;``
- find_start: locate the leftmost ``{`` or ``[``
- try_canonicalize: strict parse plus canonical re-serialization
- scan_closing_positions: candidate end offsets for the root value

extract() runs the chain and reports how it ended; extract_json() returns
just the text.

Typical usage:
    from jsonsalvage.core import extract_json

    extract_json('Sure! ```json\\n{"ok": true}\\n```')  # '{"ok":true}'
"""

from jsonsalvage.core.pipeline import Extraction, extract, extract_json, try_canonicalize
from jsonsalvage.core.scanner import ScanState, find_start, scan_closing_positions
from jsonsalvage.core.strip import strip_declaration, strip_fence

__all__ = [
    "Extraction",
    "ScanState",
    "extract",
    "extract_json",
    "find_start",
    "scan_closing_positions",
    "strip_declaration",
    "strip_fence",
    "try_canonicalize",
]
