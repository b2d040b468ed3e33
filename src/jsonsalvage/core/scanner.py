"""Boundary detection for the root JSON value.

The scanner walks the text once, from the opening bracket of the root value,
and records every offset at which that bracket's nesting closes. Each offset
is one candidate end for the value. Brackets inside string literals are
invisible to it, and backslash escapes inside strings are honoured so an
escaped quote never ends a string.
"""

from dataclasses import dataclass, field

BRACKET_PAIRS = {"{": "}", "[": "]"}


def find_start(text: str) -> int:
    """Find the index of the leftmost ``{`` or ``[`` in text.

    This is a plain search for either character; it does not care whether the
    bracket sits inside prose or a string.

    Args:
        text: Text to search.

    Returns:
        The index of the first opening bracket, or -1 if there is none.
    """
    first_obj = text.find("{")
    first_arr = text.find("[")
    if first_obj == -1:
        return first_arr
    if first_arr == -1:
        return first_obj
    return min(first_obj, first_arr)


@dataclass
class ScanState:
    """Mutable state of a single left-to-right boundary scan.

    Attributes:
        open_char: Opening bracket of the root value, fixed for the scan.
        close_char: Matching closing bracket.
        depth: Nesting depth of open_char/close_char outside strings.
        in_string: True while inside a double-quoted string literal.
        escape_next: True when the previous character was a backslash inside
            a string, so the current one has no structural meaning.
        closing_positions: Exclusive end offsets where depth went from 1 to 0,
            in ascending order.
    """

    open_char: str
    close_char: str
    depth: int = 0
    in_string: bool = False
    escape_next: bool = False
    closing_positions: list[int] = field(default_factory=list)

    @classmethod
    def for_opening(cls, open_char: str) -> "ScanState":
        """Create a fresh state for a value opened by open_char.

        Raises:
            ValueError: If open_char is not ``{`` or ``[``.
        """
        try:
            return cls(open_char=open_char, close_char=BRACKET_PAIRS[open_char])
        except KeyError:
            raise ValueError(f"Not an opening bracket: {open_char!r}")

    def advance(self, index: int, char: str) -> None:
        """Consume the character at index."""
        if self.escape_next:
            self.escape_next = False
            return
        if self.in_string:
            if char == "\\":
                self.escape_next = True
            elif char == '"':
                self.in_string = False
            return
        if char == '"':
            self.in_string = True
        elif char == self.open_char:
            self.depth += 1
        elif char == self.close_char:
            self.depth -= 1
            if self.depth == 0:
                self.closing_positions.append(index + 1)


def scan_closing_positions(text: str) -> list[int]:
    """Return every candidate end offset for the value opened at text[0].

    Args:
        text: Text starting with ``{`` or ``[``.

    Returns:
        Exclusive end offsets, shortest candidate first. Empty when the root
        bracket never closes.

    Example:
        >>> scan_closing_positions('{"a": "}"}{"b": 2}}')
        [10, 18]
    """
    state = ScanState.for_opening(text[0])
    for index, char in enumerate(text):
        state.advance(index, char)
    return state.closing_positions
