# json_cursor.py
# One-character lookahead over any iterable of characters.
#
# The parser never needs more than one character of lookahead and never
# un-consumes input, so a single buffered slot is the whole state.

from typing import Iterable, Iterator, List, Optional

# ---------------------------------------------------------------------------
# LOOKAHEAD CURSOR
# ---------------------------------------------------------------------------
class Cursor:
    """
    One-slot lookahead over a character stream.

    peek() buffers at most one character and is idempotent until the next
    advance(). End of input is reported as None by both calls, never raised.
    offset counts characters consumed so far.
    """
    def __init__(self, chars: Iterable[str]):
        self._iter: Iterator[str] = iter(chars)
        self._buf: List[str] = []
        self.offset = 0

    def peek(self) -> Optional[str]:
        if not self._buf:
            try:
                self._buf.append(next(self._iter))
            except StopIteration:
                return None
        return self._buf[-1]

    def advance(self) -> Optional[str]:
        if self._buf:
            ch = self._buf.pop()
        else:
            ch = next(self._iter, None)
            if ch is None:
                return None
        self.offset += 1
        return ch

    def accept(self, expected: str) -> bool:
        """Consume expected if it is the next character."""
        if self.peek() == expected:
            self.advance()
            return True
        return False
