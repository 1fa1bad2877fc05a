from typing import Optional, Tuple


class Cursor:
    """A single-character lookahead view over an input string.

    Args:
        string_ (str): Input text.
    """

    def __init__(self, string_: str) -> None:
        if not isinstance(string_, str):
            raise TypeError(f"input must be str type, but got '{type(string_)}' type")
        self.string: str = string_
        self.pos: int = 0

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it, or None at the end of input."""
        if self.pos < len(self.string):
            return self.string[self.pos]
        return None

    def advance(self) -> Optional[str]:
        """Consume the next character and return it."""
        char = self.peek()
        if char is not None:
            self.pos += 1
        return char

    def location(self, pos: Optional[int] = None) -> Tuple[int, int]:
        """Return 1-origin (row, col) of the given offset (default: current offset)."""
        if pos is None:
            pos = self.pos
        buf = self.string[:pos]
        row = buf.count('\n') + 1
        col = len(buf.split('\n')[-1]) + 1
        return row, col

    def __repr__(self) -> str:
        return f'Cursor(pos: {self.pos}, next: {self.peek()!r})'
