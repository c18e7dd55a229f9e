from typing import NamedTuple


class Cursor(NamedTuple):
    """
    Immutable view of the input: the whole text and the number of characters
    consumed so far.
    """

    text: str
    pos: int = 0

    @classmethod
    def start(cls, text: str) -> "Cursor":
        return cls(text, 0)

    @property
    def remaining(self) -> str:
        return self.text[self.pos:]

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def advance(self, count: int) -> "Cursor":
        if count == 0:
            return self
        return Cursor(self.text, self.pos + count)

    def __repr__(self) -> str:
        rest = self.text[self.pos:self.pos + 20]
        if self.pos + 20 < len(self.text):
            rest += "..."
        return "Cursor(pos={!r}, remaining={!r})".format(self.pos, rest)
