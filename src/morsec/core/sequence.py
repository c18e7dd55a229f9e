from typing import Callable

from .parser import ParseFn
from .result import Failure, Ok, Result
from .types import Cursor


def eof() -> ParseFn[None]:
    expected = ("end of file",)

    def eof(cursor: Cursor) -> Result[None]:
        if cursor.at_end():
            return Ok(None, cursor)
        return Failure(cursor.pos, expected)

    return eof


def satisfy(test: Callable[[str], bool]) -> ParseFn[str]:
    def satisfy(cursor: Cursor) -> Result[str]:
        text, pos = cursor
        if pos < len(text):
            c = text[pos]
            if test(c):
                return Ok(c, cursor.advance(1))
        return Failure(pos)

    return satisfy
