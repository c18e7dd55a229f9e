import re
from typing import Callable, NamedTuple, Optional, Pattern, Union

from .parser import ParseFn
from .result import Failure, Ok, Result
from .types import Cursor


class Loc(NamedTuple):
    pos: int
    line: int
    col: int


def get_loc(text: str, pos: int) -> Loc:
    line = text.count("\n", 0, pos)
    col = pos - text.rfind("\n", 0, pos) - 1
    return Loc(pos, line, col)


def literal(s: str) -> ParseFn[str]:
    if len(s) == 0:
        raise ValueError("Expected non-empty value")

    ls = len(s)
    expected = (repr(s),)

    def literal(cursor: Cursor) -> Result[str]:
        text, pos = cursor
        if text.startswith(s, pos):
            return Ok(s, cursor.advance(ls))
        return Failure(pos, expected)

    return literal


def take_while(test: Callable[[str], bool]) -> ParseFn[str]:
    def take_while(cursor: Cursor) -> Result[str]:
        text, pos = cursor
        end = pos
        size = len(text)
        while end < size and test(text[end]):
            end += 1
        if end == pos:
            return Ok("", cursor)
        return Ok(text[pos:end], cursor.advance(end - pos))

    return take_while


def _regexp(pat: Pattern[str], group: Union[int, str]) -> ParseFn[str]:
    match = pat.match

    def regexp(cursor: Cursor) -> Result[str]:
        text, pos = cursor
        r = match(text, pos)
        if r is not None:
            v: Optional[str] = r.group(group)
            if v is not None:
                return Ok(v, cursor.advance(r.end() - pos))
        return Failure(pos)

    return regexp


def regexp(pat: str, group: Union[int, str]) -> ParseFn[str]:
    return _regexp(re.compile(pat), group)
