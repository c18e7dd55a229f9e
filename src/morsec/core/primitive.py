from typing import Callable, TypeVar

from .parser import ParseFn, ParseObj
from .result import Failure, Ok, Result
from .types import Cursor

A_co = TypeVar("A_co", covariant=True)


class Pure(ParseObj[A_co]):
    def __init__(self, x: A_co):
        self._x = x

    def parse_fn(self, cursor: Cursor) -> Result[A_co]:
        return Ok(self._x, cursor)


class PureFn(ParseObj[A_co]):
    def __init__(self, fn: Callable[[], A_co]):
        self._fn = fn

    def parse_fn(self, cursor: Cursor) -> Result[A_co]:
        return Ok(self._fn(), cursor)


def unexpected(expected: str) -> ParseFn[None]:
    expected_ = (expected,)

    def unexpected(cursor: Cursor) -> Result[None]:
        return Failure(cursor.pos, expected_)

    return unexpected
