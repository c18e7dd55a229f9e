from typing import (
    Callable, Generic, Iterable, List, Optional, Tuple, TypeVar, Union
)

from typing_extensions import final

from .types import Cursor

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")


def unique(expected: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(expected))


def describe(expected: Iterable[str]) -> str:
    items = unique(expected)
    if not items:
        return "unexpected input"
    if len(items) == 1:
        return "expected {}".format(items[0])
    return "expected {} or {}".format(', '.join(items[:-1]), items[-1])


@final
class Ok(Generic[A_co]):
    __slots__ = "value", "cursor", "deepest"

    def __init__(
            self, value: A_co, cursor: Cursor,
            deepest: "Optional[Failure]" = None):
        self.value = value
        self.cursor = cursor
        # furthest failure absorbed on the way to this success
        self.deepest = deepest

    def __repr__(self) -> str:
        return "Ok(value={!r}, cursor={!r})".format(self.value, self.cursor)

    def fmap(self, fn: Callable[[A_co], B]) -> "Ok[B]":
        return Ok(fn(self.value), self.cursor, self.deepest)

    def prepend_deepest(self, deepest: "Optional[Failure]") -> "Ok[A_co]":
        if deepest is None:
            return self
        return Ok(self.value, self.cursor, deeper(deepest, self.deepest))


@final
class Failure:
    __slots__ = "pos", "expected", "deepest"

    def __init__(
            self, pos: int, expected: Tuple[str, ...] = (),
            deepest: "Optional[Failure]" = None):
        self.pos = pos
        self.expected = expected
        self.deepest = deepest

    def __repr__(self) -> str:
        return "Failure(pos={!r}, expected={!r})".format(
            self.pos, self.expected
        )

    @property
    def message(self) -> str:
        return describe(self.expected)

    def fmap(self, fn: object) -> "Failure":
        return self

    def set_expected(self, expected: Tuple[str, ...]) -> "Failure":
        return Failure(self.pos, expected, self.deepest)

    def merge(self, other: "Failure", pos: int) -> "Failure":
        return Failure(
            pos, self.expected + other.expected,
            deeper(self.furthest(), other.furthest())
        )

    def prepend_deepest(self, deepest: "Optional[Failure]") -> "Failure":
        if deepest is None:
            return self
        return Failure(self.pos, self.expected, deeper(deepest, self.deepest))

    def furthest(self) -> "Failure":
        """
        The failure that got furthest into the input: either this one or a
        deeper one that was absorbed by ``maybe``, ``many`` or ``alt`` earlier
        in the same run.
        """

        if self.deepest is not None and self.deepest.pos > self.pos:
            return self.deepest
        return self


def deeper(a: Optional[Failure], b: Optional[Failure]) -> Optional[Failure]:
    if a is None:
        return b
    if b is None or a.pos > b.pos:
        return a
    if b.pos > a.pos:
        return b
    return Failure(a.pos, a.expected + b.expected)


Result = Union[Ok[A], Failure]
