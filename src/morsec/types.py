"""
Results of running a parser.
"""

from dataclasses import dataclass
from typing import Callable, Generic, List, TypeVar

from .core.result import Failure, Ok, Result, describe, unique

A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")

FmtLoc = Callable[[str, int], str]


@dataclass
class ErrorItem:
    """
    Description of a parse error.

    :param pos: Number of characters consumed before the error
    :param loc_str: String representation of the location
    :param expected: List of expected input descriptions
    """

    pos: int
    loc_str: str
    expected: List[str]

    @property
    def msg(self) -> str:
        """
        Human-readable description of the error.
        """

        return "at {}: {}".format(self.loc_str, describe(self.expected))


class ParseError(Exception):
    """
    Exception that is raised if a parser was unable to parse the input.

    :param error: Description of the error
    """

    def __init__(self, error: ErrorItem):
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return self.error.msg


class ParseResult(Generic[A_co]):
    """
    Result of the parsing.
    """

    def __init__(self, result: Result[A_co], text: str, fmt_loc: FmtLoc):
        self._result = result
        self._text = text
        self._fmt_loc = fmt_loc

    @property
    def result(self) -> Result[A_co]:
        """
        The underlying :class:`Ok` or :class:`Failure`.
        """

        return self._result

    def fmap(self, fn: Callable[[A_co], B]) -> "ParseResult[B]":
        """
        Transforms :class:`ParseResult`\\[``A_co``] into
        :class:`ParseResult`\\[``B``] by applying `fn` to value.

        :param fn: Function to apply to value
        """

        return ParseResult(self._result.fmap(fn), self._text, self._fmt_loc)

    def unwrap(self) -> A_co:
        """
        Returns parsed value if there is one. Otherwise throws
        :exc:`ParseError`.

        :raise: :exc:`ParseError`
        """

        if type(self._result) is Ok:
            return self._result.value
        raise ParseError(self.error())

    def error(self) -> ErrorItem:
        """
        Describes the failure. If a failure that got further into the input
        was absorbed along the way, for instance by :meth:`Parser.many`, that
        one is described instead.

        :raise: :exc:`ValueError` if parsing succeeded
        """

        if type(self._result) is not Failure:
            raise ValueError("Parsing succeeded")
        failure = self._result.furthest()
        pos = failure.pos
        return ErrorItem(
            pos, self._fmt_loc(self._text, pos), unique(failure.expected)
        )
