"""
Parsers for scannerless parsing of strings.
"""

from typing import Callable, TypeVar, Union

from .core import scannerless
from .parser import FnParser, Parser
from .primitive import Pure, unexpected
from .types import ParseResult

__all__ = (
    "literal", "take_while", "take_while1", "regexp", "whitespace",
    "fmt_line_col", "parse"
)

A = TypeVar("A")


def literal(s: str) -> Parser[str]:
    """
    Parses the string ``s`` and returns it.

    >>> from morsec.scannerless import literal

    >>> parser = literal("ab")

    >>> parser.parse("ab").unwrap()
    'ab'
    >>> parser.parse("ac").unwrap()
    Traceback (most recent call last):
      ...
    morsec.types.ParseError: at 0: expected 'ab'

    :param s: String to parse
    :raise: :exc:`ValueError` if ``s`` is empty
    """

    return FnParser(scannerless.literal(s))


def take_while(test: Callable[[str], bool]) -> Parser[str]:
    """
    Parses the longest prefix of input whose characters all satisfy ``test``.
    Never fails, the prefix may be empty.

    >>> from morsec.scannerless import take_while

    >>> parser = take_while(str.isdigit)

    >>> parser.parse("12ab").unwrap()
    '12'
    >>> parser.parse("ab").unwrap()
    ''

    :param test: Predicate for characters
    """

    return FnParser(scannerless.take_while(test))


def take_while1(test: Callable[[str], bool], label: str) -> Parser[str]:
    """
    Like :func:`take_while`, but fails if no character satisfies ``test``.

    >>> from morsec.scannerless import take_while1

    >>> parser = take_while1(str.isdigit, "number")

    >>> parser.parse("12ab").unwrap()
    '12'
    >>> parser.parse("ab").unwrap()
    Traceback (most recent call last):
      ...
    morsec.types.ParseError: at 0: expected number

    :param test: Predicate for characters
    :param label: Description of the expected input
    """

    missing = unexpected(label)

    return take_while(test).bind(lambda s: Pure(s) if s else missing)


def regexp(pat: str, group: Union[int, str] = 0) -> Parser[str]:
    """
    Parses the prefix of input that matches ``pat`` and returns the value of
    ``group``.

    >>> from morsec.scannerless import regexp

    >>> parser = regexp("a(.)", 1)

    >>> parser.parse("ab").unwrap()
    'b'
    >>> parser.parse("bb").unwrap()
    Traceback (most recent call last):
      ...
    morsec.types.ParseError: at 0: unexpected input

    :param pat: Regular expression
    :param group: Group index or name
    """

    return FnParser(scannerless.regexp(pat, group))


whitespace: Parser[str] = take_while(str.isspace)


def fmt_line_col(text: str, pos: int) -> str:
    loc = scannerless.get_loc(text, pos)
    return "{}:{}".format(loc.line + 1, loc.col + 1)


def parse(parser: Parser[A], text: str) -> ParseResult[A]:
    """
    Wrapper around :meth:`morsec.Parser.parse` that reports errors with line
    and column numbers.

    >>> from morsec.scannerless import literal, parse

    >>> parser = literal("a\\n") + literal("b") + literal("c")

    >>> parser.parse("a\\nbb").unwrap()
    Traceback (most recent call last):
      ...
    morsec.types.ParseError: at 3: expected 'c'
    >>> parse(parser, "a\\nbb").unwrap()
    Traceback (most recent call last):
      ...
    morsec.types.ParseError: at 2:2: expected 'c'

    :param parser: Parser to run
    :param text: String to parse
    """

    return parser.parse(text, fmt_loc=fmt_line_col)
