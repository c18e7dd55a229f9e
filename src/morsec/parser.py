"""
Parser combinators.
"""

import logging
from typing import Callable, List, Optional, Tuple, TypeVar, Union

from .core import combinators
from .core.parser import ParseFn, ParseObj
from .core.result import Failure, Result
from .core.types import Cursor
from .types import FmtLoc, ParseResult

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")
C = TypeVar("C")

log = logging.getLogger(__name__)


def _fmt_loc(text: str, pos: int) -> str:
    return repr(pos)


class Parser(ParseObj[A_co]):
    def parse(
            self, text: str, *,
            fmt_loc: FmtLoc = _fmt_loc) -> ParseResult[A_co]:
        """
        Parses ``text`` from its beginning.

        :param text: Input to parse
        :param fmt_loc: Function that converts the input and a position in it
            to string
        """

        result = self.parse_fn(Cursor.start(text))
        if type(result) is Failure:
            furthest = result.furthest()
            log.debug(
                "parse failed at %d: %s", furthest.pos, furthest.message
            )
        return ParseResult(result, text, fmt_loc)

    def fmap(self, fn: Callable[[A_co], B]) -> "Parser[B]":
        """
        Transforms the result of the parser by applying ``fn`` to it.

        >>> from morsec.scannerless import literal

        >>> literal("hello").fmap(str.upper).parse("hello, world").unwrap()
        'HELLO'

        :param fn: Function to produce new value from the result of the parser
        """

        return fmap(self, fn)

    def bind(self, fn: Callable[[A_co], ParseObj[B]]) -> "Parser[B]":
        """
        Calls ``fn`` with the result of the parser and then applies the
        returned parser.

        >>> from morsec.scannerless import literal
        >>> from morsec.sequence import satisfy

        >>> parser = satisfy(lambda _: True).bind(lambda x: literal(x))

        >>> parser.parse("aa").unwrap()
        'a'
        >>> parser.parse("ab").unwrap()
        Traceback (most recent call last):
        ...
        morsec.types.ParseError: at 1: expected 'a'

        :param fn: Function that returns a new parser using the result of this
            parser
        """

        return bind(self, fn)

    def seql(self, other: ParseObj[B]) -> "Parser[A_co]":
        """
        Alias for :meth:`Parser.__lshift__`

        :param other: Second parser
        """

        return seql(self, other)

    def seqr(self, other: ParseObj[B]) -> "Parser[B]":
        """
        Alias for :meth:`Parser.__rshift__`

        :param other: Second parser
        """

        return seqr(self, other)

    def __lshift__(self, other: ParseObj[B]) -> "Parser[A_co]":
        """
        Applies two parsers sequentially and returns the result of the first
        parser.

        >>> from morsec.scannerless import literal

        >>> (literal("a") << literal("b")).parse("ab").unwrap()
        'a'

        :param other: Second parser
        """

        return seql(self, other)

    def __rshift__(self, other: ParseObj[B]) -> "Parser[B]":
        """
        Applies two parsers sequentially and returns the result of the second
        parser.

        >>> from morsec.scannerless import literal

        >>> (literal("a") >> literal("b")).parse("ab").unwrap()
        'b'

        :param other: Second parser
        """

        return seqr(self, other)

    def __add__(self, other: ParseObj[B]) -> "Parser[Tuple[A_co, B]]":
        """
        Applies two parsers sequentially and returns a tuple of their results.

        >>> from morsec.scannerless import literal

        >>> parser = literal("a") + literal("b")

        >>> parser.parse("ab").unwrap()
        ('a', 'b')
        >>> parser.parse("ac").unwrap()
        Traceback (most recent call last):
          ...
        morsec.types.ParseError: at 1: expected 'b'

        :param other: Second parser
        """

        return seq(self, other)

    def __or__(self, other: ParseObj[B]) -> "Parser[Union[A_co, B]]":
        """
        Applies the first parser and returns its' result if it succeeds.
        Otherwise applies the second parser to the same input.

        >>> from morsec.scannerless import literal

        >>> parser = (literal("a") + literal("b")) | literal("a")

        >>> parser.parse("ab").unwrap()
        ('a', 'b')
        >>> parser.parse("ac").unwrap()
        'a'
        >>> (literal("a") | literal("b")).parse("c").unwrap()
        Traceback (most recent call last):
        ...
        morsec.types.ParseError: at 0: expected 'a' or 'b'

        :param other: Second parser
        """

        return alt(self, other)

    def maybe(self) -> "Parser[Optional[A_co]]":
        """
        Applies the parser and returns ``None`` without consuming input if it
        failed. Otherwise returns the result of the parser.

        A parser that succeeds with ``None`` looks the same as an absent one.
        Use :meth:`fmap` to wrap its value if the difference matters.

        >>> from morsec.scannerless import literal

        >>> parser = (literal("a") << literal("b")).maybe()

        >>> parser.parse("ab").unwrap()
        'a'
        >>> parser.parse("aa").unwrap()
        """

        return maybe(self)

    def many(self) -> "Parser[List[A_co]]":
        """
        Applies the parser repeatedly until it fails or stops consuming input.
        Returns a list of the parsed values.

        >>> from morsec.scannerless import literal

        >>> parser = (literal("a") << literal("b")).many()

        >>> parser.parse("abab").unwrap()
        ['a', 'a']
        >>> parser.parse("abaa").unwrap()
        ['a']
        """

        return many(self)

    def many1(self) -> "Parser[List[A_co]]":
        """
        Like :meth:`Parser.many`, but fails unless the parser succeeds at
        least once.

        >>> from morsec.sequence import digit

        >>> digit.many1().parse("12a").unwrap()
        ['1', '2']
        >>> digit.many1().parse("a").unwrap()
        Traceback (most recent call last):
          ...
        morsec.types.ParseError: at 0: expected digit
        """

        return many1(self)

    def label(self, expected: str) -> "Parser[A_co]":
        """
        Applies the parser, and replaces list of expected values with
        ``[expected]`` if it failed where it started.

        >>> from morsec.scannerless import literal

        >>> parser = (literal("a") + literal("b")).label("x")

        >>> parser.parse("bb").unwrap()
        Traceback (most recent call last):
          ...
        morsec.types.ParseError: at 0: expected x
        >>> parser.parse("aa").unwrap()
        Traceback (most recent call last):
          ...
        morsec.types.ParseError: at 1: expected 'b'

        :param expected: Description of the expected input
        """

        return label(self, expected)

    def sep_by(self, sep: ParseObj[B]) -> "Parser[List[A_co]]":
        """
        Applies the parser multiple times, with ``sep`` in between. Returns a
        list of the values parsed by the parser.

        >>> from morsec.scannerless import literal

        >>> literal("a").sep_by(literal(",")).parse("a,a,a").unwrap()
        ['a', 'a', 'a']

        :param sep: Separators parser
        """

        return sep_by(self, sep)

    def between(
            self, open: ParseObj[B], close: ParseObj[C]) -> "Parser[A_co]":
        """
        Applies ``open``, then the parser, then ``close``, and returns the
        value parsed by the parser.

        >>> from morsec.scannerless import literal

        >>> parser = literal("a").between(literal("("), literal(")"))

        >>> parser.parse("(a)").unwrap()
        'a'

        :param open: 'Opening bracket' parser
        :param close: 'Closing bracket' parser
        """

        return between(open, close, self)


class FnParser(Parser[A_co]):
    def __init__(self, fn: ParseFn[A_co]):
        self._fn = fn

    def to_fn(self) -> ParseFn[A_co]:
        return self._fn

    def parse_fn(self, cursor: Cursor) -> Result[A_co]:
        return self._fn(cursor)


class Delay(Parser[A_co]):
    """
    A subclass of :class:`Parser` to use as a forward declaration.

    >>> from morsec import Delay
    >>> from morsec.scannerless import literal

    >>> parser = Delay()
    >>> parser.define((literal("a") + parser).maybe())

    >>> parser.parse("aaa").unwrap()
    ('a', ('a', ('a', None)))
    """

    def __init__(self) -> None:
        def _fn(cursor: Cursor) -> Result[A_co]:
            raise RuntimeError("Delayed parser was not defined")

        self._defined = False
        self._fn: ParseFn[A_co] = _fn

    def define(self, parser: ParseObj[A_co]) -> None:
        """
        Define the parser.

        >>> from morsec import Delay
        >>> from morsec.scannerless import literal

        >>> parser = Delay()
        >>> parser.parse("a")
        Traceback (most recent call last):
          ...
        RuntimeError: Delayed parser was not defined

        >>> parser.define(literal("a"))
        >>> parser.parse("a").unwrap()
        'a'

        :param parser: Parser definition
        """

        if self._defined:
            raise RuntimeError("Delayed parser was already defined")
        self._defined = True
        self._fn = parser.to_fn()

    def parse_fn(self, cursor: Cursor) -> Result[A_co]:
        return self._fn(cursor)

    def to_fn(self) -> ParseFn[A_co]:
        if self._defined:
            return self._fn
        return super().to_fn()


def fmap(parser: ParseObj[A], fn: Callable[[A], B]) -> Parser[B]:
    """
    :meth:`Parser.fmap` as a function.

    :param parser: Parser
    :param fn: Function to produce value from the result of ``parser``
    """

    return FnParser(combinators.fmap(parser.to_fn(), fn))


def bind(parser: ParseObj[A], fn: Callable[[A], ParseObj[B]]) -> Parser[B]:
    """
    :meth:`Parser.bind` as a function.

    :param parser: Parser
    :param fn: Function that returns a new parser using the result of the
        parser
    """

    return FnParser(combinators.bind(parser.to_fn(), fn))


def seq(parser: ParseObj[A], second: ParseObj[B]) -> Parser[Tuple[A, B]]:
    """
    :meth:`Parser.__add__` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.seq(parser.to_fn(), second.to_fn()))


def seql(parser: ParseObj[A], second: ParseObj[B]) -> Parser[A]:
    """
    :meth:`Parser.seql` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.seql(parser.to_fn(), second.to_fn()))


def seqr(parser: ParseObj[A], second: ParseObj[B]) -> Parser[B]:
    """
    :meth:`Parser.seqr` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.seqr(parser.to_fn(), second.to_fn()))


def alt(parser: ParseObj[A], second: ParseObj[B]) -> Parser[Union[A, B]]:
    """
    :meth:`Parser.__or__` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.alt(parser.to_fn(), second.to_fn()))


def maybe(parser: ParseObj[A]) -> Parser[Optional[A]]:
    """
    :meth:`Parser.maybe` as a function.

    :param parser: Parser
    """

    return FnParser(combinators.maybe(parser.to_fn()))


def many(parser: ParseObj[A]) -> Parser[List[A]]:
    """
    :meth:`Parser.many` as a function.

    :param parser: Parser
    """

    return FnParser(combinators.many(parser.to_fn()))


def many1(parser: ParseObj[A]) -> Parser[List[A]]:
    """
    :meth:`Parser.many1` as a function.

    :param parser: Parser
    """

    return FnParser(combinators.many1(parser.to_fn()))


def label(parser: ParseObj[A], expected: str) -> Parser[A]:
    """
    :meth:`Parser.label` as a function.

    :param parser: Parser
    :param expected: Description of the expected input
    """

    return FnParser(combinators.label(parser.to_fn(), expected))


def sep_by(parser: ParseObj[A], sep: ParseObj[B]) -> Parser[List[A]]:
    """
    :meth:`Parser.sep_by` as a function.

    :param parser: Items parser
    :param sep: Separators parser
    """

    return maybe(seq(parser, many(seqr(sep, parser)))).fmap(
        lambda v: [] if v is None else [v[0]] + v[1]
    )


def between(
        open: ParseObj[B], close: ParseObj[C],
        parser: ParseObj[A]) -> Parser[A]:
    """
    :meth:`Parser.between` as a function.

    :param open: 'Opening bracket' parser
    :param close: 'Closing bracket' parser
    :param parser: Value parser
    """

    return seqr(open, seql(parser, close))
