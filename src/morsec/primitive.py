"""
Primitive input-agnostic parsers.
"""

from typing import TypeVar

from .core import primitive
from .parser import FnParser, Parser

__all__ = ("Pure", "PureFn", "succeed", "unexpected")

A_co = TypeVar("A_co", covariant=True)


class Pure(primitive.Pure[A_co], Parser[A_co]):
    """
    Parser that always succeeds, consumes no input, and returns constant value.

    >>> from morsec.primitive import Pure

    >>> Pure(0).parse("").unwrap()
    0

    :param x: Value to return
    """


succeed = Pure


class PureFn(primitive.PureFn[A_co], Parser[A_co]):
    """
    Parser that always succeeds, consumes no input, and returns the result of
    function.

    >>> from morsec.primitive import PureFn

    >>> PureFn(lambda: list()).parse("").unwrap()
    []

    :param fn: Function that produces a value to return
    """


def unexpected(expected: str) -> Parser[None]:
    """
    Parser that always fails and consumes no input.

    >>> from morsec.primitive import unexpected

    >>> unexpected("a").parse("").unwrap()
    Traceback (most recent call last):
      ...
    morsec.types.ParseError: at 0: expected a

    :param expected: Error label
    """

    return FnParser(primitive.unexpected(expected))
