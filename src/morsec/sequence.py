"""
Single-character parsers.
"""

from typing import Callable

from .core import sequence
from .parser import FnParser, Parser

__all__ = ("eof", "satisfy", "letter", "digit")


def eof() -> Parser[None]:
    """
    Succeeds at the end of the input.

    >>> from morsec.sequence import eof

    >>> eof().parse("").unwrap()
    >>> eof().parse("a").unwrap()
    Traceback (most recent call last):
      ...
    morsec.types.ParseError: at 0: expected end of file
    """

    return FnParser(sequence.eof())


def satisfy(test: Callable[[str], bool]) -> Parser[str]:
    """
    Succeeds for a character for which ``test`` returns ``True`` and returns
    that character.

    >>> from morsec.sequence import satisfy

    >>> parser = satisfy(lambda c: c.isalpha())

    >>> parser.parse("a").unwrap()
    'a'
    >>> parser.parse("0").unwrap()
    Traceback (most recent call last):
      ...
    morsec.types.ParseError: at 0: unexpected input

    :param test: Predicate for characters
    """

    return FnParser(sequence.satisfy(test))


letter: Parser[str] = satisfy(str.isalpha).label("letter")
digit: Parser[str] = satisfy(str.isdigit).label("digit")
