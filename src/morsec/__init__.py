"""
Public API.
"""

from . import primitive, scannerless, sequence, tomlish
from .core.parser import ParseFn, ParseObj
from .core.result import Failure, Ok, Result
from .core.scannerless import Loc
from .core.types import Cursor
from .parser import (
    Delay, FnParser, Parser, alt, between, bind, fmap, label, many, many1,
    maybe, sep_by, seq, seql, seqr
)
from .types import ErrorItem, ParseError, ParseResult

__all__ = (
    "primitive", "scannerless", "sequence", "tomlish",
    "ParseFn", "ParseObj",
    "Failure", "Ok", "Result",
    "Loc",
    "Cursor",
    "ErrorItem", "ParseError", "ParseResult",

    "Delay", "FnParser", "Parser", "alt", "between", "bind", "fmap", "label",
    "many", "many1", "maybe", "sep_by", "seq", "seql", "seqr"
)

__version__ = "0.1.0"
