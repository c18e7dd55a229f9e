"""
Parser for a small TOML-like configuration format::

    # comment
    name = "demo"

    [server]
    port = 8080
    debug = false
    root = /srv/www

Values are quoted strings, integers, booleans, or bare text up to the end of
the line.
"""

import logging
import re
from typing import Dict, List, Match, NamedTuple, Tuple

from .parser import Parser
from .scannerless import literal, parse, regexp, take_while, take_while1
from .sequence import eof

__all__ = (
    "Section", "section_header", "key_value", "section", "document", "loads"
)

log = logging.getLogger(__name__)

Property = Tuple[str, object]


class Section(NamedTuple):
    title: str
    properties: List[Property]


escape = re.compile(r"\\(.)")

simple = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}


def unescape(s: str) -> str:
    def sub(m: Match[str]) -> str:
        c = m.group(1)
        return simple.get(c, c)

    return escape.sub(sub, s)


def _is_key_char(c: str) -> bool:
    return c.isalnum() or c in "_-."


spaces = take_while(lambda c: c == " " or c == "\t")
comment = literal("#") >> take_while(lambda c: c != "\n")
newline = literal("\n") | literal("\r\n")
line_end = spaces >> comment.maybe() >> (newline | eof())
blank_lines = line_end.many()

key = take_while1(_is_key_char, "key")

string: Parser[object] = regexp(r'"((?:[^"\\\n]|\\.)*)"', 1).fmap(unescape)
integer: Parser[object] = regexp(r"[-+]?[0-9]+").fmap(int)
boolean: Parser[object] = (literal("true") | literal("false")).fmap(
    lambda s: s == "true"
)
bare: Parser[object] = take_while1(
    lambda c: c not in "\r\n#", "value"
).fmap(str.rstrip)

value: Parser[object] = (
    (string << line_end) | (integer << line_end) | (boolean << line_end)
    | (bare << line_end)
).label("value")

section_header = (
    spaces >> literal("[") >> spaces >> key << spaces << literal("]")
    << line_end << blank_lines
)
key_value = (
    (spaces >> key << spaces << literal("=") << spaces) + value << blank_lines
)
section = (section_header + key_value.many()).fmap(lambda v: Section(*v))


def _build(
        v: Tuple[List[Property], List[Section]]) -> Dict[str, object]:
    root, sections = v
    res: Dict[str, object] = dict(root)
    for title, properties in sections:
        table = res.get(title)
        # a section replaces a top-level value with the same name
        if not isinstance(table, dict):
            table = res[title] = {}
        table.update(properties)
    return res


document = (
    blank_lines >> (key_value.many() + section.many()) << eof()
).fmap(_build)


def loads(source: str) -> Dict[str, object]:
    """
    Parses ``source`` into a dictionary. Properties that precede the first
    section header are stored at the top level, each section becomes a nested
    dictionary. Repeated sections are merged, later keys win.

    >>> from morsec import tomlish

    >>> tomlish.loads("a = 1\\n[s]\\nk = v\\n")
    {'a': 1, 's': {'k': 'v'}}

    :param source: Text to parse
    :raise: :exc:`morsec.ParseError`
    """

    res = parse(document, source).unwrap()
    log.debug("parsed %d top-level keys", len(res))
    return res
