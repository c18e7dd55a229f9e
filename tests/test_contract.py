from typing import List

import pytest
from hypothesis import assume, example, given
from hypothesis import strategies as st

from morsec import Cursor, Failure, Ok, Parser, alt, fmap, many, maybe
from morsec.primitive import succeed
from morsec.scannerless import literal, regexp, take_while, take_while1
from morsec.sequence import digit, eof, letter, satisfy

PARSERS: List[Parser[object]] = [
    succeed(0),
    literal("a"),
    literal("ab"),
    take_while(str.isdigit),
    take_while1(str.isalpha, "word"),
    regexp(r"[a-c]+"),
    satisfy(str.isspace),
    eof(),
    letter + digit,
    letter | digit,
    (letter << digit).maybe(),
    (letter | digit).many(),
    take_while(str.isdigit).many(),
    literal("a").bind(lambda _: take_while(str.isalpha)),
]

parsers = st.sampled_from(PARSERS)


def cursors(
        text: st.SearchStrategy[str] = st.text()
) -> st.SearchStrategy[Cursor]:
    return text.flatmap(
        lambda t: st.integers(0, len(t)).map(lambda pos: Cursor(t, pos))
    )


def test_start() -> None:
    cursor = Cursor.start("abc")
    assert cursor.pos == 0
    assert cursor.remaining == "abc"
    assert not cursor.at_end()
    assert cursor.advance(3).at_end()
    assert cursor.advance(0) is cursor


def test_cursor_immutable() -> None:
    cursor = Cursor.start("abc")
    advanced = cursor.advance(2)
    assert cursor.pos == 0
    assert advanced.remaining == "c"
    with pytest.raises(AttributeError):
        cursor.pos = 1  # type: ignore


@given(parsers, cursors())
def test_position_invariant(parser: Parser[object], cursor: Cursor) -> None:
    r = parser.parse_fn(cursor)
    if type(r) is Ok:
        assert r.cursor.text is cursor.text
        assert r.cursor.pos >= cursor.pos
        assert r.cursor.pos + len(r.cursor.remaining) == len(cursor.text)
    else:
        assert type(r) is Failure
        assert cursor.pos <= r.pos <= len(cursor.text)


@given(st.text(), st.text(min_size=1), st.text())
@example("", "日本", "語")
def test_literal_match(prefix: str, lit: str, rest: str) -> None:
    text = prefix + lit + rest
    r = literal(lit).parse_fn(Cursor(text, len(prefix)))
    assert type(r) is Ok
    assert r.value == lit
    assert r.cursor.remaining == rest
    assert r.cursor.pos == len(prefix) + len(lit)


@given(cursors(), st.text(min_size=1))
def test_literal_mismatch(cursor: Cursor, lit: str) -> None:
    assume(not cursor.remaining.startswith(lit))
    r = literal(lit).parse_fn(cursor)
    assert type(r) is Failure
    assert r.pos == cursor.pos
    assert repr(lit) in r.message


@given(parsers, cursors())
def test_many_never_fails(parser: Parser[object], cursor: Cursor) -> None:
    p = many(parser)
    first = p.parse_fn(cursor)
    second = p.parse_fn(cursor)
    assert type(first) is Ok
    assert type(second) is Ok
    assert first.value == second.value
    assert first.cursor == second.cursor


@given(parsers, cursors())
def test_maybe_never_fails(parser: Parser[object], cursor: Cursor) -> None:
    r = maybe(parser).parse_fn(cursor)
    assert type(r) is Ok
    if type(parser.parse_fn(cursor)) is Failure:
        assert r.value is None
        assert r.cursor == cursor


@given(cursors(st.text(alphabet="abc \n")))
def test_take_while_nothing(cursor: Cursor) -> None:
    r = take_while(str.isdigit).parse_fn(cursor)
    assert type(r) is Ok
    assert r.value == ""
    assert r.cursor == cursor


def test_take_while_unicode() -> None:
    r = take_while(str.isalpha).parse_fn(Cursor.start("über straße"))
    assert type(r) is Ok
    assert r.value == "über"
    assert r.cursor.pos == 4
    assert r.cursor.remaining == " straße"


def test_alternative() -> None:
    parser = alt(literal("a"), literal("b"))
    r = parser.parse_fn(Cursor.start("b"))
    assert type(r) is Ok
    assert r.value == "b"
    r = parser.parse_fn(Cursor.start("c"))
    assert type(r) is Failure
    assert r.pos == 0
    assert "'a'" in r.message
    assert "'b'" in r.message


def test_alternative_backtracks() -> None:
    parser = alt(literal("a") + literal("b"), literal("a") + literal("c"))
    r = parser.parse_fn(Cursor.start("acd"))
    assert type(r) is Ok
    assert r.value == ("a", "c")
    assert r.cursor.pos == 2


def test_map() -> None:
    r = fmap(literal("hello"), str.upper).parse_fn(
        Cursor.start("hello, world")
    )
    assert type(r) is Ok
    assert r.value == "HELLO"
    assert r.cursor.remaining == ", world"
    assert r.cursor.pos == 5


def test_failure_propagation() -> None:
    parser = fmap(literal("a") + literal("b"), "".join)
    r = parser.parse_fn(Cursor.start("ac"))
    assert type(r) is Failure
    assert r.pos == 1
    assert r.message == "expected 'b'"


def test_many_zero_width() -> None:
    r = many(take_while(str.isdigit)).parse_fn(Cursor.start("12ab"))
    assert type(r) is Ok
    assert r.value == ["12"]
    assert r.cursor.pos == 2


@given(parsers, cursors())
def test_furthest_failure(parser: Parser[object], cursor: Cursor) -> None:
    r = (parser << eof()).parse_fn(cursor)
    if type(r) is Failure:
        furthest = r.furthest()
        assert r.pos <= furthest.pos <= len(cursor.text)


def test_many_keeps_deepest() -> None:
    r = many(letter + digit).parse_fn(Cursor.start("a1b!"))
    assert type(r) is Ok
    assert r.value == [("a", "1")]
    assert r.cursor.pos == 2
    assert r.deepest is not None
    assert r.deepest.pos == 3
    assert r.deepest.message == "expected digit"


def test_alternative_furthest() -> None:
    parser = alt(literal("a") + literal("b"), literal("a") + literal("c"))
    r = parser.parse_fn(Cursor.start("ad"))
    assert type(r) is Failure
    assert r.pos == 0
    assert r.furthest().pos == 1
    assert r.furthest().message == "expected 'b' or 'c'"
