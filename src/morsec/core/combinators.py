from typing import Callable, List, Optional, Tuple, TypeVar, Union

from .parser import ParseFn, ParseObj
from .result import Failure, Ok, Result, deeper
from .types import Cursor

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

MergeFn = Callable[[A, B], C]


def fmap(parse_fn: ParseFn[A], fn: Callable[[A], B]) -> ParseFn[B]:
    def fmap(cursor: Cursor) -> Result[B]:
        return parse_fn(cursor).fmap(fn)

    return fmap


def bind(parse_fn: ParseFn[A], fn: Callable[[A], ParseObj[B]]) -> ParseFn[B]:
    def bind(cursor: Cursor) -> Result[B]:
        ra = parse_fn(cursor)
        if type(ra) is Failure:
            return ra
        return fn(ra.value).parse_fn(ra.cursor).prepend_deepest(ra.deepest)

    return bind


def _seq(
        parse_fn: ParseFn[A], second_fn: ParseFn[B],
        merge: MergeFn[A, B, C]) -> ParseFn[C]:
    def seq(cursor: Cursor) -> Result[C]:
        ra = parse_fn(cursor)
        if type(ra) is Failure:
            return ra
        va = ra.value
        return second_fn(ra.cursor).fmap(
            lambda vb: merge(va, vb)
        ).prepend_deepest(ra.deepest)

    return seq


def seql(parse_fn: ParseFn[A], second_fn: ParseFn[B]) -> ParseFn[A]:
    return _seq(parse_fn, second_fn, lambda l, _: l)


def seqr(parse_fn: ParseFn[A], second_fn: ParseFn[B]) -> ParseFn[B]:
    return _seq(parse_fn, second_fn, lambda _, r: r)


def seq(parse_fn: ParseFn[A], second_fn: ParseFn[B]) -> ParseFn[Tuple[A, B]]:
    return _seq(parse_fn, second_fn, lambda l, r: (l, r))


def alt(
        parse_fn: ParseFn[A],
        second_fn: ParseFn[B]) -> ParseFn[Union[A, B]]:
    def alt(cursor: Cursor) -> Result[Union[A, B]]:
        ra = parse_fn(cursor)
        if type(ra) is Ok:
            return ra
        rb = second_fn(cursor)
        if type(rb) is Ok:
            return rb.prepend_deepest(ra.furthest())
        return ra.merge(rb, cursor.pos)

    return alt


def maybe(parse_fn: ParseFn[A]) -> ParseFn[Optional[A]]:
    def maybe(cursor: Cursor) -> Result[Optional[A]]:
        r = parse_fn(cursor)
        if type(r) is Ok:
            return r
        return Ok(None, cursor, r.furthest())

    return maybe


def many(parse_fn: ParseFn[A]) -> ParseFn[List[A]]:
    def many(cursor: Cursor) -> Result[List[A]]:
        value: List[A] = []
        deepest: Optional[Failure] = None
        r = parse_fn(cursor)
        while type(r) is Ok:
            deepest = deeper(deepest, r.deepest)
            # a step that consumed nothing would repeat forever
            if r.cursor.pos == cursor.pos:
                break
            value.append(r.value)
            cursor = r.cursor
            r = parse_fn(cursor)
        else:
            deepest = deeper(deepest, r.furthest())
        return Ok(value, cursor, deepest)

    return many


def many1(parse_fn: ParseFn[A]) -> ParseFn[List[A]]:
    return _seq(parse_fn, many(parse_fn), lambda x, xs: [x, *xs])


def label(parse_fn: ParseFn[A], expected: str) -> ParseFn[A]:
    expected_ = (expected,)

    def label(cursor: Cursor) -> Result[A]:
        r = parse_fn(cursor)
        if type(r) is Failure and r.pos == cursor.pos:
            return r.set_expected(expected_)
        return r

    return label
