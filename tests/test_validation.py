import pytest

from morsec import Delay
from morsec.primitive import succeed
from morsec.scannerless import literal


def test_literal_empty() -> None:
    with pytest.raises(ValueError):
        literal("")


def test_delay_undefined() -> None:
    parser = Delay[str]()
    with pytest.raises(RuntimeError):
        parser.parse("a")


def test_delay_redefined() -> None:
    parser = Delay[str]()
    parser.define(literal("a"))
    with pytest.raises(RuntimeError):
        parser.define(literal("b"))


def test_many_unconsumed() -> None:
    assert succeed(1).many().parse("").unwrap() == []
    assert succeed(1).many().parse("abc").unwrap() == []


def test_error_of_success() -> None:
    with pytest.raises(ValueError):
        literal("a").parse("a").error()


def test_maybe_none_value() -> None:
    assert succeed(None).maybe().parse("").unwrap() is None
    wrapped = succeed(None).fmap(lambda v: (v,)).maybe()
    assert wrapped.parse("").unwrap() == (None,)
