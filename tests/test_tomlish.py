from typing import List, Tuple

import pytest

from morsec import ParseError, many, seq
from morsec.tomlish import Section, key_value, loads, section, section_header

DATA_POSITIVE: List[Tuple[str, object]] = [
    ("", {}),
    ("\n\n", {}),
    ("key = value", {"key": "value"}),
    ('name = "demo"\n', {"name": "demo"}),
    ("[s]\nk = v\n", {"s": {"k": "v"}}),
    ("[ s ]\nk=v\n", {"s": {"k": "v"}}),
    ("a = 12abc\n", {"a": "12abc"}),
    ("a = true1\n", {"a": "true1"}),
    ("a = -7\nb = +7\n", {"a": -7, "b": 7}),
    ("[s]\r\nk = 1\r\n", {"s": {"k": 1}}),
    ("s = 1\n[s]\nk = 2\n", {"s": {"k": 2}}),
    ("[s]\na = 1\n[t]\n[s]\nb = 2\n", {"s": {"a": 1, "b": 2}, "t": {}}),
    ("k = ключ\n", {"k": "ключ"}),
    ("k = v\n# end", {"k": "v"}),
    ("k = v\n   ", {"k": "v"}),
    ("k = v # c", {"k": "v"}),
    ("[s]\n  k = v\n", {"s": {"k": "v"}}),
    ("  [s]\n\tk = 1\n", {"s": {"k": 1}}),
    (
        r"""
# comment
name = "demo"

[server]
port = 8080
debug = false
root = /srv/www  # trailing

[client]
retries = -3
motd = "hello\n\"world\""
""",
        {
            "name": "demo",
            "server": {"port": 8080, "debug": False, "root": "/srv/www"},
            "client": {"retries": -3, "motd": 'hello\n"world"'},
        }
    ),
]


@pytest.mark.parametrize("data, expected", DATA_POSITIVE)
def test_positive(data: str, expected: object) -> None:
    assert loads(data) == expected


DATA_NEGATIVE = [
    ("[s\n", "at 1:3: expected ']'"),
    ("a = 1\n[s\n", "at 2:3: expected ']'"),
    ("k = v\n=\n", "at 2:1: expected end of file"),
    ("[s]\nk =\n", "at 2:4: expected value"),
    ("[s]\n  k =  # c\n", "at 2:8: expected value"),
]


@pytest.mark.parametrize("data, expected", DATA_NEGATIVE)
def test_negative(data: str, expected: str) -> None:
    with pytest.raises(ParseError) as err:
        loads(data)
    assert str(err.value) == expected


def test_sections_grammar() -> None:
    grammar = many(seq(section_header, many(key_value)))
    assert grammar.parse("[s]\nk = v\n").unwrap() == [("s", [("k", "v")])]


def test_section() -> None:
    assert section.parse("[s]\n# c\nk = 1\n\nj = x\n").unwrap() == Section(
        "s", [("k", 1), ("j", "x")]
    )


def test_value_label() -> None:
    with pytest.raises(ParseError) as err:
        key_value.parse("k = ").unwrap()
    assert str(err.value) == "at 4: expected value"
