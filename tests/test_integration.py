"""End-to-end tests: decode, encode, decode again."""

import logging
from dataclasses import dataclass, field

import pytest

import result_line
from result_line import (
    Boolean,
    Float,
    Integer,
    Text,
    flatten,
    from_string,
    parse_pairs,
    to_string,
)


@dataclass
class Measurement:
    algo: str
    n: int
    time: float
    params: dict = flatten(default_factory=dict)
    ok: bool = True


def _native(value):
    return value.value


def test_public_api():
    for name in result_line.__all__:
        assert hasattr(result_line, name), name


def test_decode_then_encode():
    line = 'RESULT a="hello world" b=-123423904 "a key"=8123 nowhitespace=8123.23 d=true'
    pairs = from_string(line, list)
    assert to_string({k: _native(v) for k, v in pairs}) == line


@pytest.mark.parametrize(
    "line",
    [
        "RESULT",
        "RESULT a=1 b=2.5 c=true d=false",
        'RESULT algo="quick sort" "input size"=1000000 time=0.0153 host="node 17" ok=true',
        'RESULT x=-3 y=+4 z=1e-07 w="two words"',
        'RESULT name="merge sort" n=0',
    ],
)
def test_round_trip(line):
    first = parse_pairs(line)
    again = parse_pairs(to_string(dict(first)))
    assert again == first


def test_round_trip_record():
    m = Measurement("merge sort", 4096, 0.25, {"threads": 8, "cache": "cold start"})
    line = to_string(m)
    assert line == 'RESULT algo="merge sort" n=4096 time=0.25 threads=8 cache="cold start" ok=true'
    assert from_string(line) == {
        "algo": Text("merge sort"),
        "n": Integer(4096),
        "time": Float(0.25),
        "threads": Integer(8),
        "cache": Text("cold start"),
        "ok": Boolean(True),
    }


def test_integer_last_comes_back_as_float():
    line = to_string({"a": 1, "b": 2})
    assert line == "RESULT a=1 b=2"
    assert from_string(line) == {"a": Integer(1), "b": Float(2.0)}


def test_discarded_remainder_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="result_line.reader"):
        assert parse_pairs('RESULT a=1 "oops') == [("a", Integer(1))]
    assert "oops" in caplog.text


def test_elided_pair_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="result_line.writer"):
        assert to_string({"gone": None, "kept": 1}) == "RESULT kept=1"
    assert "gone" in caplog.text


def test_bare_text_swallows_following_pair():
    line = to_string({"algo": "quicksort", "n": 1, "ok": True})
    assert line == "RESULT algo=quicksort n=1 ok=true"
    assert parse_pairs(line) == [("algo", Text("quicksort n"))]
