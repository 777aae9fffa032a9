from __future__ import annotations

import pytest

from reqparser.decoder import decode
from reqparser.errors import DecodeError


def test_decode_returns_floats_for_integral_numbers() -> None:
    value = decode(b'{"name":"test","value":123}')

    assert value == {"name": "test", "value": 123.0}
    assert isinstance(value["value"], float)


def test_decode_preserves_object_key_order() -> None:
    value = decode(b'{"zeta":1,"alpha":2,"mid":3}')

    assert list(value) == ["zeta", "alpha", "mid"]


def test_decode_handles_all_value_kinds() -> None:
    value = decode(b'{"s":"x","n":1.5,"b":false,"z":null,"a":[1,"two"],"o":{"k":true}}')

    assert value == {
        "s": "x",
        "n": 1.5,
        "b": False,
        "z": None,
        "a": [1.0, "two"],
        "o": {"k": True},
    }


def test_decode_accepts_scalar_top_level_values() -> None:
    assert decode(b"[1,2,3]") == [1.0, 2.0, 3.0]
    assert decode(b'"text"') == "text"
    assert decode(b"null") is None


def test_decode_rejects_empty_payload() -> None:
    with pytest.raises(DecodeError):
        decode(b"")


@pytest.mark.parametrize(
    "payload",
    [b"{", b'{"a":}', b"{'a': 1}", b"[1,2,]", b"NaN", b'{"a": Infinity}', b"\xff\xfe"],
)
def test_decode_rejects_malformed_payloads(payload: bytes) -> None:
    with pytest.raises(DecodeError):
        decode(payload)


def test_decode_reports_error_position() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode(b'{"a": 1,, "b": 2}')

    assert excinfo.value.position == 8


def test_decode_enforces_depth_limit() -> None:
    nested = b"[" * 6 + b"]" * 6

    assert decode(nested, max_depth=6) == [[[[[[]]]]]]
    with pytest.raises(DecodeError, match="exceeds limit 5"):
        decode(nested, max_depth=5)


def test_decode_rejects_pathologically_deep_payloads() -> None:
    with pytest.raises(DecodeError):
        decode(b"[" * 200_000 + b"]" * 200_000)


@pytest.mark.parametrize("payload", [b'{"a":1e400}', b'{"a":-1e400}', b"9" * 400, b"[" + b"1" * 400 + b"]"])
def test_decode_rejects_numbers_outside_float_range(payload: bytes) -> None:
    with pytest.raises(DecodeError, match="out of range"):
        decode(payload)


def test_decode_keeps_large_finite_numbers() -> None:
    assert decode(b"[1e308, 123456789012345678901234567890]") == [1e308, float("123456789012345678901234567890")]


def test_decode_replaces_unpaired_surrogates() -> None:
    value = decode(b'{"\\udc00key":["\\ud800", "ok \\ud83d\\ude00"]}')

    assert value == {"\ufffdkey": ["\ufffd", "ok \U0001f600"]}
