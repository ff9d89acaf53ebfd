from __future__ import annotations

import pytest

pytest.importorskip("pydantic")

from pydantic import ValidationError

from hstoken.core import codec
from hstoken.core.errors import DecodeError, DeserializationError, SerializationError
from hstoken.schemas.token import HS256_HEADER, TokenHeader


def test_header_serializes_in_wire_order() -> None:
    assert codec.serialize_header(HS256_HEADER) == b'{"typ":"JWT","alg":"HS256"}'
    assert codec.encode_segment(codec.serialize_header(HS256_HEADER)) == "eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzI1NiJ9"


def test_header_is_immutable() -> None:
    with pytest.raises(ValidationError):
        HS256_HEADER.alg = "none"  # type: ignore[misc]


def test_encode_segment_is_padded_and_url_safe() -> None:
    assert codec.encode_segment(b"\xfb\xff") == "-_8="
    assert codec.encode_segment(b"a") == "YQ=="


def test_decode_segment_inverts_encode() -> None:
    assert codec.decode_segment("-_8=") == b"\xfb\xff"
    assert codec.decode_segment("") == b""


@pytest.mark.parametrize("segment", ["YQ", "YQ=", "+/8=", "YQ =", "Y===", "YQ==YQ==", "éQ==", "YR=="])
def test_decode_segment_is_strict(segment: str) -> None:
    with pytest.raises(DecodeError):
        codec.decode_segment(segment)


def test_claims_serialization_is_canonical() -> None:
    assert codec.serialize_claims({"b": 1, "a": {"d": [1, 2], "c": "é"}}) == '{"a":{"c":"é","d":[1,2]},"b":1}'.encode("utf-8")


def test_claims_serialization_rejects_lone_surrogates() -> None:
    with pytest.raises(SerializationError):
        codec.serialize_claims({"name": "\ud800"})


def test_deserialize_header() -> None:
    assert codec.deserialize_header(b'{"alg":"HS256","typ":"JWT","kid":"x"}') == TokenHeader(typ="JWT", alg="HS256")


def test_deserialize_claims_keeps_integers() -> None:
    claims = codec.deserialize_claims(b'{"exp":1700000000,"ratio":0.5}')
    assert isinstance(claims["exp"], int)
    assert isinstance(claims["ratio"], float)


@pytest.mark.parametrize("raw", [b"", b"{", b"1", b'{"x":Infinity}'])
def test_deserialize_claims_rejects_non_objects(raw: bytes) -> None:
    with pytest.raises(DeserializationError):
        codec.deserialize_claims(raw)
