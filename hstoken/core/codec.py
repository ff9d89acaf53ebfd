from __future__ import annotations

import base64
import binascii
import json
import re
from collections.abc import Mapping

from pydantic import ValidationError

from hstoken.core.errors import DecodeError, DeserializationError, SerializationError
from hstoken.schemas.token import Claims, TokenHeader

_SEGMENT_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def encode_segment(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii")


def decode_segment(segment: str) -> bytes:
    """Strict inverse of :func:`encode_segment`.

    Only the padded URL-safe alphabet is accepted, and the segment must be the
    canonical encoding of its bytes (unused trailing bits set to zero).
    """
    if len(segment) % 4 or _SEGMENT_RE.fullmatch(segment) is None:
        raise DecodeError("Invalid base64 segment")
    try:
        data = base64.urlsafe_b64decode(segment)
    except binascii.Error as exc:
        raise DecodeError("Invalid base64 segment") from exc
    if encode_segment(data) != segment:
        raise DecodeError("Non-canonical base64 segment")
    return data


def serialize_header(header: TokenHeader) -> bytes:
    return header.model_dump_json().encode("utf-8")


def serialize_claims(claims: Claims) -> bytes:
    if not isinstance(claims, Mapping):
        raise SerializationError(f"Claims must be a mapping, got {type(claims).__name__}")
    for key in claims:
        if not isinstance(key, str):
            raise SerializationError(f"Claim names must be strings, got {key!r}")
    try:
        return json.dumps(
            dict(claims),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Claims are not JSON-representable: {exc}") from exc


def deserialize_header(raw: bytes) -> TokenHeader:
    try:
        return TokenHeader.model_validate_json(raw)
    except ValidationError as exc:
        raise DeserializationError("Malformed token header") from exc


def deserialize_claims(raw: bytes) -> Claims:
    try:
        claims = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DeserializationError("Malformed token claims") from exc
    if not isinstance(claims, dict):
        raise DeserializationError("Token claims must be a JSON object")
    return claims
