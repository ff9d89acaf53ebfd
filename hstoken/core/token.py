from __future__ import annotations

import logging
from datetime import datetime, timezone

from hstoken.core import codec, mac
from hstoken.core.errors import (
    ExpiredTokenError,
    InvalidClaimError,
    InvalidSignatureError,
    MalformedTokenError,
    TokenError,
    UnsupportedAlgorithmError,
    UnsupportedTypeError,
)
from hstoken.schemas.token import ALGORITHM, HS256_HEADER, TOKEN_TYPE, Claims, VerifyOptions

logger = logging.getLogger(__name__)


def _key_bytes(secret: bytes | str) -> bytes:
    if isinstance(secret, str):
        return secret.encode("utf-8")
    if isinstance(secret, (bytes, bytearray, memoryview)):
        return bytes(secret)
    raise TypeError(f"Secret must be bytes or str, got {type(secret).__name__}")


def sign(claims: Claims, secret: bytes | str) -> str:
    """Encode ``claims`` into an HS256 token signed with ``secret``."""
    encoded_header = codec.encode_segment(codec.serialize_header(HS256_HEADER))
    encoded_claims = codec.encode_segment(codec.serialize_claims(claims))
    signing_input = f"{encoded_header}.{encoded_claims}"
    signature = mac.sign(signing_input.encode("ascii"), _key_bytes(secret))
    return f"{signing_input}.{codec.encode_segment(signature)}"


def parse(token: str, secret: bytes | str, options: VerifyOptions | None = None) -> Claims:
    """Verify an HS256 token and return its claims.

    Checks run in a fixed order and the first failure is raised: structure,
    header decoding, header ``typ``/``alg``, signature, claims decoding and,
    when ``options.verify_exp`` is set, the ``exp`` claim. The signature is
    always computed with HMAC-SHA256 whatever the header declares.
    """
    options = options or VerifyOptions()
    try:
        return _parse(token, _key_bytes(secret), options)
    except TokenError as exc:
        logger.debug(f"Rejected token: {exc.code}")
        raise


def _parse(token: str, key: bytes, options: VerifyOptions) -> Claims:
    if not isinstance(token, str):
        raise MalformedTokenError("Token must be a string")
    chunks = token.split(".")
    if len(chunks) != 3 or not all(chunks):
        raise MalformedTokenError()
    header_segment, claims_segment, signature_segment = chunks

    header = codec.deserialize_header(codec.decode_segment(header_segment))
    if header.typ != TOKEN_TYPE:
        raise UnsupportedTypeError(f"Invalid token type {header.typ!r}")
    if header.alg != ALGORITHM:
        raise UnsupportedAlgorithmError(f"Invalid token algorithm {header.alg!r}")

    signature = codec.decode_segment(signature_segment)
    try:
        signing_input = f"{header_segment}.{claims_segment}".encode("ascii")
    except UnicodeEncodeError as exc:
        # Signed tokens are always ASCII, so no key can match this input.
        raise InvalidSignatureError() from exc
    if not mac.verify(signing_input, key, signature):
        raise InvalidSignatureError()

    claims = codec.deserialize_claims(codec.decode_segment(claims_segment))

    if options.verify_exp:
        _check_expiration(claims, options.leeway)
    return claims


def _check_expiration(claims: Claims, leeway: int) -> None:
    if "exp" not in claims:
        return
    exp = claims["exp"]
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        raise InvalidClaimError("exp claim must be a NumericDate")
    if isinstance(exp, float):
        if not exp.is_integer():
            raise InvalidClaimError("exp claim must be an integer timestamp")
        exp = int(exp)

    now = datetime.now(tz=timezone.utc).timestamp()
    if exp + leeway < now:
        raise ExpiredTokenError()
