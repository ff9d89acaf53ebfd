from __future__ import annotations


class TokenError(Exception):
    """Base class for every token signing or verification failure."""

    code = "invalid_token"
    default_message = "Invalid token"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class MalformedTokenError(TokenError):
    code = "malformed_token"
    default_message = "Malformed token"


class DecodeError(TokenError):
    code = "decode_error"
    default_message = "Invalid base64 segment"


class DeserializationError(TokenError):
    code = "deserialization_error"
    default_message = "Invalid JSON segment"


class UnsupportedTypeError(TokenError):
    code = "unsupported_type"
    default_message = "Invalid token type"


class UnsupportedAlgorithmError(TokenError):
    code = "unsupported_algorithm"
    default_message = "Invalid token algorithm"


class InvalidSignatureError(TokenError):
    # Wrong key and tampered payload are reported identically.
    code = "invalid_signature"
    default_message = "Invalid signature"


class InvalidClaimError(TokenError):
    code = "invalid_claim"
    default_message = "Invalid claim"


class ExpiredTokenError(TokenError):
    code = "expired_token"
    default_message = "Expired token"


class SerializationError(TokenError):
    code = "serialization_error"
    default_message = "Claims cannot be serialized"
