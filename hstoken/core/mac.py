from __future__ import annotations

import hashlib
import hmac

_DIGEST = hashlib.sha256


def sign(message: bytes, key: bytes) -> bytes:
    return hmac.new(key, message, _DIGEST).digest()


def verify(message: bytes, key: bytes, candidate_mac: bytes) -> bool:
    # compare_digest also returns False on a length mismatch.
    return hmac.compare_digest(sign(message, key), candidate_mac)
