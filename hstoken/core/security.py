from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from hstoken.core import token
from hstoken.core.config import settings
from hstoken.schemas.token import Claims, VerifyOptions

logger = logging.getLogger(__name__)

_RESERVED_CLAIMS = frozenset({"exp", "iat", "sub"})


def create_token(
    *,
    subject: str | None,
    expires_delta: timedelta,
    secret_key: bytes | str,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    now = datetime.now(tz=timezone.utc)
    expire = now + expires_delta
    payload: Claims = {
        name: value for name, value in (extra_claims or {}).items() if name not in _RESERVED_CLAIMS
    }
    payload["exp"] = int(expire.timestamp())
    payload["iat"] = int(now.timestamp())
    if subject is not None:
        payload["sub"] = subject
    issued = token.sign(payload, secret_key)
    logger.debug(f"Issued token for subject {subject} expiring at {payload['exp']}")
    return issued


def create_access_token(subject: str | None, extra_claims: dict[str, Any] | None = None) -> str:
    return create_token(
        subject=subject,
        expires_delta=timedelta(minutes=settings.token_expires_minutes),
        secret_key=settings.token_secret_key,
        extra_claims=extra_claims,
    )


def verify_options_from_settings() -> VerifyOptions:
    return VerifyOptions(verify_exp=settings.token_verify_exp, leeway=settings.token_leeway_seconds)


def decode_access_token(access_token: str) -> Claims:
    return token.parse(access_token, settings.token_secret_key, verify_options_from_settings())
