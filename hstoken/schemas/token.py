from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

TOKEN_TYPE = "JWT"
ALGORITHM = "HS256"

JSONValue = Union[str, int, float, bool, None, list["JSONValue"], dict[str, "JSONValue"]]
Claims = dict[str, JSONValue]


class TokenHeader(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    typ: str
    alg: str


# The only header this library ever signs.
HS256_HEADER = TokenHeader(typ=TOKEN_TYPE, alg=ALGORITHM)


class VerifyOptions(BaseModel):
    """Caller-selected checks applied after the signature has been verified."""

    model_config = ConfigDict(frozen=True)

    verify_exp: bool = True
    leeway: int = Field(default=0, ge=0)
