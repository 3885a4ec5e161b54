"""Uniform result shapes returned to every caller regardless of vendor."""

from dataclasses import dataclass

from .errors import ErrorKind


@dataclass(frozen=True)
class TokenUsage:
    input_tokens: int | None = None
    output_tokens: int | None = None


@dataclass(frozen=True)
class Success:
    text: str
    usage: TokenUsage | None = None


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    detail: str


NormalizedResult = Success | Failure
