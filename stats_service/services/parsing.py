"""Parsing of the comma-separated ``nums`` query parameter."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Union

from stats_service.services.errors import ParseError

__all__: list[str] = [
    "Ok",
    "Err",
    "ParseResult",
    "parse_numbers",
    "require_numbers",
]

SEPARATOR = ","
# Plain ASCII decimal literals only: no whitespace, nan/inf, digit separators
# or non-ASCII digits (float() would accept "３" or "١٢").
NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class Ok:
    values: list[float]


@dataclass(frozen=True)
class Err:
    error: ParseError


ParseResult = Union[Ok, Err]


def _parse_token(token: str) -> float | None:
    if not NUMBER_RE.fullmatch(token):
        return None
    value = float(token)
    if not math.isfinite(value):
        return None  # e.g. 1e999
    return value


def parse_numbers(raw: str) -> ParseResult:
    """
    Split ``raw`` on commas and parse every token as a float.
    Stops at the first token that is not a number and returns it wrapped in Err.
    """
    values: list[float] = []
    for token in raw.split(SEPARATOR):
        value = _parse_token(token)
        if value is None:
            return Err(ParseError(token))
        values.append(value)
    return Ok(values)


def require_numbers(raw: str) -> list[float]:
    """Like :func:`parse_numbers` but raises the ParseError instead of returning it."""
    result = parse_numbers(raw)
    if isinstance(result, Err):
        raise result.error
    return result.values
