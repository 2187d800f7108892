"""Tokenizing and scalar parsing helpers shared by every cartridge section."""

from __future__ import annotations

import math
import re
from enum import Enum
from functools import lru_cache
from typing import Callable, Iterable, TypeVar

from .errors import MalformedLine

E = TypeVar("E", bound=Enum)

KEY_DELIMITERS = (" ", "_")


@lru_cache(maxsize=None)
def _delimiter_pattern(delimiters: tuple[str, ...]) -> re.Pattern[str]:
    ordered = sorted(delimiters, key=len, reverse=True)
    return re.compile("|".join(re.escape(d) for d in ordered))


def tokenize(
    line: str,
    delimiters: Iterable[str],
    *,
    keep_empty: bool = False,
    limit: int | None = None,
) -> list[str]:
    """Split ``line`` on any of ``delimiters`` and strip each token.

    Consecutive delimiters collapse into one split point unless
    ``keep_empty`` is set, in which case empty fields survive so that a
    trailing blank comment is still reported as a token.  ``limit`` caps
    the number of tokens; the final token keeps any remaining delimiters.
    """

    if limit is not None and limit < 2:
        raise ValueError("limit must be at least 2")
    pattern = _delimiter_pattern(tuple(delimiters))
    maxsplit = 0 if limit is None else limit - 1
    tokens = [part.strip() for part in pattern.split(line, maxsplit=maxsplit)]
    if keep_empty:
        return tokens
    return [token for token in tokens if token]


def split_entry(line: str) -> tuple[str, str] | None:
    """Return ``(key, value)`` split on the first ``=`` or ``None``."""

    key, sep, value = line.partition("=")
    if not sep:
        return None
    return key.strip(), value.strip()


def key_tokens(key: str, delimiters: Iterable[str] = KEY_DELIMITERS) -> list[str]:
    return [token.upper() for token in tokenize(key, delimiters)]


def normalize_key(key: str) -> str:
    return " ".join(key.upper().split())


def parse_int(token: str, line: str) -> int:
    try:
        return int(token.strip())
    except ValueError:
        raise MalformedLine(line, f"expected an integer, got {token!r}") from None


def parse_float(token: str, line: str) -> float:
    try:
        value = float(token.strip())
    except ValueError:
        raise MalformedLine(line, f"expected a number, got {token!r}") from None
    if not math.isfinite(value):
        raise MalformedLine(line, f"expected a finite number, got {token!r}")
    return value


def parse_flag(token: str, line: str) -> bool:
    return parse_int(token, line) != 0


def parse_text(token: str, line: str) -> str:
    return token.strip()


def enum_parser(enum_cls: type[E]) -> Callable[[str, str], E]:
    """Build a parser that maps an integer token onto ``enum_cls``."""

    def parse(token: str, line: str) -> E:
        code = parse_int(token, line)
        try:
            return enum_cls(code)
        except ValueError:
            raise MalformedLine(
                line, f"{code} is not a valid {enum_cls.__name__}"
            ) from None

    return parse


def enum_name_parser(enum_cls: type[E]) -> Callable[[str, str], E]:
    """Build a parser that maps a member name (any case) onto ``enum_cls``."""

    def parse(token: str, line: str) -> E:
        try:
            return enum_cls[token.strip().upper()]
        except KeyError:
            raise MalformedLine(
                line, f"{token.strip()!r} is not a valid {enum_cls.__name__}"
            ) from None

    return parse


def format_int(value: int | bool | Enum) -> str:
    return str(int(value))


def format_name(value: Enum) -> str:
    return value.name


def format_fixed(value: float) -> str:
    return f"{value:.6f}"


def format_decimal(value: float) -> str:
    """Render ``value`` without trailing zeros (``12.5``, ``0``)."""

    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def zero_padded(width: int) -> Callable[[int], str]:
    def render(value: int) -> str:
        return f"{int(value):0{width}d}"

    return render


__all__ = [
    "KEY_DELIMITERS",
    "tokenize",
    "split_entry",
    "key_tokens",
    "normalize_key",
    "parse_int",
    "parse_float",
    "parse_flag",
    "parse_text",
    "enum_parser",
    "enum_name_parser",
    "format_int",
    "format_name",
    "format_fixed",
    "format_decimal",
    "zero_padded",
]
