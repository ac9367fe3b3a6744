# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Parsing of share records and base-N digit decoding."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .errors import InvalidDigitError, ShareFormatError
from .policy import policy

_logger = logging.getLogger(__name__)

RESERVED_KEY = "keys"
MIN_BASE = 2
MAX_BASE = 36

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ShareRecord:
    """One share as found in the input: its index, base and digit string."""

    index: int
    base: int
    value: str

    def decode(self, *, max_digits: int | None = None) -> Point:
        return Point(self.index, decode_digits(self.value, self.base, max_digits=max_digits))


@dataclass(frozen=True)
class ReconstructionConfig:
    """``n`` is informational; ``k`` is the exact number of points used."""

    n: int
    k: int


def digit_value(char: str) -> int:
    """Map ``'0'-'9'`` to 0-9 and ``'a'-'z'`` to 10-35; anything else to -1."""
    if len(char) != 1:
        return -1
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "z":
        return 10 + ord(char) - ord("a")
    return -1


def decode_digits(value: str, base: int, *, max_digits: int | None = None) -> int:
    """Decode ``value`` written in ``base``, most significant digit first.

    Decoding is case-insensitive. Signs, separators and whitespace are not
    digits and are rejected with :class:`InvalidDigitError`, as is an empty
    string.
    """

    if not MIN_BASE <= base <= MAX_BASE:
        raise ShareFormatError(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}")
    limit = max_digits if max_digits is not None else policy.max_digits
    if len(value) > limit:
        raise ShareFormatError(f"Digit string exceeds the limit of {limit} characters")
    if not value:
        raise InvalidDigitError(value, base)

    result = 0
    for position, char in enumerate(value):
        # non-ASCII letters such as KELVIN SIGN lower() into ASCII
        digit = digit_value(char.lower()) if char.isascii() else -1
        if digit < 0 or digit >= base:
            raise InvalidDigitError(value, base, position)
        result = result * base + digit
    return result


def _parse_int(raw: Any, field: str) -> int:
    if isinstance(raw, bool):
        raise ShareFormatError(f"{field} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _INTEGER_RE.fullmatch(raw.strip()):
        return int(raw.strip())
    raise ShareFormatError(f"{field} must be an integer, got {raw!r}")


def parse_config(raw: Any, *, share_count: int) -> ReconstructionConfig:
    if not isinstance(raw, Mapping):
        raise ShareFormatError(f"'{RESERVED_KEY}' entry is missing or not a mapping")
    if "k" not in raw:
        raise ShareFormatError(f"'{RESERVED_KEY}' entry has no threshold 'k'")
    k = _parse_int(raw["k"], "k")
    if k < 1:
        raise ShareFormatError(f"Threshold k must be at least 1, got {k}")
    n = _parse_int(raw["n"], "n") if "n" in raw else share_count
    if n != share_count:
        _logger.debug("Declared n=%s differs from %s supplied shares", n, share_count)
    return ReconstructionConfig(n=n, k=k)


def parse_record(key: Any, raw: Any) -> ShareRecord:
    index = _parse_int(key, "Share key")
    if not isinstance(raw, Mapping):
        raise ShareFormatError(f"Share {key!r} is not a mapping")
    for field in ("base", "value"):
        if field not in raw:
            raise ShareFormatError(f"Share {key!r} has no {field!r}")
    base = _parse_int(raw["base"], f"Base of share {key!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise ShareFormatError(f"Share {key!r}: base must be between {MIN_BASE} and {MAX_BASE}, got {base}")
    value = raw["value"]
    if not isinstance(value, str):
        raise ShareFormatError(f"Share {key!r}: value must be a digit string")
    return ShareRecord(index=index, base=base, value=value)


def parse_share_data(share_data: Mapping[str, Any]) -> tuple[ReconstructionConfig, list[ShareRecord]]:
    """Split the input mapping into its configuration and its share records."""

    if not isinstance(share_data, Mapping):
        raise ShareFormatError("Share data must be a mapping")
    records = [parse_record(key, raw) for key, raw in share_data.items() if key != RESERVED_KEY]
    config = parse_config(share_data.get(RESERVED_KEY), share_count=len(records))
    return config, records


def decode_points(records: Iterable[ShareRecord], *, max_digits: int | None = None) -> list[Point]:
    return [record.decode(max_digits=max_digits) for record in records]


__all__ = [
    "Point",
    "ShareRecord",
    "ReconstructionConfig",
    "RESERVED_KEY",
    "digit_value",
    "decode_digits",
    "decode_points",
    "parse_config",
    "parse_record",
    "parse_share_data",
]
