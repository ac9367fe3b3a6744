# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Exact-arithmetic Shamir secret reconstruction from base-encoded shares."""

from __future__ import annotations

from .codec import Point, ReconstructionConfig, ShareRecord, decode_digits, parse_share_data
from .errors import (
    DuplicateCoordinateError,
    InsufficientSharesError,
    InvalidDigitError,
    NonIntegerResultError,
    ReconstructionError,
    ShareFormatError,
    ZeroDenominatorError,
)
from .fraction import Fraction, gcd
from .reconstruct import Reconstruction, reconstruct, reconstruct_detailed

__version__ = "0.1.0"

__all__ = [
    "Fraction",
    "gcd",
    "Point",
    "ShareRecord",
    "ReconstructionConfig",
    "Reconstruction",
    "decode_digits",
    "parse_share_data",
    "reconstruct",
    "reconstruct_detailed",
    "ReconstructionError",
    "ZeroDenominatorError",
    "InvalidDigitError",
    "ShareFormatError",
    "InsufficientSharesError",
    "DuplicateCoordinateError",
    "NonIntegerResultError",
]
