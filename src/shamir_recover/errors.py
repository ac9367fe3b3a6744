# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Error types raised while reconstructing a secret."""
from __future__ import annotations


class ReconstructionError(RuntimeError):
    """Base class: the reconstruction failed for this input."""


class ZeroDenominatorError(ReconstructionError, ZeroDivisionError):
    """Raised when a fraction is built with a zero denominator."""


class InvalidDigitError(ReconstructionError, ValueError):
    """Raised when a digit string holds a character invalid in its base."""

    def __init__(self, value: str, base: int, position: int | None = None) -> None:
        self.value = value
        self.base = base
        self.position = position
        if position is None:
            message = f"Empty digit string for base {base}"
        else:
            message = f"Invalid digit {value[position]!r} at position {position} for base {base}"
        super().__init__(message)


class ShareFormatError(ReconstructionError, ValueError):
    """Raised when a share record or the ``keys`` entry is malformed."""


class InsufficientSharesError(ReconstructionError):
    """Raised when fewer points than the threshold are available."""

    def __init__(self, available: int, threshold: int) -> None:
        self.available = available
        self.threshold = threshold
        super().__init__(f"Not enough shares. Need {threshold}, got {available}")


class DuplicateCoordinateError(ReconstructionError):
    """Raised when two selected points share an x-coordinate."""

    def __init__(self, x: int) -> None:
        self.x = x
        super().__init__(f"Duplicate x-coordinate {x} among selected shares")


class NonIntegerResultError(ReconstructionError):
    """Raised when the interpolated value is not a whole number."""


__all__ = [
    "ReconstructionError",
    "ZeroDenominatorError",
    "InvalidDigitError",
    "ShareFormatError",
    "InsufficientSharesError",
    "DuplicateCoordinateError",
    "NonIntegerResultError",
]
