# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Threshold reconstruction of a Shamir secret over the rationals.

The pipeline is a single pass, and any error aborts it:

``parse``
    Turn the input mapping into a :class:`~shamir_recover.codec.ReconstructionConfig`
    and decoded :class:`~shamir_recover.codec.Point` objects.

``select``
    Sort by ascending ``x`` and keep exactly the first ``k`` points. Surplus
    points are dropped without being checked against the others.

``interpolate``
    Evaluate the Lagrange form at ``x = 0`` with exact fractions.

``finalize``
    Turn the resulting fraction into an ``int`` or fail.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from .codec import Point, ReconstructionConfig, decode_points, parse_share_data
from .errors import DuplicateCoordinateError, InsufficientSharesError, NonIntegerResultError
from .fraction import ZERO, Fraction

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reconstruction:
    secret: int
    config: ReconstructionConfig
    selected: tuple[Point, ...]
    discarded: tuple[Point, ...] = field(default=())


def select_points(points: Sequence[Point], k: int) -> tuple[list[Point], list[Point]]:
    """Return ``(selected, discarded)``: the ``k`` smallest-``x`` points and the rest."""
    ordered = sorted(points, key=lambda point: point.x)
    if len(ordered) < k:
        raise InsufficientSharesError(len(ordered), k)
    selected, discarded = ordered[:k], ordered[k:]
    seen: set[int] = set()
    for point in selected:
        if point.x in seen:
            raise DuplicateCoordinateError(point.x)
        seen.add(point.x)
    return selected, discarded


def lagrange_basis_at_zero(i: int, xs: Sequence[int]) -> Fraction:
    """Value at ``x = 0`` of the ``i``-th Lagrange basis polynomial over ``xs``."""
    xi = xs[i]
    num = 1
    den = 1
    for j, xj in enumerate(xs):
        if i == j:
            continue
        num *= 0 - xj
        den *= xi - xj
    return Fraction(num, den)


def interpolate_at_zero(points: Sequence[Point]) -> Fraction:
    """Perform Lagrange interpolation at x=0 over the given points."""
    xs = [point.x for point in points]
    total = ZERO
    for i, point in enumerate(points):
        term = Fraction.multiply(Fraction(point.y, 1), lagrange_basis_at_zero(i, xs))
        total = Fraction.add(total, term)
    return total


def finalize(value: Fraction) -> int:
    if value.denominator == 1:
        return value.numerator
    if value.numerator % value.denominator != 0:
        raise NonIntegerResultError(f"Result is not a whole number: {value}")
    return value.numerator // value.denominator


def reconstruct_detailed(share_data: Mapping[str, Any], *, max_digits: int | None = None) -> Reconstruction:
    """Run the whole pipeline and keep track of which shares were used."""

    config, records = parse_share_data(share_data)
    points = decode_points(records, max_digits=max_digits)
    selected, discarded = select_points(points, config.k)
    if discarded:
        _logger.debug(
            "Threshold %s reached, ignoring shares at x=%s",
            config.k,
            [point.x for point in discarded],
        )
    secret = finalize(interpolate_at_zero(selected))
    _logger.debug("Reconstructed a %s-bit secret from x=%s", secret.bit_length(), [p.x for p in selected])
    return Reconstruction(
        secret=secret,
        config=config,
        selected=tuple(selected),
        discarded=tuple(discarded),
    )


def reconstruct(share_data: Mapping[str, Any]) -> int:
    """
    Recover the secret integer from a mapping of base-encoded shares.
    """
    return reconstruct_detailed(share_data).secret


__all__ = [
    "Reconstruction",
    "select_points",
    "lagrange_basis_at_zero",
    "interpolate_at_zero",
    "finalize",
    "reconstruct",
    "reconstruct_detailed",
]
